# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders."""

from __future__ import annotations

from .loader import load_settings
from .models import ConfigError, DiffSettings

__all__ = ["ConfigError", "DiffSettings", "load_settings"]
