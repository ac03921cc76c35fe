# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Validation family vocabulary derived from ``validationCategory`` strings."""

from __future__ import annotations

from enum import Enum
from typing import Final

SDK_CATEGORY: Final[str] = "sdkviolation"
EXCLUDED_CATEGORY: Final[str] = "rpaasviolation"


class ValidationFamily(str, Enum):
    """Closed set of validation families an issue can belong to."""

    SDK = "SDK"
    ARM = "ARM"
    EXCLUDED = "EXCLUDED"

    @property
    def reported(self) -> bool:
        """Return whether issues of this family appear in reports."""

        return self is not ValidationFamily.EXCLUDED


def family_for_category(category: str | None) -> ValidationFamily:
    """Return the validation family for a raw ``validationCategory`` value.

    The comparison is case-insensitive. ``SdkViolation`` selects the SDK
    family, ``RPaaSViolation`` the excluded family, and every other value
    (including a missing category) falls back to ARM.

    Args:
        category: Category string attached to the issue.

    Returns:
        ValidationFamily: Family used to bucket the issue.
    """

    normalised = (category or "").lower()
    if normalised == SDK_CATEGORY:
        return ValidationFamily.SDK
    if normalised == EXCLUDED_CATEGORY:
        return ValidationFamily.EXCLUDED
    return ValidationFamily.ARM
