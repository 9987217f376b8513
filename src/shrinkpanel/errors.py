"""Error handling utilities for shrinkpanel.

Provides exception classes and validation helpers for the layout
tree, its loader and the command line tool. The layout engine itself
never raises.
"""

import math
from pathlib import Path


class ShrinkPanelError(Exception):
    """Base exception for shrinkpanel errors."""

    pass


class LayoutError(ShrinkPanelError):
    """Exception raised when a layout pass cannot run."""

    def __init__(self, reason: str) -> None:
        """Initialize layout error.

        Args:
            reason: Reason for failure
        """
        self.reason = reason
        super().__init__(f"Layout calculation failed: {reason}")


class LoadError(ShrinkPanelError):
    """Exception raised when a layout document cannot be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        """Initialize load error.

        Args:
            path: Path that failed to load
            reason: Reason for failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class ValidationError(ShrinkPanelError):
    """Exception raised when input validation fails."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize validation error.

        Args:
            field: Field name that failed validation
            value: Invalid value
            expected: Expected type/description
        """
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Validation failed for '{field}': expected {expected}, got {value!r}")


def validate_range(value: int | float, min_val: int | float, max_val: int | float, name: str = "value") -> None:
    """Validate that a value is within range.

    Args:
        value: Value to validate
        min_val: Minimum allowed value
        max_val: Maximum allowed value
        name: Name of the value for error messages

    Raises:
        ValidationError: If value is out of range
    """
    if not (min_val <= value <= max_val):
        raise ValidationError(name, value, f"value between {min_val} and {max_val}")


def validate_non_negative(value: object, name: str = "value") -> float:
    """Validate that a value is a finite non-negative number.

    ``bool`` is rejected even though it is an ``int`` subclass.

    Args:
        value: Value to validate
        name: Name of the value for error messages

    Returns:
        The value as a float

    Raises:
        ValidationError: If value is not a number, is negative or is not finite
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(name, value, "finite non-negative number")
    try:
        number = float(value)
    except OverflowError:
        raise ValidationError(name, value, "finite non-negative number") from None
    if number < 0 or not math.isfinite(number):
        raise ValidationError(name, value, "finite non-negative number")
    return number
