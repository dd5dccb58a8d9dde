"""Input validation and setting rule checks for SizeConv."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sizeconv.utils.constants import MAX_PLAUSIBLE_DPI, MIN_PLAUSIBLE_DPI


class ValidationError(ValueError):
    """Raised when an argument is not an acceptable number.

    Attributes:
        parameter: Human-readable name of the offending argument.
    """

    def __init__(self, parameter: str, message: str):
        super().__init__(message)
        self.parameter = parameter


def is_finite_number(value: Any) -> bool:
    """Return True for finite real numbers (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def validate_number(name: str, value: Any) -> None:
    """Raise ValidationError unless *value* is a finite number."""
    if not is_finite_number(value):
        raise ValidationError(name, f"{name} must be a finite number, got {value!r}")


def validate_positive_number(name: str, value: Any) -> None:
    """Raise ValidationError unless *value* is a finite number greater than zero."""
    if not is_finite_number(value) or value <= 0:
        raise ValidationError(name, f"{name} must be a number greater than 0, got {value!r}")


# --- Rule checks (collect findings instead of raising) ---


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def raise_for_errors(self) -> None:
        """Raise ValidationError for the first error finding, if any."""
        if self.errors:
            first = self.errors[0]
            raise ValidationError(first.parameter, first.message)


def check_resolution(name: str, value: Any, result: ValidationResult) -> None:
    """Check a resolution setting: must be positive, should be plausible."""
    if not is_finite_number(value) or value <= 0:
        result.error(name, f"{name} must be a number greater than 0, got {value!r}", value=value)
        return
    if value < MIN_PLAUSIBLE_DPI or value > MAX_PLAUSIBLE_DPI:
        result.warning(
            name,
            f"{name} = {value} dpi is outside [{MIN_PLAUSIBLE_DPI:g}, {MAX_PLAUSIBLE_DPI:g}]",
            value=value,
        )
