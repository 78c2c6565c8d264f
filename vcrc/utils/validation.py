"""Rule collection and range checking for component and cycle inputs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from vcrc.core.errors import ConstructionValidationError


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
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

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

    def require(self, condition: bool, parameter: str, message: str, **kwargs: Any) -> None:
        """Record an error unless *condition* holds."""
        if not condition:
            self.error(parameter, message, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        self.messages.extend(other.messages)

    def raise_if_invalid(self) -> None:
        """Raise ConstructionValidationError carrying every error message."""
        if not self.is_valid:
            raise ConstructionValidationError([m.message for m in self.errors])


# --- Common validators ---


def validate_open_range(
    name: str,
    value: float,
    low: float,
    high: float,
    result: ValidationResult,
    message: str,
) -> None:
    """Validate that a value falls within (low, high)."""
    if not low < value < high:
        result.error(name, message, value=value, limit=(low, high))


def validate_closed_range(
    name: str,
    value: float,
    low: float,
    high: float,
    result: ValidationResult,
    message: str,
) -> None:
    """Validate that a value falls within [low, high]."""
    if not low <= value <= high:
        result.error(name, message, value=value, limit=(low, high))


def check(parameter: str, condition: bool, message: str) -> None:
    """Raise immediately for a single cross-field rule."""
    result = ValidationResult()
    result.require(condition, parameter, message)
    result.raise_if_invalid()
