"""
Validation of partially built entities.

Builders report which required fields are still missing through a
ValidationResult instead of producing a partially initialised record.
"""

from dataclasses import dataclass, field
from typing import List, Any


@dataclass
class ValidationError:
    """Represents a single validation error."""

    field: str
    message: str
    value: Any = None

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.field}: {self.message} (value: {self.value})"
        return f"{self.field}: {self.message}"


@dataclass
class ValidationResult:
    """Result of a validation operation."""

    errors: List[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0

    def add_error(self, field: str, message: str, value: Any = None) -> None:
        """Add a validation error."""
        self.errors.append(ValidationError(field, message, value))

    def require(self, field: str, value: Any) -> None:
        """Record an error if a required field has not been set."""
        if value is None:
            self.add_error(field, "required field missing")

    @property
    def missing_fields(self) -> List[str]:
        return [error.field for error in self.errors]

    def __str__(self) -> str:
        if self.is_valid:
            return "Valid"
        return f"Invalid ({len(self.errors)} errors)"

    def get_error_messages(self) -> List[str]:
        """Get all error messages as strings."""
        return [str(error) for error in self.errors]
