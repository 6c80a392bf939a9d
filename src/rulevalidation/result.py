"""Per-field validation outcome."""

from dataclasses import dataclass
from typing import Any

MISSING_VALUE_MESSAGE = "Missing required value"


@dataclass(frozen=True, slots=True)
class Result:
    """Immutable outcome of validating a single field.

    Build instances through the named constructors rather than directly::

        Result.for_valid_value("title", "Hello")
        Result.for_missing_value("title")
        Result.for_invalid_value("age", -1, "Age must be positive")
    """
    key: str
    value: Any = None
    valid: bool = True
    message: str | None = None

    @classmethod
    def for_valid_value(cls, key: str, value: Any) -> "Result":
        """Result for a value that passed validation."""
        return cls(key=key, value=value, valid=True, message=None)

    @classmethod
    def for_missing_value(cls, key: str, message: str = MISSING_VALUE_MESSAGE) -> "Result":
        """Result for a required key absent from the input."""
        return cls(key=key, value=None, valid=False, message=message)

    @classmethod
    def for_invalid_value(cls, key: str, value: Any, message: str) -> "Result":
        """Result for a value that failed validation.

        The value is kept so callers can echo it back (e.g. re-populating a form).
        """
        return cls(key=key, value=value, valid=False, message=message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for report output."""
        return {
            "key": self.key,
            "value": self.value,
            "valid": self.valid,
            "message": self.message,
        }
