"""Rule contract and a function-based adapter for it.

A rule governs one named field: it knows its key, whether the key must be
present, the default used when an optional key is absent, and how to turn a
present value into a ``Result``.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

from .result import Result

# validator(value, context) -> Result
Validator = Callable[[Any, Mapping[str, Any]], Result]


class Rule(ABC):
    """Base class for validation rules.

    Implementations must be immutable once constructed; the same rule
    instance may be registered in several rule sets.
    """

    @property
    @abstractmethod
    def key(self) -> str:
        """Name of the field this rule validates."""
        pass

    @property
    @abstractmethod
    def required(self) -> bool:
        """Whether absence of the key is itself a validation failure."""
        pass

    @property
    @abstractmethod
    def default(self) -> Any:
        """Value used when the key is absent and the rule is optional."""
        pass

    @abstractmethod
    def validate(self, value: Any, context: Mapping[str, Any]) -> Result:
        """Validate a present value.

        Args:
            value: Value submitted for ``self.key``
            context: The complete input data, for cross-field checks

        Returns:
            Result for this rule's key. Failures are reported as invalid
            results, not raised.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r}, required={self.required})"


class CallableRule(Rule):
    """Rule backed by a plain validator function."""

    def __init__(
        self,
        key: str,
        validator: Validator,
        *,
        required: bool = False,
        default: Any = None,
    ):
        if not key:
            raise ValueError("Rule key must be a non-empty string")
        self._key = key
        self._validator = validator
        self._required = required
        self._default = default

    @property
    def key(self) -> str:
        return self._key

    @property
    def required(self) -> bool:
        return self._required

    @property
    def default(self) -> Any:
        return self._default

    def validate(self, value: Any, context: Mapping[str, Any]) -> Result:
        return self._validator(value, context)


def rule(key: str, *, required: bool = False, default: Any = None) -> Callable[[Validator], CallableRule]:
    """Decorator turning a validator function into a ``CallableRule``.

    Example::

        @rule("age", required=True)
        def age(value, context):
            if not isinstance(value, int) or value < 0:
                return Result.for_invalid_value("age", value, "Age must be a positive integer")
            return Result.for_valid_value("age", value)
    """

    def decorator(func: Validator) -> CallableRule:
        return CallableRule(key, func, required=required, default=default)

    return decorator
