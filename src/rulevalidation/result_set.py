"""Ordered, freezable collection of validation results."""

import logging
from collections.abc import Iterator
from typing import Any

from .exceptions import ResultSetFrozenError
from .result import Result

logger = logging.getLogger(__name__)


class ResultSet:
    """Validation report keyed by field name.

    Results keep insertion order, which for sets produced by
    ``RuleSet.validate`` is rule registration order. The set accepts new
    results until ``freeze()`` is called; after that every ``add`` raises
    ``ResultSetFrozenError``.

    Not thread-safe: populate from one thread, then share read-only.
    """

    def __init__(self, *results: Result):
        self._results: dict[str, Result] = {}
        self._frozen = False
        for result in results:
            self.add(result)

    def add(self, result: Result) -> None:
        """Add a result, replacing any earlier result for the same key."""
        if self._frozen:
            logger.warning(f"Rejected result for key '{result.key}': result set is frozen")
            raise ResultSetFrozenError(result.key)
        self._results[result.key] = result

    def freeze(self) -> None:
        """Disallow further additions. Calling it again has no effect."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def is_valid(self) -> bool:
        """True when every result is valid; an empty set is valid."""
        return all(result.valid for result in self._results.values())

    def get_values(self) -> dict[str, Any]:
        """Map every key to its resolved value (``None`` for missing values)."""
        return {key: result.value for key, result in self._results.items()}

    def get_messages(self) -> dict[str, str]:
        """Map keys to messages, for results that carry one."""
        return {
            key: result.message
            for key, result in self._results.items()
            if result.message is not None
        }

    def get_result_for_key(self, key: str) -> Result | None:
        """Result recorded for ``key``, or None."""
        return self._results.get(key)

    @property
    def exit_code(self) -> int:
        """Exit code for CI: 0 = valid, 1 = invalid."""
        return 0 if self.is_valid() else 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "valid": self.is_valid(),
            "values": self.get_values(),
            "messages": self.get_messages(),
            "results": [result.to_dict() for result in self._results.values()],
        }

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[Result]:
        return iter(list(self._results.values()))

    def __contains__(self, key: object) -> bool:
        return key in self._results

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"ResultSet({len(self)} results, {state}, valid={self.is_valid()})"
