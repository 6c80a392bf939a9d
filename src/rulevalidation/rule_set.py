"""Rule set: registers rules by key and validates input data against them."""

import dataclasses
import logging
from collections.abc import Callable, Iterator, KeysView, Mapping
from typing import Any

from .exceptions import DuplicateRuleKeyError
from .result import MISSING_VALUE_MESSAGE, Result
from .result_set import ResultSet
from .rule import Rule

logger = logging.getLogger(__name__)

MissingValueResultFactory = Callable[[str], Result]


def missing_value_messages(
    messages: Mapping[str, str],
    default: str = MISSING_VALUE_MESSAGE,
) -> MissingValueResultFactory:
    """Build a missing-value factory with per-key messages.

    Keys not listed in ``messages`` get ``default``::

        RuleSet(*rules, missing_value_result_factory=missing_value_messages(
            {"title": "Please provide a title"}
        ))
    """
    lookup = dict(messages)

    def factory(key: str) -> Result:
        return Result.for_missing_value(key, lookup.get(key, default))

    return factory


class RuleSet:
    """Unique-by-key collection of rules.

    Rules are applied in registration order. A rule set is built once and
    may then be used by any number of ``validate`` calls; ``add`` is not
    thread-safe.
    """

    def __init__(
        self,
        *rules: Rule,
        missing_value_result_factory: MissingValueResultFactory | None = None,
    ):
        self._rules: dict[str, Rule] = {}
        self._missing_value_result_factory = missing_value_result_factory
        for rule in rules:
            self.add(rule)

    def add(self, rule: Rule) -> None:
        """Register a rule.

        Raises:
            DuplicateRuleKeyError: If a rule for the same key is already registered
        """
        key = rule.key
        if key in self._rules:
            logger.warning(f"Duplicate validation rule for key '{key}'")
            raise DuplicateRuleKeyError(key)
        self._rules[key] = rule

    def get_rule_for_key(self, key: str) -> Rule | None:
        """Registered rule for ``key``, or None."""
        return self._rules.get(key)

    def keys(self) -> KeysView[str]:
        return self._rules.keys()

    @property
    def missing_value_result_factory(self) -> MissingValueResultFactory | None:
        return self._missing_value_result_factory

    def create_missing_value_result_for_key(self, key: str) -> Result:
        """Result recorded when a required key is absent from the input.

        Uses the injected ``missing_value_result_factory`` when present.
        Subclasses may override this to customise messages per key.
        """
        if self._missing_value_result_factory is not None:
            return self._missing_value_result_factory(key)
        return Result.for_missing_value(key)

    def validate(self, data: Mapping[str, Any]) -> ResultSet:
        """Validate input data against every registered rule.

        Args:
            data: Submitted values keyed by field name. Keys without a
                matching rule are ignored. The mapping is not modified.

        Returns:
            Frozen ResultSet with one result per registered rule
        """
        results = ResultSet()

        logger.info(f"Validating {len(data)} input fields against {len(self._rules)} rules")

        for key, rule in self._rules.items():
            if key in data:
                logger.debug(f"Rule '{key}': validating submitted value")
                result = rule.validate(data[key], data)
            elif rule.required:
                logger.debug(f"Rule '{key}': required value missing")
                result = self.create_missing_value_result_for_key(key)
            else:
                logger.debug(f"Rule '{key}': using default value")
                result = Result.for_valid_value(key, rule.default)

            if result.key != key:
                logger.warning(f"Rule '{key}' returned a result for key '{result.key}'; storing it under '{key}'")
                result = dataclasses.replace(result, key=key)
            results.add(result)

        results.freeze()

        logger.info(f"Validation completed: {'valid' if results.is_valid() else 'invalid'}")
        logger.info(f"Found {len(results.get_messages())} messages")

        return results

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(list(self._rules.values()))

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def __repr__(self) -> str:
        return f"RuleSet({', '.join(self._rules)})"
