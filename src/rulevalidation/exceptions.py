"""Exceptions raised by rulevalidation for structural misuse of the API.

Validation failures are never reported through these; they are ordinary
``Result`` objects with ``valid=False``.
"""


class RuleValidationError(Exception):
    """Base class for all rulevalidation errors."""


class DuplicateRuleKeyError(RuleValidationError):
    """Two rules in the same rule set share a key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'Duplicate validation rule detected for key "{key}"')


class ResultSetFrozenError(RuleValidationError):
    """A result was added to a result set after it was frozen."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'Cannot add result for key "{key}"; result set is frozen')


class RuleSetLoadError(RuleValidationError):
    """A ``module:attribute`` reference could not be resolved to a rule set."""
