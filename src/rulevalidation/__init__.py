"""rulevalidation - rule-based validation of input data maps.

Register named rules in a ``RuleSet``, validate a mapping of submitted
values, and inspect the frozen ``ResultSet`` that comes back.
"""

__version__ = "0.1.0"
__author__ = "rpapub"
__email__ = "contact@rpapub.dev"
__description__ = "Rule-based validation of input data maps"

from rulevalidation.exceptions import (
    DuplicateRuleKeyError,
    ResultSetFrozenError,
    RuleSetLoadError,
    RuleValidationError,
)
from rulevalidation.result import MISSING_VALUE_MESSAGE, Result
from rulevalidation.result_set import ResultSet
from rulevalidation.rule import CallableRule, Rule, rule
from rulevalidation.rule_set import MissingValueResultFactory, RuleSet, missing_value_messages

__all__ = [
    "__version__",
    "__author__",
    "__email__",
    "__description__",
    "MISSING_VALUE_MESSAGE",
    "CallableRule",
    "DuplicateRuleKeyError",
    "MissingValueResultFactory",
    "Result",
    "ResultSet",
    "ResultSetFrozenError",
    "Rule",
    "RuleSet",
    "RuleSetLoadError",
    "RuleValidationError",
    "missing_value_messages",
    "rule",
]
