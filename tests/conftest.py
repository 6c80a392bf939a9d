"""Shared fixtures for rulevalidation tests."""

import importlib
import sys
from typing import Any

import pytest

from rulevalidation import Result, Rule


class DummyRule(Rule):
    """Rule that accepts any submitted value."""

    def __init__(self, name: str, default: Any = None, required: bool = False):
        self._name = name
        self._default = default
        self._required = required

    @property
    def key(self) -> str:
        return self._name

    @property
    def required(self) -> bool:
        return self._required

    @property
    def default(self) -> Any:
        return self._default

    def validate(self, value, context):
        return Result.for_valid_value(self._name, value)


@pytest.fixture
def dummy_rule():
    """Factory for rules that accept any value."""
    return DummyRule


@pytest.fixture
def sample_data():
    """Input with two fields that no rule in the tests covers."""
    return {
        "first": "string",
        "second": "ignored",
        "third": 1,
        "fourth": "also ignored",
        "fifth": [1, 2, 3],
    }


RULES_MODULE_SOURCE = '''
from rulevalidation import Result, RuleSet, missing_value_messages, rule


@rule("name", required=True)
def name(value, context):
    if not isinstance(value, str) or not value.strip():
        return Result.for_invalid_value("name", value, "Name must be a non-empty string")
    return Result.for_valid_value("name", value)


@rule("age", default=18)
def age(value, context):
    if not isinstance(value, int) or value < 0:
        return Result.for_invalid_value("age", value, "Age must be a positive integer")
    return Result.for_valid_value("age", value)


signup = RuleSet(name, age)


def build():
    return RuleSet(name, age)


def build_custom():
    return RuleSet(
        name,
        age,
        missing_value_result_factory=missing_value_messages({"name": "Tell us your name"}),
    )


class Forms:
    signup = RuleSet(name)


not_a_rule_set = 42
'''


@pytest.fixture
def rules_module(tmp_path, monkeypatch):
    """Importable module defining sample rule sets; yields its name."""
    module_name = "rv_sample_rules"
    (tmp_path / f"{module_name}.py").write_text(RULES_MODULE_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    importlib.invalidate_caches()

    yield module_name

    sys.modules.pop(module_name, None)
