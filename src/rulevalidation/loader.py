"""Resolve ``package.module:attribute`` references to rule sets."""

import importlib
import logging

from .exceptions import RuleSetLoadError
from .rule_set import RuleSet

logger = logging.getLogger(__name__)


def load_rule_set(reference: str) -> RuleSet:
    """Import a rule set from a ``module:attribute`` reference.

    The attribute may be a ``RuleSet`` or a zero-argument callable that
    returns one. Dotted attribute paths (``module:Forms.signup``) are allowed.

    Raises:
        RuleSetLoadError: If the reference is malformed or does not resolve
            to a RuleSet
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise RuleSetLoadError(
            f"Invalid rule set reference '{reference}': expected 'module:attribute'"
        )

    try:
        target = importlib.import_module(module_name)
    except ImportError as e:
        raise RuleSetLoadError(f"Cannot import module '{module_name}': {e}") from e

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise RuleSetLoadError(
                f"Module '{module_name}' has no attribute '{attr_path}'"
            ) from e

    if not isinstance(target, RuleSet) and callable(target):
        logger.debug(f"Calling factory {reference}")
        target = target()

    if not isinstance(target, RuleSet):
        raise RuleSetLoadError(
            f"'{reference}' resolved to {type(target).__name__}, expected RuleSet"
        )

    return target
