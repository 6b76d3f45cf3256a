import logging
from collections.abc import Callable
from typing import Any

from fizzy.core.text import to_text
from fizzy.rules.models import RuleSetSpec, RuleSpec
from fizzy.rules.rule import Rule
from fizzy.rules.ruleset import RuleSet

logger = logging.getLogger(__name__)


def build_rule(spec: RuleSpec) -> Rule[Any]:
    return Rule(spec.condition.holds, spec.substitution)


def build_ruleset(
    spec: RuleSetSpec,
    formatter: Callable[[Any], str] = to_text,
) -> RuleSet[Any]:
    """Compile a declarative spec into a runtime rule set, keeping order."""
    ruleset: RuleSet[Any] = RuleSet.empty(formatter)
    for rule_spec in spec.rules:
        ruleset = ruleset.add_rule(build_rule(rule_spec))
    logger.debug("Built rule set with %d rules from spec", len(ruleset))
    return ruleset
