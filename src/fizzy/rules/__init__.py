"""rules family: ordered substitution rules applied lazily to value streams."""

from fizzy.rules.build import build_rule, build_ruleset
from fizzy.rules.describe import describe_ruleset
from fizzy.rules.models import RuleSetSpec, RuleSpec
from fizzy.rules.presets import divisible_by, fizz_buzz, fizz_buzz_spec
from fizzy.rules.rule import Rule
from fizzy.rules.ruleset import RuleSet

__all__ = [
    "Rule",
    "RuleSet",
    "RuleSetSpec",
    "RuleSpec",
    "build_rule",
    "build_ruleset",
    "describe_ruleset",
    "divisible_by",
    "fizz_buzz",
    "fizz_buzz_spec",
]
