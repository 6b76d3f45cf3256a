from typing import Any

from fizzy.core.conditions import DivisibleBy
from fizzy.rules.models import RuleSetSpec, RuleSpec
from fizzy.rules.rule import Rule
from fizzy.rules.ruleset import RuleSet


def divisible_by(divisor: int, substitution: str) -> Rule[Any]:
    """Rule matching values evenly divisible by ``divisor``.

    ``divisor`` and zero are lifted into the value's own type, so the rule
    works for any type constructible from an int that supports ``%`` and
    ``==``. A zero divisor is not rejected; the remainder error surfaces
    when the rule is checked.
    """

    def _matches(value: Any) -> bool:
        kind = type(value)
        return value % kind(divisor) == kind(0)

    return Rule(_matches, substitution)


def fizz_buzz() -> RuleSet[Any]:
    return (
        RuleSet.empty()
        .add_rule(divisible_by(3, "fizz"))
        .add_rule(divisible_by(5, "buzz"))
    )


def fizz_buzz_spec() -> RuleSetSpec:
    """Declarative equivalent of ``fizz_buzz``."""
    return RuleSetSpec(
        rules=[
            RuleSpec(
                condition=DivisibleBy(divisor=3), substitution="fizz"
            ),
            RuleSpec(
                condition=DivisibleBy(divisor=5), substitution="buzz"
            ),
        ]
    )
