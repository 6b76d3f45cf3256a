import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

from fizzy.core.text import to_text
from fizzy.core.trace import EvaluationTrace, RuleMatch
from fizzy.rules.rule import Rule

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RuleSet(Generic[T]):
    """Ordered, immutable collection of rules.

    Each value maps to the concatenation of every matching rule's
    substitution in insertion order. When that concatenation is empty the
    value's own text, produced by ``formatter``, is used instead.
    """

    __slots__ = ("_rules", "_formatter")

    def __init__(
        self,
        rules: Iterable[Rule[T]] = (),
        formatter: Callable[[T], str] = to_text,
    ) -> None:
        self._rules: tuple[Rule[T], ...] = tuple(rules)
        self._formatter = formatter

    @classmethod
    def empty(cls, formatter: Callable[[T], str] = to_text) -> "RuleSet[T]":
        return cls((), formatter)

    @property
    def rules(self) -> tuple[Rule[T], ...]:
        return self._rules

    @property
    def formatter(self) -> Callable[[T], str]:
        return self._formatter

    def add_rule(self, rule: Rule[T]) -> "RuleSet[T]":
        """Return a new rule set with ``rule`` appended after existing ones."""
        return RuleSet((*self._rules, rule), self._formatter)

    def evaluate(self, value: T) -> str:
        parts = []
        for rule in self._rules:
            substitution = rule.check(value)
            if substitution is not None:
                parts.append(substitution)
        result = "".join(parts)
        if not result:
            return self._formatter(value)
        return result

    def explain(self, value: T) -> EvaluationTrace:
        """Evaluate ``value`` and record which rules matched."""
        matches: list[RuleMatch] = []
        for index, rule in enumerate(self._rules):
            substitution = rule.check(value)
            matches.append(
                RuleMatch(
                    index=index,
                    substitution=rule.substitution,
                    matched=substitution is not None,
                )
            )
        accumulated = "".join(
            m.substitution for m in matches if m.matched
        )
        fallback = not accumulated
        output = self._formatter(value) if fallback else accumulated
        return EvaluationTrace(
            value=value, matches=matches, output=output, fallback=fallback
        )

    def apply(self, values: Iterable[T]) -> Iterator[str]:
        """Lazily map ``values`` to output strings, one per element.

        Nothing is pulled from ``values`` until the result is advanced, and
        each advance consumes exactly one input element, so unbounded inputs
        are fine as long as the consumer stops.
        """
        logger.debug("Applying rule set with %d rules", len(self._rules))
        for value in values:
            yield self.evaluate(value)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule[T]]:
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet(rules={list(self._rules)!r})"
