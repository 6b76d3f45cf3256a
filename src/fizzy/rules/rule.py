from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Rule(Generic[T]):
    """A predicate paired with the text it substitutes on a match.

    Any callable and any string, the empty string included, are accepted.
    Exceptions raised by the predicate propagate out of ``check``.
    """

    predicate: Callable[[T], bool]
    substitution: str

    def check(self, value: T) -> str | None:
        if self.predicate(value):
            return self.substitution
        return None
