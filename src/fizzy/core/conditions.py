"""Serializable divisibility conditions for declarative rules.

Integer constants are converted into the checked value's own type before any
arithmetic, so one condition serves int, float, Fraction, Decimal and custom
numeric types alike.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


def _as_type_of(value: Any, n: int) -> Any:
    return type(value)(n)


class DivisibleBy(BaseModel):
    kind: Literal["divisible_by"] = "divisible_by"
    divisor: int

    @field_validator("divisor")
    @classmethod
    def divisor_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("divisor must be >= 1")
        return v

    def holds(self, value: Any) -> bool:
        return value % _as_type_of(value, self.divisor) == _as_type_of(
            value, 0
        )

    def describe(self, subject: str = "number") -> str:
        return f"the {subject} is divisible by {self.divisor}"


class RemainderIs(BaseModel):
    """``value mod divisor == remainder`` with a non-negative remainder."""

    kind: Literal["remainder"] = "remainder"
    divisor: int
    remainder: int

    @field_validator("divisor")
    @classmethod
    def divisor_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("divisor must be >= 1")
        return v

    @model_validator(mode="after")
    def remainder_in_range(self) -> "RemainderIs":
        if not 0 <= self.remainder < self.divisor:
            raise ValueError(
                f"remainder must be in [0, {self.divisor}), "
                f"got {self.remainder}"
            )
        return self

    def holds(self, value: Any) -> bool:
        divisor = _as_type_of(value, self.divisor)
        wanted = _as_type_of(value, self.remainder)
        # Decimal keeps the dividend's sign: Decimal(-1) % 3 == -1.
        rem = value % divisor
        return rem == wanted or rem + divisor == wanted

    def describe(self, subject: str = "number") -> str:
        return (
            f"the {subject} leaves remainder {self.remainder} "
            f"when divided by {self.divisor}"
        )


class Negation(BaseModel):
    kind: Literal["not"] = "not"
    operand: "Condition"

    def holds(self, value: Any) -> bool:
        return not self.operand.holds(value)

    def describe(self, subject: str = "number") -> str:
        return f"it is not the case that {self.operand.describe(subject)}"


class AllOf(BaseModel):
    kind: Literal["all_of"] = "all_of"
    operands: list["Condition"]

    @model_validator(mode="after")
    def at_least_two(self) -> "AllOf":
        if len(self.operands) < 2:
            raise ValueError("all_of needs at least 2 operands")
        return self

    def holds(self, value: Any) -> bool:
        return all(op.holds(value) for op in self.operands)

    def describe(self, subject: str = "number") -> str:
        return " and ".join(op.describe(subject) for op in self.operands)


class AnyOf(BaseModel):
    kind: Literal["any_of"] = "any_of"
    operands: list["Condition"]

    @model_validator(mode="after")
    def at_least_two(self) -> "AnyOf":
        if len(self.operands) < 2:
            raise ValueError("any_of needs at least 2 operands")
        return self

    def holds(self, value: Any) -> bool:
        return any(op.holds(value) for op in self.operands)

    def describe(self, subject: str = "number") -> str:
        return " or ".join(op.describe(subject) for op in self.operands)


Condition = Annotated[
    DivisibleBy | RemainderIs | Negation | AllOf | AnyOf,
    Field(discriminator="kind"),
]

Negation.model_rebuild()
AllOf.model_rebuild()
AnyOf.model_rebuild()
