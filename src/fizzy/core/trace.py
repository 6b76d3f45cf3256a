from typing import Any

from pydantic import BaseModel, Field


class RuleMatch(BaseModel):
    """Outcome of checking a single rule against a value."""

    index: int = Field(description="Position of the rule in its rule set")
    substitution: str = Field(description="Text the rule contributes on match")
    matched: bool = Field(description="Whether the rule's predicate held")


class EvaluationTrace(BaseModel):
    """Complete record of evaluating one value against a rule set."""

    value: Any = Field(description="The evaluated input value")
    matches: list[RuleMatch] = Field(
        default_factory=list, description="Per-rule outcomes in rule order"
    )
    output: str = Field(description="The produced output string")
    fallback: bool = Field(
        description="True when the output is the value's own text"
    )

    @property
    def matched_indices(self) -> list[int]:
        return [m.index for m in self.matches if m.matched]
