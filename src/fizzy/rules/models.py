from pydantic import BaseModel, Field

from fizzy.core.conditions import Condition


class RuleSpec(BaseModel):
    condition: Condition
    substitution: str


class RuleSetSpec(BaseModel):
    rules: list[RuleSpec] = Field(default_factory=list)
