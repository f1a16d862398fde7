from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, model_validator

class Span(BaseModel):
    """A half-open ``[start, end)`` range of character offsets."""
    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "Span":
        if self.end < self.start:
            raise ValueError(f"span end {self.end} precedes start {self.start}")
        return self

    @property
    def length(self) -> int:
        return self.end - self.start
