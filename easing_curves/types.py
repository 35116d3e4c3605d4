from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CurveKind(str, Enum):
    LINEAR = "Linear"
    IN_QUAD = "InQuad"
    OUT_QUAD = "OutQuad"
    IN_OUT_QUAD = "InOutQuad"

    @classmethod
    def names(cls) -> List[str]:
        return [kind.value for kind in cls]


class CurveConfig(BaseModel):
    """Parameters of one easing curve.

    `lower` is the value at time 0 and `upper` the value at `duration`.
    The query time is never stored here; pass it to the evaluator.
    """

    model_config = ConfigDict(frozen=True)

    kind: CurveKind = Field(..., description="Curve shape")
    lower: int = Field(..., ge=0, description="Value at time 0")
    upper: int = Field(..., ge=0, description="Value at time == duration")
    duration: float = Field(..., gt=0, description="Length of the curve in seconds")

    @model_validator(mode="after")
    def _check_bounds(self) -> "CurveConfig":
        if self.upper <= self.lower:
            raise ValueError("upper must be greater than lower")
        return self

    @property
    def diff(self) -> int:
        return self.upper - self.lower

    @property
    def mid(self) -> int:
        # integer midpoint, truncated
        return self.lower + self.diff // 2
