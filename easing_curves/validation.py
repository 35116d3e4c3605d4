from __future__ import annotations

from enum import Enum
from typing import Sequence

from .types import CurveConfig, CurveKind
from .utils import parse_integer, parse_number


class Failure(str, Enum):
    """Reasons a curve line or time query is rejected, valued by their message."""

    WRONG_FIELD_COUNT = "There are not four valid elements. Please try again:"
    UNKNOWN_CURVE_KIND = (
        "Curve type is invalid, must be 'Linear', 'InQuad', 'OutQuad' or 'InOutQuad'. Please try again:"
    )
    LOWER_NOT_INTEGER = "Lower bound is not an integer. Please try again:"
    LOWER_NEGATIVE = "Lower bound must not be negative. Please try again:"
    UPPER_NOT_INTEGER = "Upper bound is not an integer. Please try again:"
    UPPER_NEGATIVE = "Upper bound must not be negative. Please try again:"
    UPPER_NOT_GREATER_THAN_LOWER = "Upper bound must be greater than Lower bound. Please try again:"
    DURATION_NOT_NUMERIC = "Duration value is not a number. Please try again:"
    DURATION_NOT_POSITIVE = "Duration must be greater than 0. Please try again:"
    NOT_NUMERIC = "Time entered must be a number"
    OUT_OF_RANGE = "Time must be between 0 and {duration}"
    RESULT_NOT_FINITE = "Curve value at this time is not a finite number"


class CurveInputError(ValueError):
    def __init__(self, failure: Failure, **context: object) -> None:
        self.failure = failure
        self.message = failure.value.format(**context)
        super().__init__(self.message)


def validate_fields(fields: Sequence[str]) -> CurveConfig:
    """Turn tokenized fields into a CurveConfig.

    Checks run in a fixed order and the first failing one is raised as a
    CurveInputError: field count, curve kind, lower bound, upper bound,
    upper > lower, then duration.
    """
    if len(fields) != 4:
        raise CurveInputError(Failure.WRONG_FIELD_COUNT)
    kind_text, lower_text, upper_text, duration_text = fields

    if kind_text not in CurveKind.names():
        raise CurveInputError(Failure.UNKNOWN_CURVE_KIND)

    lower = parse_integer(lower_text)
    if lower is None:
        raise CurveInputError(Failure.LOWER_NOT_INTEGER)
    if lower < 0:
        raise CurveInputError(Failure.LOWER_NEGATIVE)

    upper = parse_integer(upper_text)
    if upper is None:
        raise CurveInputError(Failure.UPPER_NOT_INTEGER)
    if upper < 0:
        raise CurveInputError(Failure.UPPER_NEGATIVE)
    if upper <= lower:
        raise CurveInputError(Failure.UPPER_NOT_GREATER_THAN_LOWER)

    duration = parse_number(duration_text)
    if duration is None:
        raise CurveInputError(Failure.DURATION_NOT_NUMERIC)
    if duration <= 0:
        raise CurveInputError(Failure.DURATION_NOT_POSITIVE)

    return CurveConfig(kind=CurveKind(kind_text), lower=lower, upper=upper, duration=duration)


def validate_time(text: str, config: CurveConfig) -> float:
    """Parse a time query, which must be a number within [0, duration]."""
    time = parse_number(text)
    if time is None:
        raise CurveInputError(Failure.NOT_NUMERIC)
    if time < 0 or time > config.duration:
        raise CurveInputError(Failure.OUT_OF_RANGE, duration=f"{config.duration:g}")
    return time
