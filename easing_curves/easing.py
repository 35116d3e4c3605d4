from __future__ import annotations

import math
from typing import Callable, Dict, List, Tuple

import numpy as np

from .types import CurveConfig, CurveKind
from .utils import truncate
from .validation import CurveInputError, Failure


def linear(config: CurveConfig, time: float) -> float:
    return config.lower + config.diff * (time / config.duration) ** 1


def in_quad(config: CurveConfig, time: float) -> float:
    return config.lower + config.diff * (time / config.duration) ** 2


def out_quad(config: CurveConfig, time: float) -> float:
    return config.upper - config.diff * (1 - time / config.duration) ** 2


def in_out_quad(config: CurveConfig, time: float) -> float:
    """InQuad up to the midpoint, OutQuad after it.

    Both halves span `mid - lower`. The exact midpoint uses the left half.
    """
    duration = config.duration
    half_diff = config.mid - config.lower
    if time <= duration / 2:
        return config.lower + half_diff * (2 * time / duration) ** 2
    denominator = duration * duration / 2
    # tiny durations underflow the denominator to zero
    ratio = (time - duration / 2) / denominator if denominator else math.inf
    factor = 1 - ratio
    return config.upper - half_diff * (factor * factor)


EASING_FUNCTIONS: Dict[CurveKind, Callable[[CurveConfig, float], float]] = {
    CurveKind.LINEAR: linear,
    CurveKind.IN_QUAD: in_quad,
    CurveKind.OUT_QUAD: out_quad,
    CurveKind.IN_OUT_QUAD: in_out_quad,
}


def evaluate(config: CurveConfig, time: float) -> int:
    """Value of the curve at `time`, truncated to an integer.

    `time` must already lie in [0, duration]. Raises CurveInputError when the
    curve value at `time` is not a finite number.
    """
    value = EASING_FUNCTIONS[config.kind](config, time)
    if not math.isfinite(value):
        raise CurveInputError(Failure.RESULT_NOT_FINITE)
    return truncate(value)


def sample(config: CurveConfig, steps: int) -> List[Tuple[float, int]]:
    """Evaluate the curve at `steps` evenly spaced times, both ends included."""
    if steps < 2:
        raise ValueError("steps must be >= 2")
    times = np.linspace(0.0, config.duration, steps)
    # linspace can overshoot the last point by an ulp
    times[-1] = config.duration
    return [(float(t), evaluate(config, float(t))) for t in times]
