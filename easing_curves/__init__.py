from .easing import EASING_FUNCTIONS, evaluate, sample
from .parsing import tokenize
from .types import CurveConfig, CurveKind
from .validation import CurveInputError, Failure, validate_fields, validate_time

__all__ = [
    "EASING_FUNCTIONS",
    "CurveConfig",
    "CurveInputError",
    "CurveKind",
    "Failure",
    "evaluate",
    "sample",
    "tokenize",
    "validate_fields",
    "validate_time",
]
