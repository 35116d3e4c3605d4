from __future__ import annotations

from typing import List

FORMAT_HINT = "Linear,x_t0=100,x_tmax=200,duration=1"


def _value_after_equals(token: str) -> str:
    _, sep, value = token.partition("=")
    return value if sep else ""


def tokenize(line: str) -> List[str]:
    """Split a curve line such as "Linear,x_0=100,x_max=200,dur=1.0".

    The first token is the curve kind, taken verbatim. Every later token keeps
    only the text after its first "=" ("" if it has none). Nothing is checked
    here: a malformed line just yields the wrong number of fields.
    """
    tokens = line.rstrip("\r\n").split(",")
    return [tokens[0]] + [_value_after_equals(token) for token in tokens[1:]]
