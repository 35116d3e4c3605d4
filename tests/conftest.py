"""Shared pytest fixtures for easing curve tests."""

from __future__ import annotations

import io
from typing import Callable, Iterable, Optional

import pytest
from rich.console import Console

from easing_curves.types import CurveConfig, CurveKind


def make_config(kind: CurveKind, lower: int = 100, upper: int = 200, duration: float = 1.0) -> CurveConfig:
    return CurveConfig(kind=kind, lower=lower, upper=upper, duration=duration)


@pytest.fixture
def linear_config() -> CurveConfig:
    """Linear curve from 100 to 200 over one second."""
    return make_config(CurveKind.LINEAR)


@pytest.fixture
def in_quad_config() -> CurveConfig:
    """InQuad curve from 100 to 200 over one second."""
    return make_config(CurveKind.IN_QUAD)


@pytest.fixture
def out_quad_config() -> CurveConfig:
    """OutQuad curve from 100 to 200 over one second."""
    return make_config(CurveKind.OUT_QUAD)


@pytest.fixture
def in_out_quad_config() -> CurveConfig:
    """InOutQuad curve from 100 to 200 over one second."""
    return make_config(CurveKind.IN_OUT_QUAD)


@pytest.fixture
def reader() -> Callable[[Iterable[str]], Callable[[], Optional[str]]]:
    """Build a line reader that returns None once the lines run out."""

    def _reader(lines: Iterable[str]) -> Callable[[], Optional[str]]:
        it = iter(lines)
        return lambda: next(it, None)

    return _reader


@pytest.fixture
def console_buffer() -> tuple[Console, io.StringIO]:
    """Plain (no colour) console writing into a buffer."""
    buffer = io.StringIO()
    return Console(file=buffer, highlight=False, width=200), buffer
