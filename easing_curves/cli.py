from __future__ import annotations

from typing import List, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .config import AppConfig, load_config, resolve_config_path
from .easing import evaluate as evaluate_curve
from .easing import sample as sample_curve
from .parsing import tokenize
from .session import CurveSession
from .types import CurveConfig, CurveKind
from .validation import CurveInputError, validate_fields, validate_time


app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console(highlight=False)

DEFAULT_STEPS = 11


def _load_app_config(path: Optional[str]) -> Optional[AppConfig]:
    load_dotenv()
    resolved = resolve_config_path(path)
    return load_config(resolved) if resolved else None


def _parse_curve(line: str) -> CurveConfig:
    try:
        return validate_fields(tokenize(line))
    except CurveInputError as e:
        raise typer.BadParameter(e.message, param_hint="curve")


@app.command()
def run(
    curve: Optional[str] = typer.Option(None, help="Curve line; skips the interactive curve prompt"),
    config: Optional[str] = typer.Option(None, help="Path to YAML config (default: $EASING_CURVES_CONFIG)"),
    prefer_config: bool = typer.Option(False, help="If true, config overrides CLI when set"),
):
    """Read a curve, then print its value for every time entered on stdin."""
    cfg = _load_app_config(config)

    def choose(val, cfg_val):
        if prefer_config and cfg_val is not None:
            return cfg_val
        return val if val is not None else cfg_val

    curve = choose(curve, cfg.curve if cfg else None)
    session = CurveSession(console=console)
    if curve:
        session.config = _parse_curve(curve)
        console.print(curve, markup=False, soft_wrap=True)

    times = cfg.times if cfg else None
    if not times:
        session.run()
        return

    if session.config is None:
        session.config = session.read_config()
        if session.config is None:
            return
    session.run_queries(repr(t) for t in times)


@app.command()
def evaluate(
    curve: str = typer.Argument(..., help="Curve line, e.g. Linear,x_t0=100,x_tmax=200,duration=1"),
    times: List[str] = typer.Argument(..., help="Times in [0, duration]"),
):
    """Print the curve value at each given time."""
    curve_config = _parse_curve(curve)
    for text in times:
        try:
            value = evaluate_curve(curve_config, validate_time(text, curve_config))
        except CurveInputError as e:
            raise typer.BadParameter(e.message, param_hint="times")
        console.print(str(value), markup=False)


@app.command()
def sample(
    curve: str = typer.Argument(..., help="Curve line, e.g. Linear,x_t0=100,x_tmax=200,duration=1"),
    steps: Optional[int] = typer.Option(None, min=2, help=f"Number of evenly spaced samples (default {DEFAULT_STEPS})"),
    config: Optional[str] = typer.Option(None, help="Path to YAML config (default: $EASING_CURVES_CONFIG)"),
):
    """Tabulate the curve at evenly spaced times from 0 to duration."""
    cfg = _load_app_config(config)
    steps = steps or (cfg.steps if cfg else None) or DEFAULT_STEPS
    curve_config = _parse_curve(curve)

    table = Table(title=f"{curve_config.kind.value} {curve_config.lower} -> {curve_config.upper}")
    table.add_column("time", justify="right")
    table.add_column("value", justify="right")
    try:
        points = sample_curve(curve_config, steps)
    except CurveInputError as e:
        raise typer.BadParameter(e.message, param_hint="curve")
    for t, value in points:
        table.add_row(f"{t:g}", str(value))
    console.print(table)


@app.command()
def kinds():
    """List the supported curve kinds."""
    for name in CurveKind.names():
        console.print(f"[bold green]{name}[/bold green]")


if __name__ == "__main__":
    app()
