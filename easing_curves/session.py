from __future__ import annotations

import sys
from typing import Callable, Iterable, Optional

from rich.console import Console

from .easing import evaluate
from .parsing import FORMAT_HINT, tokenize
from .types import CurveConfig
from .validation import CurveInputError, validate_fields, validate_time

LineReader = Callable[[], Optional[str]]


def read_stdin_line() -> Optional[str]:
    """Read one line from stdin without its terminator; None at end of input."""
    line = sys.stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


class CurveSession:
    """Console loop: read a curve line, then evaluate time queries against it.

    The loop ends when `read_line` returns None. Bad input is reported and
    the same prompt is repeated.
    """

    def __init__(
        self,
        read_line: LineReader = read_stdin_line,
        console: Optional[Console] = None,
        config: Optional[CurveConfig] = None,
    ) -> None:
        self.read_line = read_line
        self.console = console or Console(highlight=False)
        self.config = config

    def _say(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def _reject(self, error: CurveInputError) -> None:
        self.console.print(error.message, style="yellow", markup=False, highlight=False, soft_wrap=True)

    def read_config(self) -> Optional[CurveConfig]:
        self._say(f"Please enter Easing Curve details, in the following format:\n{FORMAT_HINT}\n")
        while True:
            line = self.read_line()
            if line is None:
                return None
            try:
                config = validate_fields(tokenize(line))
            except CurveInputError as e:
                self._reject(e)
                continue
            self._say(line)
            return config

    def query(self, text: str) -> Optional[int]:
        """Validate and evaluate one time query, printing the outcome."""
        if self.config is None:
            raise RuntimeError("No curve configured. Call read_config() first.")
        try:
            time = validate_time(text, self.config)
            result = evaluate(self.config, time)
        except CurveInputError as e:
            self._reject(e)
            return None
        self._say(str(result))
        return result

    def run_queries(self, queries: Iterable[str]) -> int:
        count = 0
        for text in queries:
            if self.query(text) is not None:
                count += 1
        return count

    def _lines(self) -> Iterable[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line

    def run(self) -> int:
        """Run until input ends. Returns the number of results printed."""
        if self.config is None:
            self.config = self.read_config()
            if self.config is None:
                return 0
        return self.run_queries(self._lines())
