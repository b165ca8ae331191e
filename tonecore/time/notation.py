"""Musical time notation resolved to seconds at a given tempo."""

from __future__ import annotations

from tonecore.time.context import StaticTimeContext
from tonecore.time.expr import TimeError, parse_time_expr
from tonecore.time.value import Bpm, Seconds


class TimeParseError(ValueError):
    """Raised when a time notation cannot be turned into seconds."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"invalid time notation: {detail}")
        self.detail = detail


def parse_time(notation: str, bpm: float) -> float:
    """Resolve a time notation to seconds at ``bpm``.

    Accepts plain numbers, note values (``"4n"``, ``"8t"``, ``"4n."``),
    bars:beats:sixteenths in 4/4, and frequencies (``"2hz"``).
    """
    ctx = StaticTimeContext(Bpm(bpm), 44_100.0, 192, Seconds.ZERO)
    try:
        return parse_time_expr(notation).to_seconds(ctx).value
    except TimeError as exc:
        raise TimeParseError(str(exc)) from exc