"""Parsed but unresolved time and pitch expressions.

Strings such as ``"4n"``, ``"+8n"``, ``"@4n"`` or ``"C4"`` are parsed into
expression objects.  Time expressions resolve to :class:`Seconds` against a
:class:`TimeContext`; pitch expressions resolve to :class:`Hertz` or
:class:`MidiNote`.
"""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from tonecore.time.context import TimeContext
from tonecore.time.value import Hertz, MidiNote, Samples, Seconds, Ticks

_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")

_NOTE_SEMITONES = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}


def _parse_float(text: str) -> Optional[float]:
    """Parse a plain decimal number, or return None if it is not one."""
    if _FLOAT_RE.fullmatch(text) is None:
        return None
    return float(text)


class TimeError(ValueError):
    """Raised for a time notation that cannot be parsed or resolved."""

    def __init__(self, notation: str) -> None:
        super().__init__(f"invalid time notation: {notation}")
        self.notation = notation


class PitchError(ValueError):
    """Raised for a pitch that cannot be parsed or resolved."""

    def __init__(self, pitch: str) -> None:
        super().__init__(f"invalid pitch: {pitch}")
        self.pitch = pitch


# ---------------------------------------------------------------------------
# Time expressions
# ---------------------------------------------------------------------------


class TimeExpr(ABC):
    """An unresolved time expression."""

    @abstractmethod
    def to_seconds(self, ctx: TimeContext) -> Seconds:
        """Resolve the expression to seconds using ``ctx``."""


@dataclass(frozen=True)
class AbsoluteTime(TimeExpr):
    """An absolute time in seconds, e.g. ``"1.5"`` or ``"0.25s"``."""

    seconds: Seconds

    def to_seconds(self, ctx: TimeContext) -> Seconds:
        return self.seconds


@dataclass(frozen=True)
class NoteValue(TimeExpr):
    """A musical note length, e.g. ``"4n"``, ``"8t"`` or ``"4n."``."""

    divisor: float
    dotted: bool = False
    triplet: bool = False

    def to_seconds(self, ctx: TimeContext) -> Seconds:
        quarter = ctx.bpm.quarter_duration().value
        duration = (4.0 / self.divisor) * quarter
        if self.triplet:
            duration *= 2.0 / 3.0
        if self.dotted:
            duration *= 1.5
        return Seconds(duration)


@dataclass(frozen=True)
class BarsBeatsSixteenths(TimeExpr):
    """Bars:beats:sixteenths notation, e.g. ``"1:2:3"``."""

    bars: float
    beats: float
    sixteenths: float = 0.0

    def to_seconds(self, ctx: TimeContext) -> Seconds:
        quarter = ctx.bpm.quarter_duration().value
        numerator = ctx.time_signature[0]
        return Seconds(
            (self.bars * numerator + self.beats + self.sixteenths * 0.25) * quarter
        )


@dataclass(frozen=True)
class FrequencyPeriod(TimeExpr):
    """The period of a frequency, e.g. ``"2hz"`` is half a second."""

    frequency: Hertz

    def to_seconds(self, ctx: TimeContext) -> Seconds:
        return self.frequency.as_period()


@dataclass(frozen=True)
class TickTime(TimeExpr):
    """A transport tick count, e.g. ``"480i"``."""

    ticks: Ticks

    def to_seconds(self, ctx: TimeContext) -> Seconds:
        return ctx.ticks_to_seconds(self.ticks)


@dataclass(frozen=True)
class SampleTime(TimeExpr):
    """A sample count, e.g. ``"44100samples"``."""

    samples: Samples

    def to_seconds(self, ctx: TimeContext) -> Seconds:
        return ctx.samples_to_seconds(self.samples)


@dataclass(frozen=True)
class NowPlus(TimeExpr):
    """The current transport position plus an offset, e.g. ``"+4n"``."""

    inner: TimeExpr

    def to_seconds(self, ctx: TimeContext) -> Seconds:
        return ctx.now + self.inner.to_seconds(ctx)


@dataclass(frozen=True)
class Quantized(TimeExpr):
    """The next grid line at or after now, e.g. ``"@4n"``."""

    grid: TimeExpr

    def to_seconds(self, ctx: TimeContext) -> Seconds:
        now = ctx.now.value
        step = self.grid.to_seconds(ctx).value
        if not step > 0.0:
            raise TimeError("quantize grid must be positive")
        return Seconds(math.ceil(now / step) * step)


def parse_time_expr(text: str) -> TimeExpr:
    """Parse a time notation string into a :class:`TimeExpr`."""
    s = text.strip()
    if not s:
        raise TimeError(s)

    if s.startswith("+"):
        return NowPlus(parse_time_expr(s[1:]))

    if s.startswith("@"):
        return Quantized(parse_time_expr(s[1:]))

    if s.endswith("s"):
        value = _parse_float(s[:-1])
        if value is not None:
            return AbsoluteTime(Seconds(value))

    if s.endswith("samples"):
        value = _parse_float(s[: -len("samples")])
        if value is not None:
            return SampleTime(Samples(value))

    if s.endswith("i") and not s.endswith("mi"):
        value = _parse_float(s[:-1])
        if value is not None:
            return TickTime(Ticks(value))

    value = _parse_float(s)
    if value is not None:
        return AbsoluteTime(Seconds(value))

    if s.endswith("hz"):
        hz = _parse_float(s[: -len("hz")])
        if hz is None or hz <= 0.0:
            raise TimeError(s)
        return FrequencyPeriod(Hertz(hz))

    if ":" in s:
        return _parse_bbs(s)

    return _parse_note_value(s)


def _parse_bbs(s: str) -> BarsBeatsSixteenths:
    parts = s.split(":")
    if len(parts) not in (2, 3):
        raise TimeError(s)
    numbers = [_parse_float(part) for part in parts]
    if any(number is None for number in numbers):
        raise TimeError(s)
    return BarsBeatsSixteenths(*numbers)


def _parse_note_value(s: str) -> NoteValue:
    dotted = s.endswith(".")
    body = s[:-1] if dotted else s

    if body.endswith("n"):
        triplet = False
    elif body.endswith("t"):
        triplet = True
    else:
        raise TimeError(s)

    divisor = _parse_float(body[:-1])
    if divisor is None or divisor <= 0.0:
        raise TimeError(s)
    return NoteValue(divisor, dotted=dotted, triplet=triplet)


# ---------------------------------------------------------------------------
# Pitch expressions
# ---------------------------------------------------------------------------


class PitchExpr(ABC):
    """An unresolved pitch expression."""

    @abstractmethod
    def to_hz(self) -> Hertz:
        """Resolve to a frequency."""

    @abstractmethod
    def to_midi(self) -> MidiNote:
        """Resolve to a MIDI note."""


@dataclass(frozen=True)
class HertzPitch(PitchExpr):
    """A pitch given as a frequency, e.g. ``"440hz"`` or ``"440"``."""

    frequency: Hertz

    def to_hz(self) -> Hertz:
        return self.frequency

    def to_midi(self) -> MidiNote:
        return self.frequency.to_midi()


@dataclass(frozen=True)
class MidiPitch(PitchExpr):
    """A pitch given as a MIDI note number, e.g. ``"69midi"``."""

    note: MidiNote

    def to_hz(self) -> Hertz:
        return self.note.to_hz()

    def to_midi(self) -> MidiNote:
        return self.note


@dataclass(frozen=True)
class NoteNamePitch(PitchExpr):
    """A pitch given as a note name, e.g. ``"C4"``; validated on resolve."""

    name: str

    def to_hz(self) -> Hertz:
        return note_name_to_midi(self.name).to_hz()

    def to_midi(self) -> MidiNote:
        return note_name_to_midi(self.name)


def parse_pitch(text: str) -> PitchExpr:
    """Parse a pitch string into a :class:`PitchExpr`."""
    s = text.strip()
    if not s:
        raise PitchError(s)

    if s.endswith("midi"):
        digits = s[: -len("midi")]
        if _UNSIGNED_RE.fullmatch(digits) is not None:
            number = int(digits)
            if number <= 127:
                return MidiPitch(MidiNote(number))
        raise PitchError(s)

    if s.endswith("hz"):
        hz = _parse_float(s[: -len("hz")])
        if hz is not None and hz > 0.0:
            return HertzPitch(Hertz(hz))
        raise PitchError(s)

    value = _parse_float(s)
    if value is not None:
        if value > 0.0:
            return HertzPitch(Hertz(value))
        raise PitchError(s)

    first = s[0]
    if len(s.encode("utf-8")) >= 2 and first.isascii() and first.isalpha():
        return NoteNamePitch(s)

    raise PitchError(s)


def note_name_to_midi(note: str) -> MidiNote:
    """Convert a note name such as ``"C4"``, ``"A#3"`` or ``"Bb5"`` to MIDI."""
    if not note:
        raise PitchError(note)

    first = note[0]
    base = _NOTE_SEMITONES.get(first.upper()) if first.isascii() else None
    if base is None or len(note) < 2:
        raise PitchError(note)

    if note[1] == "#":
        accidental, rest = 1, note[2:]
    elif note[1] == "b":
        accidental, rest = -1, note[2:]
    else:
        accidental, rest = 0, note[1:]

    if _SIGNED_RE.fullmatch(rest) is None:
        raise PitchError(note)
    octave = int(rest)
    if not 0 <= octave <= 9:
        raise PitchError(note)

    midi = (octave + 1) * 12 + base + accidental
    if not 0 <= midi <= 127:
        raise PitchError(note)
    return MidiNote(midi)