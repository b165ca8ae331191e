"""Typed wrappers for audio time and pitch values, plus level conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable


def _format_number(value: float) -> str:
    """Render a number the short way: integral values without a fraction."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def _round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True, order=True)
class Seconds:
    """A time duration or position in seconds."""

    value: float

    ZERO: ClassVar["Seconds"]

    def to_samples(self, sample_rate: float) -> "Samples":
        """Convert to a sample count at the given sample rate."""
        return Samples(self.value * sample_rate)

    def to_millis(self) -> float:
        """Convert to milliseconds."""
        return self.value * 1000.0

    def __float__(self) -> float:
        return float(self.value)

    def __add__(self, other: "Seconds") -> "Seconds":
        if not isinstance(other, Seconds):
            return NotImplemented
        return Seconds(self.value + other.value)

    def __sub__(self, other: "Seconds") -> "Seconds":
        if not isinstance(other, Seconds):
            return NotImplemented
        return Seconds(self.value - other.value)

    def __mul__(self, factor: float) -> "Seconds":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Seconds(self.value * factor)

    def __str__(self) -> str:
        return f"{_format_number(self.value)}s"


Seconds.ZERO = Seconds(0.0)


@dataclass(frozen=True, order=True)
class Hertz:
    """A frequency in cycles per second."""

    value: float

    A4: ClassVar["Hertz"]

    def as_period(self) -> Seconds:
        """The period of one cycle."""
        return Seconds(1.0 / self.value)

    def to_midi(self) -> "MidiNote":
        """The nearest MIDI note, clamped to 0-127."""
        if not self.value > 0.0:
            return MidiNote(0)
        midi = 69.0 + 12.0 * math.log2(self.value / 440.0)
        clamped = min(max(_round_half_away(midi), 0.0), 127.0)
        return MidiNote(int(clamped))

    def transpose(self, semitones: float) -> "Hertz":
        """Shift the frequency by a number of semitones."""
        return Hertz(self.value * 2.0 ** (semitones / 12.0))

    def harmonize(self, intervals: Iterable[float]) -> list["Hertz"]:
        """Frequencies for each interval (in semitones) above this one."""
        return [self.transpose(interval) for interval in intervals]

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return f"{_format_number(self.value)}hz"


Hertz.A4 = Hertz(440.0)


@dataclass(frozen=True, order=True)
class MidiNote:
    """A MIDI note number."""

    value: int

    def to_hz(self) -> Hertz:
        """Frequency in 12-tone equal temperament, A4 (69) = 440 Hz."""
        return Hertz(440.0 * 2.0 ** ((self.value - 69.0) / 12.0))

    def transpose(self, semitones: int) -> "MidiNote":
        """Shift by whole semitones, clamped to 0-127."""
        return MidiNote(min(max(self.value + semitones, 0), 127))

    def __int__(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return f"midi:{self.value}"


@dataclass(frozen=True, order=True)
class Ticks:
    """A transport tick count (pulses per quarter note based)."""

    value: float

    ZERO: ClassVar["Ticks"]

    def __float__(self) -> float:
        return float(self.value)

    def __add__(self, other: "Ticks") -> "Ticks":
        if not isinstance(other, Ticks):
            return NotImplemented
        return Ticks(self.value + other.value)

    def __str__(self) -> str:
        return f"{_format_number(self.value)}i"


Ticks.ZERO = Ticks(0.0)


@dataclass(frozen=True, order=True)
class Samples:
    """A sample count."""

    value: float

    def to_seconds(self, sample_rate: float) -> Seconds:
        """Convert to seconds at the given sample rate."""
        return Seconds(self.value / sample_rate)

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return f"{_format_number(self.value)}samples"


@dataclass(frozen=True, order=True)
class Beats:
    """A duration or position in quarter-note beats."""

    value: float

    def __float__(self) -> float:
        return float(self.value)

    def __add__(self, other: "Beats") -> "Beats":
        if not isinstance(other, Beats):
            return NotImplemented
        return Beats(self.value + other.value)

    def __str__(self) -> str:
        return f"{_format_number(self.value)}beats"


@dataclass(frozen=True, order=True)
class Bpm:
    """A tempo in beats per minute."""

    value: float

    def quarter_duration(self) -> Seconds:
        """Length of one quarter note at this tempo."""
        return Seconds(60.0 / self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return f"{_format_number(self.value)}bpm"


def db_to_gain(db: float) -> float:
    """Convert decibels to linear gain."""
    return 10.0 ** (db / 20.0)


def gain_to_db(gain: float) -> float:
    """Convert linear gain to decibels."""
    if gain == 0.0:
        return -math.inf
    if gain < 0.0:
        return math.nan
    return 20.0 * math.log10(gain)


def equal_power_scale(percent: float) -> float:
    """Equal-power crossfade curve for a position in 0.0-1.0."""
    return math.sin(percent * math.pi / 2.0)


def interval_to_freq_ratio(semitones: float) -> float:
    """Frequency ratio of an interval given in semitones."""
    return 2.0 ** (semitones / 12.0)