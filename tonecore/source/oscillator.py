"""Periodic waveform generation."""

from __future__ import annotations

import math
from enum import Enum


class OscillatorType(Enum):
    """Oscillator waveform shape."""

    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"


def sample_waveform(waveform: OscillatorType, phase: float) -> float:
    """One sample of ``waveform`` at ``phase`` in 0.0-1.0, in -1.0..1.0."""
    if waveform is OscillatorType.SINE:
        return math.sin(phase * 2.0 * math.pi)
    if waveform is OscillatorType.SQUARE:
        return 1.0 if phase < 0.5 else -1.0
    if waveform is OscillatorType.SAWTOOTH:
        return 2.0 * phase - 1.0
    if waveform is OscillatorType.TRIANGLE:
        return 4.0 * phase - 1.0 if phase < 0.5 else -4.0 * phase + 3.0
    raise ValueError(f"unknown waveform: {waveform!r}")


class Oscillator:
    """A source of a periodic waveform at a settable frequency."""

    def __init__(self, waveform: OscillatorType, frequency: float) -> None:
        self.waveform = waveform
        self.frequency = frequency
        self._phase = 0.0

    def process(self, frames: int, sample_rate: int) -> list[float]:
        """Generate the next ``frames`` samples at ``sample_rate``."""
        phase_inc = self.frequency / sample_rate
        output = []
        for _ in range(frames):
            output.append(sample_waveform(self.waveform, self._phase))
            self._phase += phase_inc
            if self._phase >= 1.0:
                self._phase -= 1.0
        return output