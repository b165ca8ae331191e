"""Low-frequency oscillator producing a control signal in a set range."""

from __future__ import annotations

import math

from tonecore.source.oscillator import OscillatorType, sample_waveform


class Lfo:
    """A low-frequency oscillator whose output is mapped to ``minimum..maximum``.

    The waveform (-1..1) is scaled by ``amplitude`` around the centre of the
    range. While stopped, the output holds the waveform's value at the
    initial phase offset.
    """

    def __init__(
        self,
        waveform: OscillatorType,
        frequency: float,
        minimum: float,
        maximum: float,
    ) -> None:
        self.waveform = waveform
        self.frequency = frequency
        self.minimum = minimum
        self.maximum = maximum
        self._amplitude = 1.0
        self._running = False
        self._phase = 0.0
        self._phase_offset = 0.0

    @property
    def amplitude(self) -> float:
        """Share of the range the oscillation covers, 0.0-1.0."""
        return self._amplitude

    @amplitude.setter
    def amplitude(self, value: float) -> None:
        self._amplitude = min(max(value, 0.0), 1.0)

    @property
    def phase_offset(self) -> float:
        """Phase, 0.0-1.0, that ``start`` resets to."""
        return self._phase_offset

    @phase_offset.setter
    def phase_offset(self, value: float) -> None:
        self._phase_offset = value % 1.0

    @property
    def is_running(self) -> bool:
        """Whether the oscillator is advancing."""
        return self._running

    def start(self) -> None:
        """Start running from the phase offset."""
        self._phase = self._phase_offset
        self._running = True

    def stop(self) -> None:
        """Stop; the output then holds the value at the phase offset."""
        self._running = False

    def _map_bipolar(self, bipolar: float) -> float:
        center = (self.minimum + self.maximum) * 0.5
        half_range = (self.maximum - self.minimum) * 0.5
        return center + bipolar * self._amplitude * half_range

    def _stopped_value(self) -> float:
        return self._map_bipolar(sample_waveform(self.waveform, self._phase_offset))

    def process(self, frames: int, sample_rate: int) -> list[float]:
        """Generate the next ``frames`` control values at ``sample_rate``."""
        if not self._running:
            return [self._stopped_value()] * frames

        phase_inc = self.frequency / sample_rate
        output = []
        for _ in range(frames):
            output.append(self._map_bipolar(sample_waveform(self.waveform, self._phase)))
            self._phase += phase_inc
            if self._phase >= 1.0:
                self._phase -= math.floor(self._phase)
        return output