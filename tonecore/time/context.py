"""Tempo and transport state used to resolve musical time."""

from __future__ import annotations

from dataclasses import dataclass

from tonecore.time.value import Beats, Bpm, Samples, Seconds, Ticks


class TimeContext:
    """Base for objects that supply tempo and transport state.

    Subclasses provide ``bpm`` and ``sample_rate``; ``ppq``, ``now`` and
    ``time_signature`` fall back to 192, zero seconds and 4/4.
    """

    bpm: Bpm
    sample_rate: float
    ppq: int = 192
    now: Seconds = Seconds.ZERO
    time_signature: tuple[int, int] = (4, 4)

    def quarter_duration(self) -> Seconds:
        """Duration of one quarter note at the current tempo."""
        return self.bpm.quarter_duration()

    def beats_to_seconds(self, beats: Beats) -> Seconds:
        """Convert quarter-note beats to seconds."""
        return Seconds(beats.value * self.quarter_duration().value)

    def seconds_to_beats(self, secs: Seconds) -> Beats:
        """Convert seconds to quarter-note beats."""
        return Beats(secs.value / self.quarter_duration().value)

    def seconds_to_ticks(self, secs: Seconds) -> Ticks:
        """Convert seconds to transport ticks."""
        return Ticks(self.seconds_to_beats(secs).value * self.ppq)

    def ticks_to_seconds(self, ticks: Ticks) -> Seconds:
        """Convert transport ticks to seconds."""
        return self.beats_to_seconds(Beats(ticks.value / self.ppq))

    def seconds_to_samples(self, secs: Seconds) -> Samples:
        """Convert seconds to a sample count."""
        return secs.to_samples(self.sample_rate)

    def samples_to_seconds(self, samples: Samples) -> Seconds:
        """Convert a sample count to seconds."""
        return samples.to_seconds(self.sample_rate)


@dataclass(frozen=True)
class StaticTimeContext(TimeContext):
    """A fixed time context for offline work and tests."""

    bpm: Bpm = Bpm(120.0)
    sample_rate: float = 44_100.0
    ppq: int = 192
    now: Seconds = Seconds.ZERO
    time_signature: tuple[int, int] = (4, 4)