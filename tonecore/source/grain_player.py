"""Granular playback that changes tempo without changing pitch."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from tonecore.source.player import AudioBuffer

_MAX_GRAINS = 8


@dataclass
class _Grain:
    """One windowed slice of the source buffer."""

    buf_start: int = 0
    position: float = 0.0
    size: int = 0
    active: bool = False

    def window(self, pos: int) -> float:
        """Hann window value at ``pos`` within the grain."""
        t = pos / self.size
        return 0.5 * (1.0 - math.cos(2.0 * math.pi * t))


class GrainPlayer:
    """Plays an :class:`AudioBuffer` as overlapping Hann-windowed grains.

    ``playback_rate`` sets how fast the read position moves through the
    buffer (tempo), while each grain is read at normal speed (pitch).
    """

    def __init__(self, buffer: AudioBuffer, sample_rate: Optional[int] = None) -> None:
        self.buffer = buffer
        self.loop = True
        self._position = 0.0
        self._grains = [_Grain() for _ in range(_MAX_GRAINS)]
        self._grain_size = 0.1
        self._overlap = 0.5
        self._playback_rate = 1.0
        self._samples_until_next_grain = 0
        self._playing = False

    @property
    def playing(self) -> bool:
        """Whether the player is producing sound."""
        return self._playing

    @property
    def grain_size(self) -> float:
        """Grain length in seconds, at least 0.01."""
        return self._grain_size

    @grain_size.setter
    def grain_size(self, seconds: float) -> None:
        self._grain_size = max(seconds, 0.01)

    @property
    def overlap(self) -> float:
        """Share of each grain overlapped by the next, 0.1-0.9."""
        return self._overlap

    @overlap.setter
    def overlap(self, value: float) -> None:
        self._overlap = min(max(value, 0.1), 0.9)

    @property
    def playback_rate(self) -> float:
        """Tempo factor, at least 0.1; 1.0 is the original tempo."""
        return self._playback_rate

    @playback_rate.setter
    def playback_rate(self, rate: float) -> None:
        self._playback_rate = max(rate, 0.1)

    def start(self) -> None:
        """Start playback from the beginning."""
        self.start_at(0.0)

    def start_at(self, offset_seconds: float) -> None:
        """Start playback from ``offset_seconds`` into the buffer."""
        self._playing = True
        self._position = offset_seconds * self.buffer.sample_rate
        self._samples_until_next_grain = 0
        for grain in self._grains:
            grain.active = False

    def stop(self) -> None:
        """Stop playback, keeping the current position."""
        self._playing = False

    def position_seconds(self) -> float:
        """Current read position in seconds."""
        return self._position / self.buffer.sample_rate

    def duration(self) -> float:
        """Length of the buffer in seconds."""
        return self.buffer.duration()

    def _grain_samples(self) -> int:
        return int(self._grain_size * self.buffer.sample_rate)

    def _spawn_grain(self) -> None:
        grain_samples = self._grain_samples()
        buf_len = len(self.buffer.data)
        if buf_len == 0 or grain_samples == 0:
            return
        start = int(self._position) % buf_len
        free = next((g for g in self._grains if not g.active), None)
        if free is not None:
            free.buf_start = start
            free.position = 0.0
            free.size = grain_samples
            free.active = True

    def process(self, frames: int, sample_rate: int) -> list[float]:
        """Render the next ``frames`` samples at ``sample_rate``."""
        data = self.buffer.data
        if not self._playing or not data:
            return [0.0] * frames

        rate_ratio = self.buffer.sample_rate / sample_rate
        rate = self._playback_rate * rate_ratio
        hop = max(int((1.0 - self._overlap) * self._grain_samples()), 1)
        buf_len = len(data)

        output = []
        for _ in range(frames):
            if self._samples_until_next_grain == 0:
                self._spawn_grain()
                self._samples_until_next_grain = hop
            self._samples_until_next_grain -= 1

            total = 0.0
            for grain in self._grains:
                if not grain.active:
                    continue
                pos = int(grain.position)
                if pos >= grain.size:
                    grain.active = False
                    continue
                total += data[(grain.buf_start + pos) % buf_len] * grain.window(pos)
                grain.position += rate_ratio
            output.append(total)

            self._position += rate
            if self._position >= buf_len:
                if self.loop:
                    self._position -= buf_len
                else:
                    self._playing = False
        return output