"""Decoded audio buffers and a sample player that reads them."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Iterable, Optional

_FORMAT_PCM = 0x0001
_FORMAT_IEEE_FLOAT = 0x0003
_FORMAT_EXTENSIBLE = 0xFFFE


class WavDecodeError(ValueError):
    """Raised when bytes cannot be decoded as a WAV file."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"WAV decode error: {detail}")
        self.detail = detail


@dataclass(frozen=True)
class _WavFormat:
    format_tag: int
    channels: int
    sample_rate: int
    block_align: int
    bits_per_sample: int


def _parse_fmt(body: bytes) -> _WavFormat:
    if len(body) < 16:
        raise WavDecodeError("fmt chunk too short")
    format_tag, channels, sample_rate, _byte_rate, block_align, bits = struct.unpack_from(
        "<HHIIHH", body
    )
    if format_tag == _FORMAT_EXTENSIBLE:
        if len(body) < 40:
            raise WavDecodeError("extensible fmt chunk too short")
        (format_tag,) = struct.unpack_from("<H", body, 24)
    if format_tag not in (_FORMAT_PCM, _FORMAT_IEEE_FLOAT):
        raise WavDecodeError(f"unsupported format tag {format_tag:#06x}")
    if channels == 0:
        raise WavDecodeError("zero channels")
    if format_tag == _FORMAT_PCM and not 1 <= bits <= 32:
        raise WavDecodeError(f"unsupported bits per sample {bits}")
    if format_tag == _FORMAT_IEEE_FLOAT and bits != 32:
        raise WavDecodeError(f"unsupported float bits per sample {bits}")
    width = (bits + 7) // 8
    if block_align != width * channels:
        raise WavDecodeError("block align does not match channels and sample width")
    return _WavFormat(format_tag, channels, sample_rate, block_align, bits)


def _first_channel(fmt: _WavFormat, body: bytes) -> list[float]:
    """Decode the first channel's samples as floats in -1.0..1.0."""
    width = (fmt.bits_per_sample + 7) // 8
    starts = range(0, len(body) - fmt.block_align + 1, fmt.block_align)
    if fmt.format_tag == _FORMAT_IEEE_FLOAT:
        return [struct.unpack_from("<f", body, start)[0] for start in starts]

    scale = float(1 << (fmt.bits_per_sample - 1))
    samples = []
    for start in starts:
        raw = body[start : start + width]
        if width == 1:
            value = raw[0] - 128
        else:
            value = int.from_bytes(raw, "little", signed=True)
        samples.append(value / scale)
    return samples


@dataclass(frozen=True)
class AudioBuffer:
    """Mono samples in -1.0..1.0 at a given sample rate."""

    data: tuple[float, ...]
    sample_rate: int

    @classmethod
    def from_wav(cls, data: bytes) -> "AudioBuffer":
        """Decode a WAV file, keeping only the first channel."""
        if len(data) < 12 or data[:4] != b"RIFF" or data[8:12] != b"WAVE":
            raise WavDecodeError("not a RIFF WAVE file")

        fmt: Optional[_WavFormat] = None
        offset = 12
        while offset + 8 <= len(data):
            chunk_id, size = struct.unpack_from("<4sI", data, offset)
            body = data[offset + 8 : offset + 8 + size]
            offset += 8 + size + (size & 1)
            if chunk_id == b"fmt ":
                fmt = _parse_fmt(body)
            elif chunk_id == b"data":
                if fmt is None:
                    raise WavDecodeError("data chunk before fmt chunk")
                return cls(tuple(_first_channel(fmt, body)), fmt.sample_rate)
        if fmt is None:
            raise WavDecodeError("missing fmt chunk")
        raise WavDecodeError("missing data chunk")

    @classmethod
    def from_samples(cls, samples: Iterable[float], sample_rate: int) -> "AudioBuffer":
        """Wrap raw samples."""
        return cls(tuple(float(s) for s in samples), sample_rate)

    def __len__(self) -> int:
        return len(self.data)

    def duration(self) -> float:
        """Length in seconds."""
        return len(self.data) / self.sample_rate


class Player:
    """Plays an :class:`AudioBuffer` with optional looping and variable rate."""

    def __init__(self, buffer: AudioBuffer) -> None:
        self.buffer = buffer
        self.loop = False
        self.playback_rate = 1.0
        self._position = 0.0
        self._playing = False

    @property
    def playing(self) -> bool:
        """Whether the player is producing sound."""
        return self._playing

    def start(self) -> None:
        """Start or resume playback."""
        self._playing = True

    def stop(self) -> None:
        """Stop playback and rewind to the beginning."""
        self._playing = False
        self._position = 0.0

    def process(self, frames: int, sample_rate: int) -> list[float]:
        """Render the next ``frames`` samples at ``sample_rate``."""
        data = self.buffer.data
        if not self._playing or not data:
            return [0.0] * frames

        rate_ratio = self.buffer.sample_rate / sample_rate
        rate = self.playback_rate * rate_ratio
        buf_len = len(data)
        loop = self.loop

        output = []
        for _ in range(frames):
            if self._position >= buf_len:
                if loop:
                    self._position %= buf_len
                else:
                    self._playing = False
                    output.append(0.0)
                    continue

            idx = int(self._position)
            frac = self._position - idx
            s0 = data[idx]
            if idx + 1 < buf_len:
                s1 = data[idx + 1]
            elif loop:
                s1 = data[0]
            else:
                s1 = 0.0
            output.append(s0 + (s1 - s0) * frac)
            self._position += rate
        return output