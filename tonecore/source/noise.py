"""White, pink and brown noise sources."""

from __future__ import annotations

from enum import Enum

_U32_MASK = 0xFFFFFFFF
_U32_MAX = float(_U32_MASK)


class NoiseType(Enum):
    """Noise colour."""

    WHITE = "white"
    PINK = "pink"
    BROWN = "brown"


class Noise:
    """A deterministic noise generator seeded with a fixed xorshift32 state."""

    def __init__(self, noise_type: NoiseType) -> None:
        self.noise_type = noise_type
        self._rng_state = 0x12345678
        self._pink = [0.0] * 7
        self._brown = 0.0

    def _next_random(self) -> float:
        """Next xorshift32 value scaled to -1.0..1.0."""
        state = self._rng_state
        state ^= (state << 13) & _U32_MASK
        state ^= state >> 17
        state ^= (state << 5) & _U32_MASK
        self._rng_state = state
        return (state / _U32_MAX) * 2.0 - 1.0

    def _white(self) -> float:
        return self._next_random()

    def _pink_sample(self) -> float:
        # Paul Kellet's filter.
        white = self._next_random()
        b = self._pink
        b[0] = 0.99886 * b[0] + white * 0.0555179
        b[1] = 0.99332 * b[1] + white * 0.0750759
        b[2] = 0.96900 * b[2] + white * 0.153852
        b[3] = 0.86650 * b[3] + white * 0.3104856
        b[4] = 0.55000 * b[4] + white * 0.5329522
        b[5] = -0.7616 * b[5] - white * 0.0168980
        pink = sum(b) + white * 0.5362
        b[6] = white * 0.115926
        return pink * 0.11

    def _brown_sample(self) -> float:
        white = self._next_random()
        self._brown = min(max(self._brown + 0.02 * white, -1.0), 1.0)
        return self._brown

    def process(self, frames: int, sample_rate: int) -> list[float]:
        """Generate the next ``frames`` samples; the sample rate is unused."""
        generate = {
            NoiseType.WHITE: self._white,
            NoiseType.PINK: self._pink_sample,
            NoiseType.BROWN: self._brown_sample,
        }[self.noise_type]
        return [generate() for _ in range(frames)]