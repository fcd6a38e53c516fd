"""Seeded random number generation and weighted distributions."""

from __future__ import annotations

import secrets
import struct
from dataclasses import dataclass, field
from typing import Generic, NamedTuple, Sequence, TypeVar

T = TypeVar("T")

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
_F32_MAX = 3.4028234663852886e38


class ProbableValue(NamedTuple, Generic[T]):
    """A value paired with the probability of choosing it."""

    probability: float
    value: T


@dataclass
class RandomDistConfig(Generic[T]):
    """A list of values with their probabilities."""

    values: list[ProbableValue[T]] = field(default_factory=list)

    def get(self, index: int) -> ProbableValue[T]:
        return self.values[index]

    def normalize_probs(self) -> None:
        """Scale probabilities to sum to one; all zeros become uniform."""
        total = sum(p for p, _ in self.values)
        if total == 1.0:
            return
        if total == 0.0:
            share = 1.0 / len(self.values) if self.values else 0.0
            self.values = [ProbableValue(share, v) for _, v in self.values]
        else:
            self.values = [ProbableValue(p / total, v) for p, v in self.values]


@dataclass(frozen=True)
class AliasTable:
    """Alias-method table for sampling indices by weight."""

    probabilities: tuple[float, ...]
    aliases: tuple[int, ...]

    def sample(self, rng: "Random") -> int:
        candidate = rng.in_range(0, len(self.probabilities))
        if rng.in_range(0.0, 1.0) < self.probabilities[candidate]:
            return candidate
        return self.aliases[candidate]


def _alias_table(weights: Sequence[float]) -> AliasTable:
    if not weights:
        raise ValueError("no weights given")
    if any(not (w >= 0.0) or w == float("inf") for w in weights):
        raise ValueError("weights must be finite and non-negative")
    total = sum(weights)
    if total == 0.0:
        raise ValueError("all weights are zero")

    count = len(weights)
    scaled = [w * count / total for w in weights]
    probabilities = [1.0] * count
    aliases = list(range(count))
    small = [i for i, s in enumerate(scaled) if s < 1.0]
    large = [i for i, s in enumerate(scaled) if s >= 1.0]

    while small and large:
        low, high = small.pop(), large.pop()
        probabilities[low] = scaled[low]
        aliases[low] = high
        scaled[high] -= 1.0 - scaled[low]
        (small if scaled[high] < 1.0 else large).append(high)

    return AliasTable(tuple(probabilities), tuple(aliases))


@dataclass
class RandomDist(Generic[T]):
    """A weighted distribution over the values of a config."""

    config: RandomDistConfig[T] = field(default_factory=RandomDistConfig)

    def weights(self) -> AliasTable:
        """Build a sampling table; raises ValueError for invalid weights."""
        return _alias_table([p for p, _ in self.config.values])


Seed = int


def _diffuse(x: int) -> int:
    x = (x * 0x6EED0E9DA4D94A4F) & _MASK64
    x ^= (x >> 32) >> (x >> 60)
    return (x * 0x6EED0E9DA4D94A4F) & _MASK64


def seed_from_str(seed: str) -> Seed:
    """Hash a string into a 64-bit seed (SeaHash)."""
    data = seed.encode("utf-8")
    lanes = [0x16F11FE89B0D677C, 0xB480A793D8E6C86C, 0x6FE2E5AAF078EBC9, 0x14F994A4C5259381]
    for chunk_no, offset in enumerate(range(0, len(data), 8)):
        chunk = int.from_bytes(data[offset:offset + 8], "little")
        lane = chunk_no % 4
        lanes[lane] = _diffuse(lanes[lane] ^ chunk)
    a, b, c, d = lanes
    return _diffuse(a ^ b ^ c ^ d ^ len(data))


def random_seed() -> Seed:
    """A fresh 64-bit seed from the operating system."""
    return secrets.randbits(64)


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _MASK64


def _splitmix_state(seed: int) -> list[int]:
    state = []
    for _ in range(4):
        seed = (seed + 0x9E3779B97F4A7C15) & _MASK64
        z = seed
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
        state.append(z ^ (z >> 31))
    return state


def _seed_state(seed: int) -> list[int]:
    """Expand a 64-bit seed into xoshiro256++ state via PCG32 output."""
    seed &= _MASK64
    words = bytearray()
    for _ in range(8):
        seed = (seed * 6364136223846793005 + 11634580027462260723) & _MASK64
        xorshifted = (((seed >> 18) ^ seed) >> 27) & _MASK32
        rot = seed >> 59
        value = ((xorshifted >> rot) | (xorshifted << ((32 - rot) % 32))) & _MASK32
        words += value.to_bytes(4, "little")
    state = list(struct.unpack("<4Q", bytes(words)))
    if not any(state):
        state = _splitmix_state(0)
    return state


class Random:
    """A reproducible xoshiro256++ generator bound to its seed."""

    def __init__(self, seed: Seed = 0) -> None:
        self.seed = seed
        self._state = _seed_state(seed)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Random):
            return NotImplemented
        return self.seed == other.seed and self._state == other._state

    def __repr__(self) -> str:
        return f"Random(seed={self.seed})"

    def reset(self) -> None:
        """Restart the sequence from the seed."""
        self._state = _seed_state(self.seed)

    def gen_u64(self) -> int:
        s0, s1, s2, s3 = self._state
        result = (_rotl((s0 + s3) & _MASK64, 23) + s0) & _MASK64
        t = (s1 << 17) & _MASK64
        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = _rotl(s3, 45)
        self._state = [s0, s1, s2, s3]
        return result

    def _gen_u32(self) -> int:
        return self.gen_u64() >> 32

    def sample_index(self, dist: RandomDist) -> int:
        return dist.weights().sample(self)

    def sample_value(self, dist: RandomDist[T]) -> T:
        return dist.config.get(self.sample_index(dist)).value

    def in_range(self, start, stop):
        """Uniform value in [start, stop); integers if both bounds are ints."""
        if stop <= start:
            raise ValueError(f"empty range {start}..{stop}")
        if isinstance(start, int) and isinstance(stop, int):
            span = stop - start
            if span > _MASK64:
                raise ValueError("range does not fit in 64 bits")
            zone = ((span << (64 - span.bit_length())) - 1) & _MASK64
            while True:
                product = self.gen_u64() * span
                if product & _MASK64 <= zone:
                    return start + (product >> 64)
        scale = float(stop) - float(start)
        while True:
            bits = (self.gen_u64() >> 12) | 0x3FF0000000000000
            unit = struct.unpack("<d", struct.pack("<Q", bits))[0] - 1.0
            value = unit * scale + float(start)
            if value < stop:
                return value

    def gen_bool(self, probability: float) -> bool:
        """True with the given probability, clamped to [0, 1]."""
        probability = min(max(probability, 0.0), 1.0)
        if probability == 1.0:
            return True
        threshold = int(probability * 2.0**64)
        return self.gen_u64() < threshold

    def gen_normal(self) -> float:
        """A 32-bit draw divided by the largest single-precision float."""
        return self._gen_u32() / _F32_MAX

    def pick(self, values: Sequence[T]) -> T:
        return values[self.in_range(0, len(values))]

    def skip(self) -> None:
        """Consume one value."""
        self.gen_u64()

    def skip_n(self, n: int) -> None:
        """Consume ``n`` values."""
        for _ in range(n):
            self.skip()