"""The 64-bit xxHash algorithm (XXH64), one-shot and streaming."""

from __future__ import annotations

import struct
from collections.abc import Iterable

__all__ = ["Digest64", "sum64"]

_MASK = 0xFFFFFFFFFFFFFFFF

PRIME64_1 = 11400714785074694791
PRIME64_2 = 14029467366897019727
PRIME64_3 = 1609587929392839161
PRIME64_4 = 9650029242287828579
PRIME64_5 = 2870177450012600261

_BLOCK_SIZE = 32
_MAGIC = b"xxh\x06"
_STATE_HEADER = struct.Struct("<5Q")
_MARSHALED_SIZE = len(_MAGIC) + _STATE_HEADER.size + _BLOCK_SIZE

_BLOCK = struct.Struct("<4Q")
_LONG = struct.Struct("<Q")
_WORD = struct.Struct("<I")

_Lanes = tuple[int, int, int, int]


def _rotl(x: int, r: int) -> int:
    return ((x << r) | (x >> (64 - r))) & _MASK


def _round(acc: int, lane: int) -> int:
    acc = (acc + lane * PRIME64_2) & _MASK
    return (_rotl(acc, 31) * PRIME64_1) & _MASK


def _merge_round(acc: int, lane: int) -> int:
    acc ^= _round(0, lane)
    return (acc * PRIME64_1 + PRIME64_4) & _MASK


def _initial_lanes(seed: int) -> _Lanes:
    return (
        (seed + PRIME64_1 + PRIME64_2) & _MASK,
        (seed + PRIME64_2) & _MASK,
        seed,
        (seed - PRIME64_1) & _MASK,
    )


def _consume_blocks(lanes: _Lanes, blocks: bytes) -> _Lanes:
    """Feed whole 32-byte blocks through the four accumulators."""
    v1, v2, v3, v4 = lanes
    for w1, w2, w3, w4 in _BLOCK.iter_unpack(blocks):
        v1 = _round(v1, w1)
        v2 = _round(v2, w2)
        v3 = _round(v3, w3)
        v4 = _round(v4, w4)
    return v1, v2, v3, v4


def _converge(lanes: _Lanes) -> int:
    v1, v2, v3, v4 = lanes
    h = (_rotl(v1, 1) + _rotl(v2, 7) + _rotl(v3, 12) + _rotl(v4, 18)) & _MASK
    for lane in lanes:
        h = _merge_round(h, lane)
    return h


def _longs(data: bytes) -> Iterable[int]:
    return (value for (value,) in _LONG.iter_unpack(data))


def _finalize(h: int, total: int, tail: bytes) -> int:
    """Mix in the length and the trailing partial block, then avalanche."""
    h = (h + total) & _MASK
    split = len(tail) - len(tail) % 8
    for value in _longs(tail[:split]):
        h ^= _round(0, value)
        h = (_rotl(h, 27) * PRIME64_1 + PRIME64_4) & _MASK
    rest = tail[split:]
    if len(rest) >= 4:
        (word,) = _WORD.unpack_from(rest)
        h ^= (word * PRIME64_1) & _MASK
        h = (_rotl(h, 23) * PRIME64_2 + PRIME64_3) & _MASK
        rest = rest[4:]
    for byte in rest:
        h ^= (byte * PRIME64_5) & _MASK
        h = (_rotl(h, 11) * PRIME64_1) & _MASK

    h ^= h >> 33
    h = (h * PRIME64_2) & _MASK
    h ^= h >> 29
    h = (h * PRIME64_3) & _MASK
    h ^= h >> 32
    return h


def _check_seed(seed: int) -> int:
    if not 0 <= seed <= _MASK:
        raise ValueError(f"seed must fit in 64 bits, got {seed}")
    return seed


def sum64(data: bytes) -> int:
    """Return the XXH64 hash of ``data`` with a zero seed."""
    data = bytes(data)
    total = len(data)
    full = total - total % _BLOCK_SIZE
    if total >= _BLOCK_SIZE:
        h = _converge(_consume_blocks(_initial_lanes(0), data[:full]))
    else:
        h = PRIME64_5
    return _finalize(h, total & _MASK, data[full:])


class Digest64:
    """Streaming XXH64 hasher."""

    digest_size = 8
    block_size = _BLOCK_SIZE

    def __init__(self, seed: int = 0) -> None:
        self._lanes: _Lanes = (0, 0, 0, 0)
        self._total = 0
        self._pending = b""
        self.reset(seed)

    def reset(self, seed: int = 0) -> None:
        """Clear the state so the hasher can be reused with ``seed``."""
        self._lanes = _initial_lanes(_check_seed(seed))
        self._total = 0
        self._pending = b""

    def update(self, data: bytes) -> None:
        """Add more data to the hash."""
        data = bytes(data)
        self._total = (self._total + len(data)) & _MASK
        buf = self._pending + data
        full = len(buf) - len(buf) % _BLOCK_SIZE
        if full:
            self._lanes = _consume_blocks(self._lanes, buf[:full])
        self._pending = buf[full:]

    def intdigest(self) -> int:
        """Return the current hash as an integer."""
        if self._total >= _BLOCK_SIZE:
            h = _converge(self._lanes)
        else:
            h = (self._lanes[2] + PRIME64_5) & _MASK
        return _finalize(h, self._total, self._pending)

    def digest(self) -> bytes:
        """Return the current hash as 8 big-endian bytes."""
        return self.intdigest().to_bytes(8, "big")

    def hexdigest(self) -> str:
        """Return the current hash as 16 lower-case hex digits."""
        return f"{self.intdigest():016x}"

    def to_bytes(self) -> bytes:
        """Serialise the hasher state."""
        header = _STATE_HEADER.pack(*self._lanes, self._total)
        return _MAGIC + header + self._pending.ljust(_BLOCK_SIZE, b"\0")

    def load(self, state: bytes) -> None:
        """Restore a state produced by :meth:`to_bytes`."""
        state = bytes(state)
        if not state.startswith(_MAGIC):
            raise ValueError("xxhash: invalid hash state identifier")
        if len(state) != _MARSHALED_SIZE:
            raise ValueError("xxhash: invalid hash state size")
        v1, v2, v3, v4, total = _STATE_HEADER.unpack_from(state, len(_MAGIC))
        mem = state[len(_MAGIC) + _STATE_HEADER.size:]
        self._lanes = (v1, v2, v3, v4)
        self._total = total
        self._pending = mem[: total % _BLOCK_SIZE]