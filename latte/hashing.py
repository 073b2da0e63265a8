"""Fixed-size 256-bit digests and the hash functions that produce them."""

from __future__ import annotations

import hashlib
import struct
from dataclasses import dataclass

__all__ = ["Hash256", "sha256", "blake2s", "blake3"]


@dataclass(frozen=True)
class Hash256:
    """A 32-byte digest."""

    value: bytes

    def __post_init__(self) -> None:
        raw = bytes(self.value)
        if len(raw) != 32:
            raise ValueError(f"Hash256 needs 32 bytes, got {len(raw)}")
        object.__setattr__(self, "value", raw)

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        return self.value.hex()


def sha256(data: bytes) -> Hash256:
    """Return the SHA-256 digest of ``data``."""
    return Hash256(hashlib.sha256(bytes(data)).digest())


def blake3(data: bytes) -> Hash256:
    """Return the 32-byte BLAKE3 digest of ``data``."""
    return Hash256(_blake3_digest(bytes(data)))


def blake2s(data: bytes) -> Hash256:
    """Fast hash used across the chain; computes the BLAKE3 digest of ``data``."""
    return blake3(data)


# --- BLAKE3 (hash mode, 32-byte output) ---------------------------------------

_MASK = 0xFFFFFFFF
_CHUNK_LEN = 1024
_BLOCK_LEN = 64

_CHUNK_START = 1 << 0
_CHUNK_END = 1 << 1
_PARENT = 1 << 2
_ROOT = 1 << 3

_IV = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)
_MSG_PERMUTATION = (2, 6, 3, 10, 7, 0, 4, 13, 1, 11, 12, 5, 9, 14, 15, 8)

# (a, b, c, d, message index x, message index y) for each quarter-round
_ROUND_SCHEDULE = (
    (0, 4, 8, 12, 0, 1),
    (1, 5, 9, 13, 2, 3),
    (2, 6, 10, 14, 4, 5),
    (3, 7, 11, 15, 6, 7),
    (0, 5, 10, 15, 8, 9),
    (1, 6, 11, 12, 10, 11),
    (2, 7, 8, 13, 12, 13),
    (3, 4, 9, 14, 14, 15),
)


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def _compress(cv, block_words, counter: int, block_len: int, flags: int) -> list[int]:
    state = [
        *cv,
        *_IV[:4],
        counter & _MASK,
        (counter >> 32) & _MASK,
        block_len,
        flags,
    ]
    m = list(block_words)
    for round_no in range(7):
        for a, b, c, d, x, y in _ROUND_SCHEDULE:
            state[a] = (state[a] + state[b] + m[x]) & _MASK
            state[d] = _rotr(state[d] ^ state[a], 16)
            state[c] = (state[c] + state[d]) & _MASK
            state[b] = _rotr(state[b] ^ state[c], 12)
            state[a] = (state[a] + state[b] + m[y]) & _MASK
            state[d] = _rotr(state[d] ^ state[a], 8)
            state[c] = (state[c] + state[d]) & _MASK
            state[b] = _rotr(state[b] ^ state[c], 7)
        if round_no < 6:
            m = [m[p] for p in _MSG_PERMUTATION]
    head = [s ^ t for s, t in zip(state[:8], state[8:])]
    tail = [s ^ c for s, c in zip(state[8:], cv)]
    return head + tail


def _words(block: bytes) -> tuple[int, ...]:
    return struct.unpack("<16I", block.ljust(_BLOCK_LEN, b"\0"))


@dataclass(frozen=True)
class _Output:
    cv: tuple[int, ...]
    block_words: tuple[int, ...]
    counter: int
    block_len: int
    flags: int

    def chaining_value(self) -> tuple[int, ...]:
        return tuple(
            _compress(self.cv, self.block_words, self.counter, self.block_len, self.flags)[:8]
        )

    def root_bytes(self) -> bytes:
        words = _compress(
            self.cv, self.block_words, 0, self.block_len, self.flags | _ROOT
        )
        return struct.pack("<8I", *words[:8])


def _chunk_output(chunk: bytes, chunk_index: int) -> _Output:
    blocks = [chunk[i:i + _BLOCK_LEN] for i in range(0, len(chunk), _BLOCK_LEN)] or [b""]
    cv: tuple[int, ...] = _IV
    for position, block in enumerate(blocks[:-1]):
        flags = _CHUNK_START if position == 0 else 0
        cv = tuple(_compress(cv, _words(block), chunk_index, _BLOCK_LEN, flags)[:8])
    last = blocks[-1]
    flags = _CHUNK_END | (_CHUNK_START if len(blocks) == 1 else 0)
    return _Output(cv, _words(last), chunk_index, len(last), flags)


def _subtree_output(chunks: list[bytes], first_index: int) -> _Output:
    if len(chunks) == 1:
        return _chunk_output(chunks[0], first_index)
    left_count = 1 << ((len(chunks) - 1).bit_length() - 1)
    left = _subtree_output(chunks[:left_count], first_index)
    right = _subtree_output(chunks[left_count:], first_index + left_count)
    return _Output(
        _IV,
        left.chaining_value() + right.chaining_value(),
        0,
        _BLOCK_LEN,
        _PARENT,
    )


def _blake3_digest(data: bytes) -> bytes:
    chunks = [data[i:i + _CHUNK_LEN] for i in range(0, len(data), _CHUNK_LEN)] or [b""]
    return _subtree_output(chunks, 0).root_bytes()