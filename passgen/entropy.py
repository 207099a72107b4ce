"""
Secure byte sources and unbiased index sampling.

Every random choice the generator makes goes through
`sample_uniform_index`, which draws single bytes from a SecureByteSource
and uses rejection sampling so that each index in the requested range is
equally likely.
"""

from __future__ import annotations

import hashlib
import secrets
from typing import Protocol

from loguru import logger

from .constants import MAX_RANDOM_RANGE
from .errors import EntropySourceUnavailable, RangeTooLarge


class SecureByteSource(Protocol):
    """
    Anything that can hand out cryptographically secure random bytes.

    Each call must return exactly `n` fresh bytes, uniformly distributed
    over 0..255 and independent of earlier calls.
    """

    def next_bytes(self, n: int) -> bytes: ...


class SystemByteSource:
    """
    Bytes from the operating system CSPRNG via `secrets`.
    """

    def next_bytes(self, n: int) -> bytes:
        try:
            return secrets.token_bytes(n)
        except (OSError, NotImplementedError) as exc:
            raise EntropySourceUnavailable(
                "The operating system random source is unavailable."
            ) from exc


def _draw_byte(source: SecureByteSource) -> int:
    try:
        data = source.next_bytes(1)
    except EntropySourceUnavailable:
        raise
    except (OSError, NotImplementedError) as exc:
        raise EntropySourceUnavailable(
            f"Secure byte source {type(source).__name__} failed: {exc}"
        ) from exc

    if len(data) != 1:
        raise EntropySourceUnavailable(
            f"Secure byte source {type(source).__name__} returned "
            f"{len(data)} bytes instead of 1."
        )
    return data[0]


def sample_uniform_index(
    min_value: int,
    max_value: int,
    source: SecureByteSource | None = None,
) -> int:
    """
    Return a uniformly random integer in [min_value, max_value].

    A single byte b is drawn per attempt. Bytes at or above the largest
    multiple of the range that fits in 256 are thrown away, which removes
    the bias a plain `b % range` would have. At most 256 - limit values are
    discarded, always fewer than `range`, so fewer than two draws are
    needed on average.

    Raises RangeTooLarge if the range is empty or wider than 256 values,
    and EntropySourceUnavailable if the byte source fails.
    """
    span = max_value - min_value + 1
    if span < 1:
        raise RangeTooLarge(f"Empty range [{min_value}, {max_value}].")
    if span > MAX_RANDOM_RANGE:
        raise RangeTooLarge(
            f"Sorry the maximum is too large. The maximum size is {MAX_RANDOM_RANGE}; "
            f"[{min_value}, {max_value}] covers {span} values."
        )

    src = source if source is not None else SystemByteSource()
    limit = (MAX_RANDOM_RANGE // span) * span

    while True:
        value = _draw_byte(src)
        if value < limit:
            return min_value + value % span
        logger.debug("Rejected byte {} (limit {} for range {})", value, limit, span)


# ---------- helpers for raw bit streams ----------


def bits_to_bytes(bits: list[int]) -> bytes:
    """
    Pack bits (most significant first) into bytes, zero-padding the last
    byte if needed.
    """
    out = bytearray()
    for start in range(0, len(bits), 8):
        chunk = bits[start : start + 8]
        byte = 0
        for bit in chunk:
            byte = (byte << 1) | (bit & 1)
        out.append(byte << (8 - len(chunk)))
    return bytes(out)


def amplify_entropy(data: bytes, rounds: int = 1) -> bytes:
    """
    Mix `data` with SHA-256 `rounds` times. Always returns a 32-byte digest
    when rounds >= 1, otherwise `data` unchanged.
    """
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()
    return data


def xor_bytes(left: bytes, right: bytes) -> bytes:
    if len(left) != len(right):
        raise ValueError("Cannot XOR byte strings of different lengths.")
    return bytes(a ^ b for a, b in zip(left, right))
