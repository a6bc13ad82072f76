"""Uniform random integers below an exclusive bound by rejection sampling."""

from __future__ import annotations

from shamirsplit.errors import InvalidParameters
from shamirsplit.logging import get_logger
from shamirsplit.utils.random_source import RandomSource, default_source, read_exact

log = get_logger(__name__)


def sample(bound: int, rand: RandomSource | None = None) -> int:
    """Return a uniform random integer in [0, bound).

    Draws ceil(bitlen(bound) / 8) bytes at a time, clears the bits of the
    most significant byte above bound's top bit, and redraws until the
    big-endian value is below ``bound``. Each draw is accepted with
    probability > 1/2; there is no retry cap.

    Raises:
        InvalidParameters: bound < 1.
        RandomSourceFailure: the source failed on some read.
    """
    if bound < 1:
        raise InvalidParameters(f"sample bound must be >= 1, got {bound}")
    if rand is None:
        rand = default_source()

    bits = bound.bit_length()
    size = (bits + 7) // 8
    # Number of bits used in the most significant byte of bound.
    top_bits = bits % 8 or 8
    mask = (1 << top_bits) - 1

    rejected = 0
    while True:
        buf = bytearray(read_exact(rand, size))
        buf[0] &= mask
        candidate = int.from_bytes(buf, "big")
        if candidate < bound:
            if rejected:
                log.debug("sample_accepted", rejected=rejected, bound_bits=bits)
            return candidate
        rejected += 1
