"""Shares as explicit (x, y) points.

:func:`split` and :func:`join` pass x-coordinates implicitly (output
position on one side, zero-based index on the other). This module attaches
the 1-based x-coordinate to each value so shares can be stored and passed
around without tracking their position separately.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from shamirsplit.core.sharing import join, split
from shamirsplit.errors import NegativeShareNumber
from shamirsplit.utils.random_source import RandomSource


@dataclass(frozen=True)
class Share:
    """A single Shamir share: (x, y) where y = f(x) for secret polynomial f."""

    x: int
    y: int

    @property
    def index(self) -> int:
        """Zero-based index as expected by :func:`join`."""
        return self.x - 1


def to_shares(values: Iterable[int]) -> list[Share]:
    """Attach x = 1..n to positional share values from :func:`split`."""
    return [Share(x=i, y=y) for i, y in enumerate(values, start=1)]


def from_shares(shares: Sequence[Share]) -> tuple[list[int], list[int]]:
    """Return ``(values, zero_based_indices)`` ready for :func:`join`."""
    for position, s in enumerate(shares):
        if s.x < 1:
            raise NegativeShareNumber(s.index, position)
    return [s.y for s in shares], [s.index for s in shares]


def split_secret(
    secret: int,
    n: int | None = None,
    k: int | None = None,
    modulus: int | None = None,
    rand: RandomSource | None = None,
) -> list[Share]:
    """Split a secret into n shares with threshold k.

    Args:
        secret: The secret value to split (must be < modulus).
        n: Total number of shares. Defaults to SHAMIR_SHARES.
        k: Minimum shares needed for reconstruction. Defaults to
            SHAMIR_THRESHOLD.
        modulus: Field modulus. Defaults to SHAMIR_MODULUS.
        rand: Byte source; defaults to the OS CSPRNG.
    """
    if n is None or k is None or modulus is None:
        from shamirsplit.config import Config

        config = Config()
        n = config.shares_total if n is None else n
        k = config.threshold if k is None else k
        modulus = config.modulus if modulus is None else modulus
    return to_shares(split(secret, modulus, k, n, rand))


def reconstruct_secret(shares: Sequence[Share], modulus: int | None = None) -> int:
    """Reconstruct the secret from k shares of the same split."""
    if modulus is None:
        from shamirsplit.config import Config

        modulus = Config().modulus
    values, indices = from_shares(shares)
    return join(values, indices, modulus)
