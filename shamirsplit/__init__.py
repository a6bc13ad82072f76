"""Shamir threshold secret sharing over a prime field."""

from shamirsplit.core.sharing import join, split
from shamirsplit.core.shares import Share, reconstruct_secret, split_secret

__version__ = "0.1.0"

__all__ = [
    "Share",
    "__version__",
    "join",
    "reconstruct_secret",
    "split",
    "split_secret",
]
