"""Sharing defaults loaded from environment variables."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from dotenv import load_dotenv

from shamirsplit.utils.crypto import is_probable_prime, parse_modulus

load_dotenv()


def _int_env(key: str, default: str) -> int:
    raw = os.getenv(key, default).strip()
    if not re.fullmatch(r"[+-]?\d+", raw):
        raise ValueError(f"{key} must be an integer, got {raw!r}")
    return int(raw)


def _bool_env(key: str, default: str) -> bool:
    return os.getenv(key, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Config:
    # Public field modulus: decimal, 0x-hex, or a name from NAMED_MODULI
    modulus_spec: str = os.getenv("SHAMIR_MODULUS", "rfc3526-2048")

    # Default k-of-n
    threshold: int = _int_env("SHAMIR_THRESHOLD", "3")
    shares_total: int = _int_env("SHAMIR_SHARES", "5")

    strict: bool = _bool_env("SHAMIR_STRICT", "0")

    # Below this a brute-force search over the secret space is cheap
    min_modulus_bits: int = 128

    @property
    def modulus(self) -> int:
        return parse_modulus(self.modulus_spec)

    def validate(self, *, strict: bool | None = None) -> list[str]:
        """Validate config. Returns list of warnings (empty = all good).

        Args:
            strict: If True, raise ValueError on any warning. Defaults to
                the SHAMIR_STRICT setting.
        """
        if strict is None:
            strict = self.strict

        warnings = []
        modulus = self.modulus
        if modulus < 2:
            raise ValueError(f"SHAMIR_MODULUS must be >= 2, got {modulus}")
        if self.threshold < 1:
            raise ValueError(f"SHAMIR_THRESHOLD must be >= 1, got {self.threshold}")
        if self.shares_total < self.threshold:
            raise ValueError(
                f"SHAMIR_SHARES ({self.shares_total}) must be >= SHAMIR_THRESHOLD ({self.threshold})"
            )
        if not is_probable_prime(modulus):
            warnings.append("SHAMIR_MODULUS is not prime; join may fail with NoModularInverse")
        if modulus.bit_length() < self.min_modulus_bits:
            warnings.append(
                f"SHAMIR_MODULUS is only {modulus.bit_length()} bits "
                f"(recommended >= {self.min_modulus_bits})"
            )
        if strict and warnings:
            raise ValueError("Config validation failed in strict mode:\n" + "\n".join(f"  - {w}" for w in warnings))
        return warnings
