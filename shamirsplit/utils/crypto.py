"""Modular arithmetic helpers and well-known public moduli."""

from __future__ import annotations

import secrets

from shamirsplit.errors import InvalidModulus, NoModularInverse

# 2^2048 - 2^1984 - 1 + 2^64 * { [2^1918 pi] + 124476 } from RFC 3526
RFC3526_MODP_2048 = int(
    "FFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74"
    "020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F1437"
    "4FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7ED"
    "EE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF05"
    "98DA48361C55D39A69163FA8FD24CF5F83655D23DCA3AD961C62F356208552BB"
    "9ED529077096966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3B"
    "E39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF695581718"
    "3995497CEA956AE515D2261898FA051015728E5A8AACAA68FFFFFFFFFFFFFFFF",
    16,
)

# BN254 scalar field prime
BN254_PRIME = 21888242871839275222246405745257275088548364400416034343698204186575808495617

NAMED_MODULI: dict[str, int] = {
    "rfc3526-2048": RFC3526_MODP_2048,
    "bn254": BN254_PRIME,
}


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a*x + b*y == g == gcd(a, b).

    Either Bezout coefficient may be negative.
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_inverse(a: int, modulus: int) -> int:
    """Modular multiplicative inverse of ``a``, normalized into [0, modulus)."""
    if modulus < 2:
        raise InvalidModulus(modulus)
    a %= modulus
    g, x, _ = extended_gcd(a, modulus)
    if g != 1:
        raise NoModularInverse(a, modulus, g)
    return x % modulus


def is_probable_prime(n: int, rounds: int = 40) -> bool:
    """Miller-Rabin probable prime test."""
    if n < 2:
        return False
    for p in (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37):
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for _ in range(rounds):
        a = 2 + secrets.randbelow(n - 3)
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def parse_modulus(text: str) -> int:
    """Parse a modulus given as a decimal, 0x-hex, or named constant."""
    value = text.strip()
    named = NAMED_MODULI.get(value.lower())
    if named is not None:
        return named
    try:
        if value.lower().startswith("0x"):
            return int(value, 16)
        return int(value, 10)
    except ValueError:
        raise ValueError(
            f"Invalid modulus {text!r}: expected decimal, 0x-hex, or one of {', '.join(NAMED_MODULI)}"
        )
