"""Split a secret into n shares and join any k of them back.

Shares come out of ``split`` positionally: element ``i`` is the polynomial
evaluated at x = i + 1. ``join`` takes those same zero-based positions as
``share_indices``. See ``shamirsplit.core.shares`` for an API that carries
the x-coordinate with each value instead.
"""

from __future__ import annotations

from collections.abc import Sequence

from shamirsplit.core.sampler import sample
from shamirsplit.errors import (
    InvalidModulus,
    InvalidParameters,
    LengthMismatch,
    NegativeSecret,
    NegativeShareNumber,
    SecretTooLarge,
)
from shamirsplit.logging import get_logger
from shamirsplit.utils.crypto import mod_inverse
from shamirsplit.utils.random_source import RandomSource, default_source

log = get_logger(__name__)


def _check_split_params(secret: int, modulus: int, k: int, n: int) -> None:
    if isinstance(k, bool) or isinstance(n, bool) or not isinstance(k, int) or not isinstance(n, int):
        raise InvalidParameters("k and n must be integers", k=k, n=n)
    if k < 1 or n < k:
        raise InvalidParameters(f"invalid split parameters: k={k}, n={n}", k=k, n=n)
    if modulus < 2:
        raise InvalidModulus(modulus)
    if secret < 0:
        raise NegativeSecret(secret)
    if secret >= modulus:
        raise SecretTooLarge()


def _random_coefficients(secret: int, modulus: int, k: int, rand: RandomSource) -> list[int]:
    """a[0] = secret, a[1..k-1] uniform over [1, modulus - 1]."""
    coeffs = [secret]
    for _ in range(k - 1):
        coeffs.append(sample(modulus - 1, rand) + 1)
    return coeffs


def _evaluate(coeffs: Sequence[int], x: int, modulus: int) -> int:
    """Horner evaluation of sum(a[j] * x^j) mod modulus."""
    y = 0
    for c in reversed(coeffs):
        y = (y * x + c) % modulus
    return y


def split(
    secret: int,
    modulus: int,
    k: int,
    n: int,
    rand: RandomSource | None = None,
) -> list[int]:
    """Split ``secret`` into ``n`` shares, any ``k`` of which recover it.

    Fewer than ``k`` shares reveal nothing about the secret when
    ``modulus`` is prime.

    Args:
        secret: Value to protect, 0 <= secret < modulus.
        modulus: Public field modulus, conventionally prime.
        k: Reconstruction threshold, 1 <= k <= n.
        n: Number of shares to produce.
        rand: Byte source for the polynomial coefficients. Defaults to the
            OS CSPRNG.

    Returns:
        n share values; position i holds the evaluation at x = i + 1.

    Raises:
        InvalidParameters: k < 1, n < k, modulus < 2 or secret < 0.
        SecretTooLarge: secret >= modulus.
        RandomSourceFailure: the random source failed.
    """
    _check_split_params(secret, modulus, k, n)
    if rand is None:
        rand = default_source()

    coeffs = _random_coefficients(secret, modulus, k, rand)
    shares = [_evaluate(coeffs, x, modulus) for x in range(1, n + 1)]

    log.debug("secret_split", k=k, n=n, modulus_bits=modulus.bit_length())
    return shares


def join(
    share_values: Sequence[int],
    share_indices: Sequence[int],
    modulus: int,
) -> int:
    """Recover the secret from k shares by Lagrange interpolation at x = 0.

    Shares may be given in any order as long as ``share_indices[m]`` is the
    zero-based position that ``share_values[m]`` had in the output of
    :func:`split`.

    No consistency check is made. Too few shares, shares from different
    splits, or corrupted values all yield some field element without error.

    Raises:
        LengthMismatch: the two sequences differ in length.
        NegativeShareNumber: an index is negative.
        NoModularInverse: two evaluation points differ by a value sharing a
            factor with ``modulus`` (composite modulus or duplicate index).
    """
    if len(share_values) != len(share_indices):
        raise LengthMismatch(len(share_values), len(share_indices))
    for position, index in enumerate(share_indices):
        if index < 0:
            raise NegativeShareNumber(index, position)
    if modulus < 2:
        raise InvalidModulus(modulus)

    xs = [index + 1 for index in share_indices]
    secret = 0
    for i, (xi, yi) in enumerate(zip(xs, share_values)):
        # Lagrange basis at 0: prod over j != i of x_j / (x_j - x_i)
        basis = 1
        for j, xj in enumerate(xs):
            if i == j:
                continue
            basis = basis * xj * mod_inverse((xj - xi) % modulus, modulus) % modulus
        secret += basis * (yi % modulus)

    log.debug("secret_joined", share_count=len(xs), modulus_bits=modulus.bit_length())
    return secret % modulus
