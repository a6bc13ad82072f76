"""Exceptions raised by split, join and the uniform sampler.

Every failure is local to the call that raised it and nothing is retried
internally. All exceptions derive from ``ShamirError`` (itself a
``ValueError``) so callers can catch the whole family in one clause.
"""

from __future__ import annotations


class ShamirError(ValueError):
    """Base class for secret sharing failures."""


class InvalidParameters(ShamirError):
    """Threshold/share-count combination is unusable (k < 1 or n < k)."""

    def __init__(self, message: str, *, k: int | None = None, n: int | None = None) -> None:
        super().__init__(message)
        self.k = k
        self.n = n


class InvalidModulus(InvalidParameters):
    """Modulus too small to define the field."""

    def __init__(self, modulus: int) -> None:
        super().__init__(f"modulus must be >= 2, got {modulus}")
        self.modulus = modulus


class NegativeSecret(InvalidParameters):
    def __init__(self, secret: int) -> None:
        super().__init__("secret must be non-negative")
        self.secret = secret


class SecretTooLarge(ShamirError):
    """Secret is not strictly less than the modulus."""

    def __init__(self) -> None:
        # Never include the secret in the message.
        super().__init__("secret must be less than split modulus")


class LengthMismatch(ShamirError):
    def __init__(self, values: int, indices: int) -> None:
        super().__init__(
            f"lengths of shares and share indices must match ({values} != {indices})"
        )
        self.values = values
        self.indices = indices


class NegativeShareNumber(ShamirError):
    def __init__(self, index: int, position: int) -> None:
        super().__init__(f"found negative share number {index} at position {position}")
        self.index = index
        self.position = position


class RandomSourceFailure(ShamirError):
    """The injected random source raised or ran out of bytes.

    When the source raised, the original exception is chained as
    ``__cause__``; read it there to get the error the source reported.
    ``received`` is how many bytes had been read before the failure.
    """

    def __init__(self, message: str, *, requested: int, received: int | None = None) -> None:
        super().__init__(message)
        self.requested = requested
        self.received = received


class NoModularInverse(ShamirError):
    """``value`` has no inverse modulo ``modulus`` (gcd(value, modulus) != 1).

    Happens with a composite modulus, or with duplicate share indices
    (difference of zero).
    """

    def __init__(self, value: int, modulus: int, gcd: int) -> None:
        super().__init__(f"no modular inverse: gcd({value}, modulus) = {gcd}")
        self.value = value
        self.modulus = modulus
        self.gcd = gcd
