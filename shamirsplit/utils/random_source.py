"""Byte sources used by the uniform sampler.

Sources are passed in explicitly rather than read from a global, so tests
can run against a seeded stream and concurrent callers can each hold their
own instance.
"""

from __future__ import annotations

import hashlib
import os
import threading
from typing import Protocol, runtime_checkable

from shamirsplit.errors import RandomSourceFailure
from shamirsplit.logging import get_logger

log = get_logger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Anything with ``read(size) -> bytes`` returning unpredictable bytes.

    A read may return fewer than ``size`` bytes; ``b""`` means the source is
    exhausted. Binary file objects, sockets via ``makefile("rb")`` and pipes
    all qualify.
    """

    def read(self, size: int) -> bytes: ...


class SystemRandomSource:
    """OS CSPRNG. Stateless, safe to share across threads."""

    def read(self, size: int) -> bytes:
        return os.urandom(size)

    def __repr__(self) -> str:
        return "SystemRandomSource()"


class DeterministicRandomSource:
    """Reproducible byte stream: SHA-256(seed || counter) blocks.

    For tests and reproducible examples only. Shares split with a seed
    anyone can guess protect nothing.
    """

    def __init__(self, seed: bytes | str | int) -> None:
        if isinstance(seed, int):
            seed = seed.to_bytes((seed.bit_length() + 8) // 8, "big", signed=True)
        elif isinstance(seed, str):
            seed = seed.encode()
        self._seed = bytes(seed)
        self._counter = 0
        self._buffer = b""
        self._lock = threading.Lock()

    def read(self, size: int) -> bytes:
        with self._lock:
            while len(self._buffer) < size:
                block = hashlib.sha256(self._seed + self._counter.to_bytes(8, "big")).digest()
                self._counter += 1
                self._buffer += block
            out, self._buffer = self._buffer[:size], self._buffer[size:]
            return out


_default_source = SystemRandomSource()


def default_source() -> SystemRandomSource:
    return _default_source


def read_exact(source: RandomSource, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``source``, calling ``read`` as often
    as needed (a short read is not an error, an empty one is).

    Raises:
        RandomSourceFailure: the source raised, returned a non-bytes value,
            returned more than was asked for, or hit end of stream before
            ``size`` bytes were read.
    """
    buf = bytearray()
    while len(buf) < size:
        remaining = size - len(buf)
        try:
            chunk = source.read(remaining)
        except Exception as e:
            log.warning("random_source_error", requested=size, received=len(buf), error=str(e))
            raise RandomSourceFailure(
                f"random source failed: {e}", requested=size, received=len(buf),
            ) from e
        if not isinstance(chunk, (bytes, bytearray)):
            raise RandomSourceFailure(
                f"random source returned {type(chunk).__name__}, expected bytes",
                requested=size,
                received=len(buf),
            )
        if not chunk:
            log.warning("random_source_exhausted", requested=size, received=len(buf))
            raise RandomSourceFailure(
                f"random source exhausted after {len(buf)} of {size} bytes",
                requested=size,
                received=len(buf),
            )
        if len(chunk) > remaining:
            raise RandomSourceFailure(
                f"random source returned {len(chunk)} bytes, asked for {remaining}",
                requested=size,
                received=len(buf),
            )
        buf += chunk
    return bytes(buf)
