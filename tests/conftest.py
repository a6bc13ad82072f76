"""Shared test fixtures for the shamirsplit test suite."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

# Config reads the environment at import time; pin the defaults so a local
# .env cannot change what the tests see.
os.environ["SHAMIR_MODULUS"] = "rfc3526-2048"
os.environ["SHAMIR_THRESHOLD"] = "3"
os.environ["SHAMIR_SHARES"] = "5"
os.environ["SHAMIR_STRICT"] = "0"

import pytest

from shamirsplit.utils.crypto import RFC3526_MODP_2048
from shamirsplit.utils.random_source import DeterministicRandomSource


class ScriptedSource:
    """Returns pre-baked chunks in order; records every request size."""

    def __init__(self, chunks: list[bytes]) -> None:
        self._chunks = list(chunks)
        self.requests: list[int] = []

    def read(self, size: int) -> bytes:
        self.requests.append(size)
        return self._chunks.pop(0)


@pytest.fixture
def modulus() -> int:
    return RFC3526_MODP_2048


@pytest.fixture
def rand() -> DeterministicRandomSource:
    return DeterministicRandomSource(b"shamirsplit-tests")


@pytest.fixture
def scripted_source() -> type[ScriptedSource]:
    return ScriptedSource


REPO_ROOT = Path(__file__).resolve().parent.parent


class TrickleSource:
    """Hands out at most ``chunk`` bytes per read, like a raw pipe."""

    def __init__(self, data: bytes, chunk: int = 1) -> None:
        self._data = data
        self._chunk = chunk
        self.reads = 0

    def read(self, size: int) -> bytes:
        self.reads += 1
        out, self._data = self._data[: min(size, self._chunk)], self._data[min(size, self._chunk) :]
        return out


@pytest.fixture
def trickle_source() -> type[TrickleSource]:
    return TrickleSource


@pytest.fixture
def run_fresh():
    """Run ``code`` in a new interpreter with ``env`` overrides."""

    def _run(code: str, **env: str) -> subprocess.CompletedProcess[str]:
        child_env = {k: v for k, v in os.environ.items() if k not in ("LOG_LEVEL", "LOG_FORMAT")}
        child_env.update(env)
        child_env["PYTHONPATH"] = os.pathsep.join(
            p for p in (str(REPO_ROOT), child_env.get("PYTHONPATH", "")) if p
        )
        return subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            env=child_env,
            cwd=REPO_ROOT,
            timeout=60,
        )

    return _run
