"""Tests for the random byte sources."""

from __future__ import annotations

import io
import threading
from unittest.mock import MagicMock

import pytest

from shamirsplit.errors import RandomSourceFailure
from shamirsplit.utils.random_source import (
    DeterministicRandomSource,
    RandomSource,
    SystemRandomSource,
    default_source,
    read_exact,
)


class TestSystemRandomSource:
    def test_returns_requested_length(self) -> None:
        src = SystemRandomSource()
        for size in (0, 1, 32, 257):
            assert len(src.read(size)) == size

    def test_outputs_differ(self) -> None:
        src = SystemRandomSource()
        assert src.read(32) != src.read(32)

    def test_default_is_system(self) -> None:
        assert isinstance(default_source(), SystemRandomSource)
        assert default_source() is default_source()

    def test_satisfies_protocol(self) -> None:
        assert isinstance(SystemRandomSource(), RandomSource)
        assert isinstance(DeterministicRandomSource(1), RandomSource)


class TestDeterministicRandomSource:
    def test_reproducible(self) -> None:
        assert DeterministicRandomSource(b"k").read(100) == DeterministicRandomSource(b"k").read(100)

    def test_seed_types(self) -> None:
        assert DeterministicRandomSource("abc").read(16) == DeterministicRandomSource(b"abc").read(16)
        assert DeterministicRandomSource(5).read(16) != DeterministicRandomSource(6).read(16)
        assert DeterministicRandomSource(-5).read(16) != DeterministicRandomSource(5).read(16)

    def test_different_seeds_differ(self) -> None:
        assert DeterministicRandomSource("a").read(32) != DeterministicRandomSource("b").read(32)

    def test_chunking_does_not_change_stream(self) -> None:
        whole = DeterministicRandomSource("chunk").read(100)
        src = DeterministicRandomSource("chunk")
        parts = src.read(1) + src.read(31) + src.read(33) + src.read(35)
        assert parts == whole

    def test_stream_advances(self) -> None:
        src = DeterministicRandomSource("adv")
        assert src.read(16) != src.read(16)

    def test_thread_safe_total_output(self) -> None:
        whole = DeterministicRandomSource("threads").read(64 * 40)
        src = DeterministicRandomSource("threads")
        chunks: list[bytes] = []
        lock = threading.Lock()

        def worker() -> None:
            for _ in range(10):
                data = src.read(64)
                with lock:
                    chunks.append(data)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        # Every chunk is a distinct aligned slice of the single stream
        expected = {whole[i : i + 64] for i in range(0, len(whole), 64)}
        assert set(chunks) == expected
        assert len(chunks) == 40


class TestReadExact:
    def test_passes_through(self) -> None:
        assert read_exact(DeterministicRandomSource(1), 10) == DeterministicRandomSource(1).read(10)

    def test_accepts_bytearray(self) -> None:
        src = MagicMock()
        src.read.return_value = bytearray(b"abcd")
        assert read_exact(src, 4) == b"abcd"

    def test_exception_is_chained(self) -> None:
        src = MagicMock()
        src.read.side_effect = OSError("boom")
        with pytest.raises(RandomSourceFailure, match="boom") as exc_info:
            read_exact(src, 8)
        assert exc_info.value.__cause__ is src.read.side_effect
        assert exc_info.value.received == 0

    def test_short_reads_are_accumulated(self) -> None:
        src = MagicMock()
        src.read.side_effect = [b"abc", b"de", b"fgh"]
        assert read_exact(src, 8) == b"abcdefgh"
        assert [c.args[0] for c in src.read.call_args_list] == [8, 5, 3]

    def test_one_byte_per_read(self, trickle_source) -> None:
        data = bytes(range(256)) * 2
        src = trickle_source(data)
        assert read_exact(src, 300) == data[:300]
        assert src.reads == 300

    def test_unbuffered_file_is_a_source(self, tmp_path) -> None:
        path = tmp_path / "entropy.bin"
        path.write_bytes(b"\x07" * 64)
        with open(path, "rb", buffering=0) as raw:
            assert read_exact(raw, 64) == b"\x07" * 64

    def test_end_of_stream(self) -> None:
        src = io.BytesIO(b"abc")
        with pytest.raises(RandomSourceFailure, match="exhausted after 3 of 8 bytes") as exc_info:
            read_exact(src, 8)
        assert exc_info.value.requested == 8
        assert exc_info.value.received == 3

    def test_error_after_partial_read(self) -> None:
        src = MagicMock()
        src.read.side_effect = [b"ab", OSError("pipe closed")]
        with pytest.raises(RandomSourceFailure) as exc_info:
            read_exact(src, 4)
        assert exc_info.value.received == 2

    def test_oversized_chunk(self) -> None:
        src = MagicMock()
        src.read.return_value = b"abcdef"
        with pytest.raises(RandomSourceFailure, match="asked for 4"):
            read_exact(src, 4)

    def test_wrong_type(self) -> None:
        src = MagicMock()
        src.read.return_value = "text"
        with pytest.raises(RandomSourceFailure, match="expected bytes"):
            read_exact(src, 4)
