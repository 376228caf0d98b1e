"""
Integration tests for ShaVault.

Tests full workflows:
- Agreement with the `cryptography` reference implementation
- Self-test report
- Command line front end
- Concurrent use of the shared constant tables
- Logging and configuration
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from shavault import InvalidInputError, hash_message
from shavault.config import ENV_LOG_LEVEL, INVALID_INPUT_MESSAGE, get_log_level
from shavault.core_crypto.constants import get_constants, reset_constants
from shavault.core_crypto.selftest import (
    KNOWN_VECTORS, cross_check, reference_digest, run_self_test, verify_constants
)
from shavault.core_crypto.sha256 import sha256_hex
from shavault.main import EXIT_INVALID_INPUT, EXIT_OK, main
from shavault.utils.logger import setup_logging


class TestReferenceAgreement:
    """The from-scratch digest must match an independent implementation."""

    def test_every_length_up_to_three_blocks(self):
        for length in range(0, 193):
            msg = bytes((i * 7 + 3) % 256 for i in range(length))
            assert sha256_hex(msg) == reference_digest(msg), f"length {length}"

    def test_cross_check_text(self):
        assert cross_check("Hello, ShaVault!")

    def test_known_vectors(self):
        for message, expected in KNOWN_VECTORS:
            assert sha256_hex(message) == expected


class TestSelfTest:
    """Self-test workflow."""

    def test_constants_verified(self):
        assert verify_constants()

    def test_report_passes(self):
        report = run_self_test()
        assert report.passed
        assert report.failures == []
        # constants + digest and cross-check per vector
        assert report.checked == 1 + 2 * len(KNOWN_VECTORS)


class TestCommandLine:
    """Command line front end."""

    def test_hash_argument(self, capsys):
        assert main(["abc"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.strip() == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad")

    def test_multiple_arguments(self, capsys):
        assert main(["", "abc"]) == EXIT_OK
        lines = capsys.readouterr().out.splitlines()
        assert lines == [hash_message(""), hash_message("abc")]

    def test_invalid_input(self, capsys):
        assert main(["naïve", "日本"]) == EXIT_INVALID_INPUT
        captured = capsys.readouterr()
        assert INVALID_INPUT_MESSAGE in captured.err
        # Valid argument before the bad one is still printed
        assert captured.out.strip() == hash_message("naïve")

    def test_file(self, tmp_path, capsys):
        path = tmp_path / "data.bin"
        path.write_bytes(bytes(range(256)) * 3)
        assert main(["--file", str(path)]) == EXIT_OK
        out = capsys.readouterr().out.strip()
        assert out == reference_digest(bytes(range(256)) * 3)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--file", str(tmp_path / "missing.bin")])
        assert exc_info.value.code == 2

    def test_self_test_flag(self, capsys):
        assert main(["--self-test"]) == EXIT_OK
        assert "Self-test: PASS" in capsys.readouterr().out

    def test_nothing_to_hash(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_bad_log_level(self):
        with pytest.raises(SystemExit):
            main(["--log-level", "LOUD", "abc"])


class TestConcurrency:
    """Shared constants under concurrent first use."""

    def test_concurrent_first_initialization(self):
        reset_constants()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: get_constants(), range(32)))
        first = results[0]
        assert all(result is first for result in results)

    def test_concurrent_hashing(self):
        messages = [f"message {i}".encode() for i in range(32)]
        reset_constants()
        with ThreadPoolExecutor(max_workers=8) as pool:
            digests = list(pool.map(sha256_hex, messages))
        assert digests == [reference_digest(m) for m in messages]


class TestLoggingAndConfig:
    """Logging output and configuration."""

    def test_debug_block_count(self, caplog):
        caplog.set_level(logging.DEBUG, logger="shavault")
        sha256_hex(b"a" * 64)
        assert any(
            record.getMessage() == "Hashing 2 block(s)" for record in caplog.records
        )

    def test_rejection_logged(self, caplog):
        caplog.set_level(logging.INFO, logger="shavault")
        with pytest.raises(InvalidInputError):
            hash_message("Ω")
        assert any("Rejected message" in record.getMessage()
                   for record in caplog.records)

    def test_constants_initialization_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="shavault")
        reset_constants()
        get_constants()
        assert any("constants initialized" in record.getMessage()
                   for record in caplog.records)

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv(ENV_LOG_LEVEL, "debug")
        assert get_log_level() == "DEBUG"

    def test_default_log_level(self, monkeypatch):
        monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
        assert get_log_level() == "WARNING"

    def test_unknown_log_level(self):
        with pytest.raises(ValueError):
            setup_logging("LOUD")
