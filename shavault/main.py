"""
ShaVault - Main Entry Point

Command line front end for the from-scratch SHA-256 engine.

Usage:
    shavault "message" ["another message" ...]
    shavault --file path/to/file
    shavault --self-test
"""

import argparse
import sys
from typing import List, Optional

from .config import INVALID_INPUT_MESSAGE
from .core_crypto.padding import InvalidInputError
from .core_crypto.selftest import run_self_test
from .core_crypto.sha256 import sha256_hex
from .utils.logger import setup_logging


EXIT_OK = 0
EXIT_SELF_TEST_FAILED = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shavault",
        description="Compute SHA-256 digests of single-byte text.",
    )
    parser.add_argument(
        "messages", nargs="*", metavar="TEXT",
        help="text to hash; characters must be in the range 0-255",
    )
    parser.add_argument(
        "-f", "--file", metavar="PATH",
        help="hash the raw bytes of a file",
    )
    parser.add_argument(
        "--self-test", action="store_true",
        help="check the implementation against known test vectors",
    )
    parser.add_argument(
        "--log-level", metavar="LEVEL",
        help="logging level (default from SHAVAULT_LOG_LEVEL or WARNING)",
    )
    return parser


def _self_test() -> int:
    report = run_self_test()
    for failure in report.failures:
        print(f"  [X] {failure}")
    status = "PASS" if report.passed else "FAIL"
    print(f"Self-test: {status} ({report.checked} checks, "
          f"{len(report.failures)} failed)")
    return EXIT_OK if report.passed else EXIT_SELF_TEST_FAILED


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for ShaVault."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    if args.self_test:
        return _self_test()

    if args.file is None and not args.messages:
        parser.error("nothing to hash: give TEXT, --file or --self-test")

    try:
        if args.file is not None:
            try:
                with open(args.file, "rb") as f:
                    data = f.read()
            except OSError as exc:
                parser.error(f"cannot read '{args.file}': {exc}")
            print(sha256_hex(data))

        for message in args.messages:
            print(sha256_hex(message))
    except InvalidInputError:
        print(INVALID_INPUT_MESSAGE, file=sys.stderr)
        return EXIT_INVALID_INPUT

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
