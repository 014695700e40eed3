"""Command line interface: восстановление секрета из JSON документов с долями."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from secret_recovery.config import DEFAULT_LOG_LEVEL, DEFAULT_STDIN_TITLE, InterpolationConfig
from secret_recovery.core.errors import InsufficientPointsError, SecretRecoveryError
from secret_recovery.ingestion import load_document, points_from_document
from secret_recovery.logging_setup import configure_logging
from secret_recovery.reporting import format_insufficient, format_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secret-recovery",
        description="Reconstruct f(0) from base-encoded polynomial shares via exact Lagrange interpolation",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Share documents (JSON). Reads stdin when omitted.",
    )
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="Logging level (default: %(default)s)")
    parser.add_argument(
        "--no-reduce",
        action="store_true",
        help="Disable intermediate gcd reduction of basis weights",
    )
    return parser


def process_document(text: str, title: str, config: InterpolationConfig, out: TextIO, err: TextIO) -> bool:
    """
    Обработка одного документа.

    Returns:
        True при успехе или пустом вводе, False при ошибке
    """
    try:
        data = load_document(text)
        if data is None:
            logger.info("Empty input for %s, nothing to do", title)
            return True
        point_set = points_from_document(data)
        secret = point_set.reconstruct_secret(config)
    except InsufficientPointsError as e:
        print(format_insufficient(e.required, e.available), file=err)
        return False
    except SecretRecoveryError as e:
        print(f"Error: {title}: {e}", file=err)
        return False

    print(format_report(title, point_set.threshold, secret), file=out)
    return True


def allow_unbounded_int_strings() -> None:
    """Снятие лимита int → str (Python 3.11+): секрет печатается целиком."""
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    allow_unbounded_int_strings()
    config = InterpolationConfig(reduce_intermediate=not args.no_reduce)

    if not args.files:
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError as e:
            print(f"Error: cannot read stdin: {e}", file=sys.stderr)
            return 1
        ok = process_document(text, DEFAULT_STDIN_TITLE, config, sys.stdout, sys.stderr)
        return 0 if ok else 1

    status = 0
    for path in args.files:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read {path}: {e}", file=sys.stderr)
            status = 1
            continue
        if not process_document(text, path.name, config, sys.stdout, sys.stderr):
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
