from __future__ import annotations

import argparse
import sys
from typing import TextIO

from hashing import SerialHasher
from observability import add_error, bind_context, configure_logging, get_logger, new_run_id, set_stage

from .config import load_config
from .errors import SerialHasherError


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Hash a dollar-bill serial number")
    p.add_argument("--config", default=None, help="YAML config path (defaults are used when omitted)")
    p.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides logging.level from config)",
    )
    p.add_argument("--serial", default=None, help="Serial number; read from stdin when omitted")
    p.add_argument("--plan", action="store_true", help="Print the hashing plan before the digest")
    return p


def read_serial(stream: TextIO) -> str:
    """Read one line and keep its first whitespace-separated word.

    A blank line or EOF yields the empty serial.
    """

    words = stream.readline().split()
    return words[0] if words else ""


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    bind_context(run_id=new_run_id())

    # Bootstrap so config errors are logged too.
    configure_logging(level=args.log_level or "INFO")
    log = get_logger("serial_hasher.cli")

    try:
        set_stage("config")
        cfg = load_config(args.config)
        configure_logging(level=args.log_level or cfg.logging.level)

        hasher = SerialHasher.from_config(cfg.hashing)
        log.debug("hasher_ready", hasher=repr(hasher))

        set_stage("read")
        serial = args.serial if args.serial is not None else read_serial(sys.stdin)

        set_stage("hash")
        result = hasher.hash(serial)
    except SerialHasherError as e:
        add_error(str(e))
        log.error("cli_failed", error=str(e), error_type=type(e).__name__)
        return 2

    log.info(
        "serial_hashed",
        marker_count=result.plan.marker_count,
        single_pass=result.plan.single_pass,
        iterations=result.plan.iterations,
        digest_len=len(result.digest),
    )

    if args.plan:
        print(result.plan.describe())
    print(result.digest)
    return 0
