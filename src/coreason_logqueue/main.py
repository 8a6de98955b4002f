# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logqueue

import argparse
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from pydantic import ValidationError

from coreason_logqueue.append_queue import FileAppendQueue
from coreason_logqueue.leveled_logger import LeveledLogger
from coreason_logqueue.levels import Severity
from coreason_logqueue.logger import logger
from coreason_logqueue.schema import LoggerConfig


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="CoReason leveled logger")
    parser.add_argument(
        "--level",
        type=str,
        default="DEBUG",
        help="Threshold: DEBUG, INFO, WARN or ERROR (default: DEBUG)",
    )
    parser.add_argument(
        "--mode",
        type=str,
        default="CONSOLE",
        help="Sinks: CONSOLE, FILE or ALL (default: CONSOLE)",
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Log file path (required for FILE and ALL)",
    )
    parser.add_argument(
        "--severity",
        type=str,
        default="INFO",
        help="Severity of the logged messages (default: INFO)",
    )
    parser.add_argument(
        "messages",
        nargs="*",
        help="Messages to log (default: read lines from stdin)",
    )
    return parser.parse_args(argv)


def read_messages(args: argparse.Namespace) -> Iterable[str]:
    if args.messages:
        return args.messages
    return (line.rstrip("\n") for line in sys.stdin)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    try:
        config = LoggerConfig(level=args.level, mode=args.mode, file=args.file)
        severity = Severity.parse(args.severity)
    except (ValidationError, ValueError) as e:
        logger.error(f"Invalid logger configuration: {e}")
        sys.exit(2)

    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="coreason-logqueue")
    file_queue = FileAppendQueue(config.file, executor=executor) if config.file is not None else None
    log = LeveledLogger(config, file_queue=file_queue)

    accepted = 0
    try:
        for message in read_messages(args):
            if log.log(severity, message):
                accepted += 1
    finally:
        # Let the drain job finish so queued lines reach the file
        executor.shutdown(wait=True)

    logger.debug(f"Logged {accepted} message(s) at {severity.label}")


if __name__ == "__main__":
    main()  # pragma: no cover
