# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logqueue

from pathlib import Path
from typing import Any, Optional, cast

from coreason_logqueue.append_queue import FileAppendQueue
from coreason_logqueue.console import ConsoleSink
from coreason_logqueue.formatter import LineFormatter
from coreason_logqueue.levels import Severity, SinkMode
from coreason_logqueue.logger import logger
from coreason_logqueue.schema import LoggerConfig


class LeveledLogger:
    """
    Filters messages against a threshold, formats them, and dispatches the line
    to the console sink and/or the serialized file-append queue.

    Every public call returns True when the message passed the level filter and
    was dispatched, False when it was filtered out. Nothing here raises to the caller.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        *,
        formatter: Optional[LineFormatter] = None,
        console: Optional[ConsoleSink] = None,
        file_queue: Optional[FileAppendQueue] = None,
    ) -> None:
        self.config = config or LoggerConfig()
        self.formatter = formatter or LineFormatter()
        self.console = console or ConsoleSink()

        self.file_queue: Optional[FileAppendQueue] = None
        if self.config.mode.writes_file:
            # LoggerConfig guarantees a path in FILE/ALL mode
            self.file_queue = file_queue or FileAppendQueue(cast(Path, self.config.file))

    @property
    def level(self) -> Severity:
        return self.config.level

    @property
    def mode(self) -> SinkMode:
        return self.config.mode

    @property
    def file(self) -> Optional[Path]:
        return self.config.file

    def log(self, severity: Severity, message: Any) -> bool:
        if not self.config.level.allows(severity):
            return False

        line = self.formatter.format(severity, message)

        if self.config.mode.writes_console:
            self.console.write(severity, line)
        if self.file_queue is not None:
            try:
                self.file_queue.submit(line)
            except Exception as e:  # pragma: no cover
                logger.warning(f"Could not queue log line for {self.config.file}: {e}")
        return True

    def debug(self, message: Any) -> bool:
        return self.log(Severity.DEBUG, message)

    def info(self, message: Any) -> bool:
        return self.log(Severity.INFO, message)

    def warn(self, message: Any) -> bool:
        return self.log(Severity.WARN, message)

    warning = warn

    def error(self, message: Any) -> bool:
        return self.log(Severity.ERROR, message)


def create_logger(
    level: Any = Severity.DEBUG,
    mode: Any = SinkMode.CONSOLE,
    file: Optional[Any] = None,
    **kwargs: Any,
) -> LeveledLogger:
    """
    Builds a LeveledLogger from plain options, e.g. create_logger(level="info", mode="all", file="app.log").
    Extra keyword arguments (formatter, console, file_queue) are passed to LeveledLogger.

    Raises:
        pydantic.ValidationError: On an unknown level/mode, or FILE/ALL mode without a file.
    """
    config = LoggerConfig(level=level, mode=mode, file=file)
    return LeveledLogger(config, **kwargs)
