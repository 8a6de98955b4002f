# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logqueue

import sys
from typing import Optional, TextIO

from coreason_logqueue.levels import Severity
from coreason_logqueue.logger import logger

RED = "\x1b[31m"
YELLOW = "\x1b[33m"
RESET_FOREGROUND = "\x1b[39m"

STYLES = {
    Severity.ERROR: RED,
    Severity.WARN: YELLOW,
}


class ConsoleSink:
    """
    Synchronous console output, one line per call.

    ERROR is red, WARN is yellow, everything else is unstyled. Styling only wraps
    the line; the text itself is the same line the file sink receives.
    """

    def __init__(self, stream: Optional[TextIO] = None, colorize: Optional[bool] = None) -> None:
        self._stream = stream
        self.colorize = colorize

    @property
    def stream(self) -> TextIO:
        # Resolved per write so redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def should_colorize(self, stream: TextIO) -> bool:
        if self.colorize is not None:
            return self.colorize
        isatty = getattr(stream, "isatty", None)
        try:
            return bool(isatty and isatty())
        except Exception:
            return False

    def style(self, severity: Severity, line: str) -> str:
        color = STYLES.get(severity)
        if color is None:
            return line
        return f"{color}{line}{RESET_FOREGROUND}"

    def write(self, severity: Severity, line: str) -> None:
        stream = self.stream
        text = self.style(severity, line) if self.should_colorize(stream) else line
        try:
            stream.write(text + "\n")
            stream.flush()
        except Exception as e:
            logger.warning(f"Console write failed: {e}")
