# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logqueue

from enum import Enum, IntEnum
from typing import Union


class Severity(IntEnum):
    """
    Message severity. Higher values are more verbose.

    A logger configured at threshold T emits a message at severity S iff T >= S,
    so DEBUG lets everything through and ERROR only lets errors through.
    """

    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4

    @classmethod
    def parse(cls, value: Union["Severity", str]) -> "Severity":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown log level: {value!r} (expected one of {', '.join(cls.__members__)})")

    @property
    def label(self) -> str:
        return self.name

    def allows(self, other: "Severity") -> bool:
        return self >= other


class SinkMode(Enum):
    CONSOLE = "CONSOLE"
    FILE = "FILE"
    ALL = "ALL"

    @classmethod
    def parse(cls, value: Union["SinkMode", str]) -> "SinkMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown log mode: {value!r} (expected one of {', '.join(cls.__members__)})")

    @property
    def writes_console(self) -> bool:
        return self in (SinkMode.CONSOLE, SinkMode.ALL)

    @property
    def writes_file(self) -> bool:
        return self in (SinkMode.FILE, SinkMode.ALL)
