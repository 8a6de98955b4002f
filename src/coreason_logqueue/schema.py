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
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from coreason_logqueue.levels import Severity, SinkMode


class LoggerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: Severity = Severity.DEBUG  # Threshold
    mode: SinkMode = SinkMode.CONSOLE
    file: Optional[Path] = None

    @field_validator("level", mode="before")
    @classmethod
    def parse_level(cls, v: Any) -> Severity:
        return Severity.parse(v)

    @field_validator("mode", mode="before")
    @classmethod
    def parse_mode(cls, v: Any) -> SinkMode:
        return SinkMode.parse(v)

    @field_validator("file", mode="before")
    @classmethod
    def blank_file_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def require_file_for_file_sink(self) -> "LoggerConfig":
        if self.mode.writes_file and self.file is None:
            raise ValueError(f"mode {self.mode.value} requires a log file path")
        return self
