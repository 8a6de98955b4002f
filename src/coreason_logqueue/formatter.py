# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_logqueue

"""
Turns a log call into a Formatted Line:

    [LEVEL][PID][YYYY-MM-DD HH:MM:SS +HH:MM]: message

Payloads are rendered by one of three strategies picked from their shape:
text is used as-is, mappings/sequences/pydantic models become compact JSON,
and anything else goes through str(). None of them raise.
"""

import json
import math
import os
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any, Callable, Optional, Set

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from coreason_logqueue.levels import Severity

Clock = Callable[[], datetime]
PidProvider = Callable[[], int]


def local_now() -> datetime:
    return datetime.now().astimezone()


def _fallback(payload: Any) -> str:
    return f"<{type(payload).__name__}>"


def render_text(payload: str) -> str:
    return payload


def _is_plain_object(value: Any) -> bool:
    cls = type(value)
    return cls.__str__ is object.__str__ and cls.__repr__ is object.__repr__


def _leaf_text(value: Any) -> str:
    # object() style reprs carry a memory address; keep the output stable
    if _is_plain_object(value):
        return _fallback(value)
    try:
        return str(value)
    except Exception:
        return _fallback(value)


def to_json_value(value: Any, _active: Optional[Set[int]] = None) -> Any:
    """
    Converts a payload into plain JSON types (dict, list, str, int, float, bool, None).

    Any Mapping becomes a dict and any non-text Sequence a list. Non-finite floats
    become None, as JSON has no NaN/Infinity. Leaves pydantic knows how to encode
    (datetime, UUID, Decimal, enums, sets, ...) use its JSON mode; anything else
    becomes its str() text.

    Raises:
        ValueError: On a circular reference.
    """
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, BaseModel):
        return to_json_value(value.model_dump(mode="json"), _active)

    if isinstance(value, Mapping) or is_structured(value):
        active = _active if _active is not None else set()
        marker = id(value)
        if marker in active:
            raise ValueError("Circular reference detected")
        active.add(marker)
        try:
            if isinstance(value, Mapping):
                return {_json_key(k): to_json_value(v, active) for k, v in value.items()}
            return [to_json_value(item, active) for item in value]
        finally:
            active.discard(marker)

    try:
        converted = to_jsonable_python(value)
    except Exception:
        return _leaf_text(value)
    return to_json_value(converted, _active)


def _json_key(key: Any) -> Any:
    if key is None or isinstance(key, (str, bool, int, float)):
        return key
    return _leaf_text(key)


def render_structured(payload: Any) -> str:
    try:
        return json.dumps(to_json_value(payload), separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except Exception:
        # Circular reference, runaway nesting or a failing model dump
        return _fallback(payload)


def render_default(payload: Any) -> str:
    try:
        return str(payload)
    except Exception:
        return _fallback(payload)


def is_structured(payload: Any) -> bool:
    if isinstance(payload, (str, bytes, bytearray)):
        return False
    return isinstance(payload, (Mapping, Sequence, BaseModel))


def render_message(payload: Any) -> str:
    if isinstance(payload, str):
        return render_text(payload)
    if is_structured(payload):
        return render_structured(payload)
    return render_default(payload)


def format_timestamp(moment: datetime) -> str:
    """
    Second precision, local time, explicit numeric offset (e.g. 2024-01-31 09:05:00 +09:00).
    Naive datetimes are taken as local time.
    """
    if moment.tzinfo is None or moment.utcoffset() is None:
        moment = moment.astimezone()

    offset = moment.utcoffset()
    total_minutes = int(offset.total_seconds() // 60) if offset is not None else 0
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{moment.strftime('%Y-%m-%d %H:%M:%S')} {sign}{hours:02d}:{minutes:02d}"


class LineFormatter:
    def __init__(self, clock: Optional[Clock] = None, pid: Optional[PidProvider] = None) -> None:
        self.clock = clock or local_now
        self.pid = pid or os.getpid

    def format(self, severity: Severity, payload: Any) -> str:
        message = render_message(payload)
        return f"[{severity.label}][{self.pid()}][{format_timestamp(self.clock())}]: {message}"
