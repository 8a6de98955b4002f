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
Serialized, non-blocking file appends.

Producers call ``submit(line)`` from any thread and return immediately. Lines
collect in a live queue; a single drain job on the executor repeatedly takes the
whole queue, writes it with one append, and stops once it finds the queue empty.
At most one write is in flight per queue, and lines reach the file in submit order.
"""

import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from pathlib import Path
from typing import Callable, List, Optional, Union

from coreason_logqueue.logger import logger

Writer = Callable[[Path, str], None]


def append_text(path: Path, text: str) -> None:
    """
    Appends text to path (UTF-8), creating the file and its parent directories if absent.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(text)


class FileAppendQueue:
    def __init__(
        self,
        path: Union[str, Path],
        executor: Optional[Executor] = None,
        writer: Writer = append_text,
    ) -> None:
        self.path = Path(path)
        self.executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="coreason-logqueue")
        self.writer = writer

        # Guards _queue and _draining; never held across a write
        self._lock = threading.Lock()
        self._queue: List[str] = []
        self._draining = False

        self._write_count = 0
        self._dropped_lines = 0

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._queue)

    @property
    def draining(self) -> bool:
        with self._lock:
            return self._draining

    @property
    def write_count(self) -> int:
        return self._write_count

    @property
    def dropped_lines(self) -> int:
        return self._dropped_lines

    def submit(self, line: str) -> None:
        with self._lock:
            self._queue.append(line)
            if self._draining:
                return
            self._draining = True

        try:
            self.executor.submit(self._drain)
        except Exception as e:
            # Executor shut down or saturated: keep the lines, retry on next submit
            with self._lock:
                self._draining = False
            logger.warning(f"Could not schedule log file drain for {self.path}: {e}")

    def _take_batch(self) -> List[str]:
        with self._lock:
            if not self._queue:
                self._draining = False
                return []
            batch = self._queue
            self._queue = []
            return batch

    def _drain(self) -> None:
        try:
            while True:
                batch = self._take_batch()
                if not batch:
                    return
                self._write(batch)
        except BaseException:
            with self._lock:
                self._draining = False
            raise

    def _write(self, batch: List[str]) -> None:
        self._write_count += 1
        try:
            self.writer(self.path, "\n".join(batch) + "\n")
        except Exception as e:
            self._dropped_lines += len(batch)
            logger.warning(f"Dropped {len(batch)} log line(s); append to {self.path} failed: {e}")
            return
        logger.debug(f"Appended {len(batch)} line(s) to {self.path}")
