import logging
from concurrent.futures import Executor, Future
from typing import Any, Callable, Generator, List, Tuple

import pytest
from loguru import logger


class ManualExecutor(Executor):
    """
    Executor that only runs jobs when told to, so tests control exactly when a
    drain job (the "in-flight" file append) makes progress.
    """

    def __init__(self) -> None:
        self.jobs: List[Tuple[Callable[..., Any], Tuple[Any, ...]]] = []
        self.rejecting = False

    def submit(self, fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> "Future[Any]":
        if self.rejecting:
            raise RuntimeError("cannot schedule new futures after shutdown")
        self.jobs.append((fn, args))
        return Future()

    def run_next(self) -> None:
        fn, args = self.jobs.pop(0)
        fn(*args)

    def run_all(self) -> None:
        while self.jobs:
            self.run_next()


@pytest.fixture
def manual_executor() -> ManualExecutor:
    return ManualExecutor()


@pytest.fixture  # type: ignore[misc]
def caplog(caplog: pytest.LogCaptureFixture) -> Generator[pytest.LogCaptureFixture, None, None]:
    class PropagateHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            logging.getLogger(record.name).handle(record)

    handler_id = logger.add(PropagateHandler(), format="{message}", level="DEBUG")
    yield caplog
    logger.remove(handler_id)
