"""Single-lane, rate-limited dispatcher for outbound completion calls.

Every remote call in the process goes through one RemoteCallDispatcher. Calls
are queued and run one at a time; each attempt must first be admitted by a
sliding window that allows at most ``rate_limit_rpm`` admissions per
``window_seconds``. Failed attempts are retried:

  - rate limited (HTTP 429): wait ``retry_delay_ms * 2 ** attempt``
  - anything else:           wait ``retry_delay_ms``

After ``max_retries`` attempts the last error propagates to the caller.
"""

import asyncio
import contextlib
import time
from collections import deque
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from pdfparser.config.settings import Settings
from pdfparser.enrichment.exceptions import RemoteRateLimitError, RemoteServiceError
from pdfparser.logging.logger import Log

T = TypeVar("T")

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class DispatcherConfig:
    rate_limit_rpm: int = 30
    max_retries: int = 3
    retry_delay_ms: int = 2000
    window_seconds: float = 60.0

    def __post_init__(self) -> None:
        if self.rate_limit_rpm < 1:
            raise ValueError("rate_limit_rpm must be at least 1")
        if self.max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        if self.retry_delay_ms < 0:
            raise ValueError("retry_delay_ms must be non-negative")
        if self.window_seconds <= 0:
            raise ValueError("window_seconds must be positive")

    @classmethod
    def from_settings(cls, settings: Settings) -> "DispatcherConfig":
        return cls(
            rate_limit_rpm=settings.openai_rate_limit_rpm,
            max_retries=settings.openai_max_retries,
            retry_delay_ms=settings.openai_retry_delay_ms,
        )


@dataclass
class _QueueItem:
    """A pending call. Only the dispatcher's worker touches it once queued."""

    sequence: int
    call: Callable[[], Awaitable[Any]]
    future: "asyncio.Future[Any]"


def is_rate_limited(exc: BaseException) -> bool:
    if isinstance(exc, RemoteRateLimitError):
        return True
    return getattr(exc, "status_code", None) == 429 or getattr(exc, "status", None) == 429


def _settle(item: _QueueItem, *, result: Any = None, error: BaseException | None = None) -> None:
    """Resolve a caller's future unless it is already resolved."""
    if item.future.done():
        return
    if error is not None:
        item.future.set_exception(error)
    else:
        item.future.set_result(result)


class RemoteCallDispatcher:
    """Serializes remote calls through a rate-limited, retrying queue."""

    def __init__(
        self,
        config: DispatcherConfig,
        *,
        clock: Clock = time.monotonic,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._config = config
        self._clock = clock
        self._sleep = sleep
        self._admissions: deque[float] = deque()
        self._sequence = 0
        self._loop: asyncio.AbstractEventLoop | None = None
        self._queue: asyncio.Queue[_QueueItem] | None = None
        self._worker: asyncio.Task[None] | None = None
        Log.info(
            f"Remote call dispatcher configured: {config.rate_limit_rpm} calls per "
            f"{config.window_seconds:.0f}s, {config.max_retries} attempts, "
            f"{config.retry_delay_ms}ms base delay"
        )

    @property
    def config(self) -> DispatcherConfig:
        return self._config

    async def submit(self, call: Callable[[], Awaitable[T]]) -> T:
        """Queue a zero-argument coroutine factory and wait for its result.

        The factory is invoked once per attempt. If the caller stops waiting,
        the call still runs to completion or retry exhaustion.

        Raises:
            Exception: the error of the final attempt, once retries are exhausted.
        """
        queue = self._ensure_worker()
        loop = asyncio.get_running_loop()
        self._sequence += 1
        item = _QueueItem(sequence=self._sequence, call=call, future=loop.create_future())
        Log.debug(f"Remote call #{item.sequence} queued ({queue.qsize()} ahead)")
        queue.put_nowait(item)
        return await asyncio.shield(item.future)

    async def aclose(self) -> None:
        """Stop the worker. Calls still queued are cancelled."""
        worker, self._worker = self._worker, None
        queue, self._queue = self._queue, None
        self._loop = None
        while queue is not None and not queue.empty():
            pending = queue.get_nowait()
            if not pending.future.done():
                pending.future.cancel()
        if worker is None or worker.done():
            return
        worker.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await worker

    def backoff_seconds(self, attempt: int, exc: BaseException) -> float:
        """Delay after failed attempt number ``attempt`` (0-based)."""
        delay_ms = self._config.retry_delay_ms
        if is_rate_limited(exc):
            delay_ms = delay_ms * 2**attempt
        return delay_ms / 1000

    def _ensure_worker(self) -> "asyncio.Queue[_QueueItem]":
        loop = asyncio.get_running_loop()
        if (
            self._queue is None
            or self._loop is not loop
            or self._worker is None
            or self._worker.done()
        ):
            self._loop = loop
            self._queue = asyncio.Queue()
            self._worker = loop.create_task(self._drain(self._queue))
        return self._queue

    async def _drain(self, queue: "asyncio.Queue[_QueueItem]") -> None:
        while True:
            item = await queue.get()
            try:
                result = await self._run_with_retry(item)
            except asyncio.CancelledError:
                task = asyncio.current_task()
                if task is not None and task.cancelling():
                    if not item.future.done():
                        item.future.cancel()
                    raise
                Log.error(f"Remote call #{item.sequence} raised CancelledError")
                _settle(
                    item,
                    error=RemoteServiceError(f"Remote call #{item.sequence} was cancelled"),
                )
            except Exception as exc:
                _settle(item, error=exc)
            else:
                _settle(item, result=result)
            finally:
                queue.task_done()

    async def _run_with_retry(self, item: _QueueItem) -> Any:
        max_retries = self._config.max_retries
        last_error: Exception | None = None

        for attempt in range(max_retries):
            if last_error is not None:
                delay = self.backoff_seconds(attempt - 1, last_error)
                if is_rate_limited(last_error):
                    Log.warning(
                        f"Rate limit reached, waiting {delay * 1000:.0f}ms before retrying "
                        f"remote call #{item.sequence}"
                    )
                await self._sleep(delay)

            await self._acquire_slot()
            Log.debug(f"Remote call #{item.sequence}: attempt {attempt + 1}/{max_retries}")
            try:
                return await item.call()
            except Exception as exc:
                last_error = exc
                Log.error(
                    f"Remote call #{item.sequence} failed "
                    f"(attempt {attempt + 1}/{max_retries}): {type(exc).__name__}: {exc}"
                )

        raise last_error or RemoteServiceError(f"Remote call #{item.sequence} was never attempted")

    async def _acquire_slot(self) -> None:
        """Block until the sliding window has room, then record an admission."""
        window = self._config.window_seconds
        while True:
            now = self._clock()
            while self._admissions and now - self._admissions[0] >= window:
                self._admissions.popleft()
            if len(self._admissions) < self._config.rate_limit_rpm:
                self._admissions.append(now)
                return
            wait = window - (now - self._admissions[0])
            Log.debug(f"Rate window full, waiting {wait:.2f}s for a free slot")
            await self._sleep(wait)
