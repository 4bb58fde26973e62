"""A view pairs a dependency with the latest data fetched for it."""

from __future__ import annotations

import queue
import random
import re
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

_UNEXPECTED_RESPONSE_CODE = re.compile(r"Unexpected response code: ([0-9]{3})")

MIN_DELAY_BETWEEN_UPDATES = 0.1
_WAIT_STEP = 0.005

RetryFunc = Callable[[int], "tuple[bool, float]"]


class DependencyStopped(Exception):
    """Raised by a dependency's fetch once the dependency has been stopped."""

    def __init__(self, message: str = "dependency stopped") -> None:
        super().__init__(message)


@dataclass
class ResponseMetadata:
    """Index and staleness information returned with fetched data."""

    last_index: int = 0
    last_contact: float = 0.0


@dataclass
class QueryOptions:
    """Options handed to dependencies that accept them via ``set_options``."""

    allow_stale: bool = False
    wait_time: float = 0.0
    wait_index: int = 0
    default_lease: float = 0.0
    cancelled: threading.Event = field(default_factory=threading.Event)


@dataclass(frozen=True)
class TrackStart:
    id: str


@dataclass(frozen=True)
class TrackStop:
    id: str


@dataclass(frozen=True)
class ServerContacted:
    id: str


@dataclass(frozen=True)
class ServerError:
    id: str
    error: BaseException


@dataclass(frozen=True)
class RetryAttempt:
    id: str
    attempt: int
    sleep: float
    error: BaseException


@dataclass(frozen=True)
class MaxRetries:
    id: str
    count: int


@dataclass(frozen=True)
class Trace:
    id: str
    message: str


@dataclass(frozen=True)
class StaleData:
    id: str
    last_contact: float


@dataclass(frozen=True)
class NoNewData:
    id: str


@dataclass(frozen=True)
class BlockingWait:
    id: str


@dataclass(frozen=True)
class NewData:
    id: str
    data: Any


class View:
    """The most recent data received for one dependency.

    A dependency provides ``id()``, ``stop()`` and ``fetch(clients)``, which
    returns ``(data, ResponseMetadata)`` and raises on failure. It may also
    provide ``set_options(QueryOptions)`` and a true ``blocking_query``
    attribute, in which case ``None`` data is treated as "still waiting".
    Durations are in seconds.
    """

    def __init__(
        self,
        dependency,
        clients=None,
        event_handler: Optional[Callable[[object], None]] = None,
        block_wait_time: float = 0.0,
        max_stale: float = 0.0,
        retry_func: Optional[RetryFunc] = None,
        vault_default_lease: float = 0.0,
    ) -> None:
        self.dependency = dependency
        self.clients = clients
        self._event_handler = event_handler
        self.block_wait_time = block_wait_time
        self.max_stale = max_stale
        self.retry_func = retry_func
        self.default_lease = vault_default_lease

        self._lock = threading.Lock()
        self._data: Any = None
        self._received_data = False
        self._last_index = 0
        self._is_polling = False

        self._stopped = threading.Event()
        self._cancelled = threading.Event()

    def _event(self, event: object) -> None:
        if self._event_handler is not None:
            self._event_handler(event)

    def data(self) -> Any:
        """Return the most recently received data."""
        with self._lock:
            return self._data

    def data_and_last_index(self) -> tuple[Any, int]:
        """Return the data together with the index it arrived with."""
        with self._lock:
            return self._data, self._last_index

    @property
    def last_index(self) -> int:
        with self._lock:
            return self._last_index

    @last_index.setter
    def last_index(self, value: int) -> None:
        with self._lock:
            self._last_index = value

    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()

    def id(self) -> str:
        """Return the dependency's identifier."""
        return self.dependency.id()

    def _begin_polling(self) -> bool:
        with self._lock:
            if self._is_polling:
                return False
            self._is_polling = True
            return True

    def _end_polling(self) -> None:
        with self._lock:
            self._is_polling = False

    def poll(self, view_queue: queue.Queue, err_queue: queue.Queue) -> None:
        """Fetch repeatedly, putting this view on *view_queue* for new data.

        A failure that is not retried is put on *err_queue* and ends polling,
        as does :meth:`stop`.
        """
        retries = 0
        self._event(TrackStart(self.id()))
        if not self._begin_polling():
            return
        try:
            while True:
                done = threading.Event()
                success = threading.Event()
                fetch_errors: queue.Queue = queue.Queue(maxsize=1)
                threading.Thread(
                    target=self.fetch,
                    args=(done, success, fetch_errors),
                    daemon=True,
                ).start()

                while True:
                    if done.is_set():
                        retries = 0
                        if self._stopped.is_set():
                            return
                        view_queue.put(self)
                        break
                    if success.is_set():
                        success.clear()
                        self._event(ServerContacted(self.id()))
                        retries = 0
                        continue
                    try:
                        err = fetch_errors.get_nowait()
                    except queue.Empty:
                        err = None
                    if err is not None:
                        next_retries = self._handle_error(err, retries, err_queue)
                        if next_retries is None:
                            return
                        retries = next_retries
                        break
                    if self._stopped.wait(_WAIT_STEP):
                        return
        finally:
            self._end_polling()
            self._event(TrackStop(self.id()))

    def _handle_error(
        self, err: BaseException, retries: int, err_queue: queue.Queue
    ) -> Optional[int]:
        """Return the next retry count, or None when polling should end."""
        self._event(ServerError(self.id(), err))
        # A 400 will not get better by retrying.
        skip_retry = "Unexpected response code: 400" in str(err)

        if get_response_code_from_error(err) == 500:
            # The server may have restarted, making the index stale.
            with self._lock:
                self._last_index = 0

        if self.retry_func is not None and not skip_retry:
            retry, sleep = self.retry_func(retries)
            if retry:
                self._event(
                    RetryAttempt(self.id(), attempt=retries + 1, sleep=sleep, error=err)
                )
                if self._stopped.wait(sleep):
                    return None
                return retries + 1
            self._event(MaxRetries(self.id(), count=retries))

        if not self._stopped.is_set():
            err_queue.put(err)
        return None

    def fetch(
        self,
        done: threading.Event,
        success: threading.Event,
        err_queue: queue.Queue,
    ) -> None:
        """Fetch until new data is stored, then set *done*.

        *success* is set whenever the server answered without error; an
        error is put on *err_queue*. Returns quietly once stopped.
        """
        self._event(Trace(self.id(), "starting fetch"))
        allow_stale = self.max_stale != 0

        while True:
            if self._stopped.is_set() or self._cancelled.is_set():
                return

            start = time.monotonic()

            set_options = getattr(self.dependency, "set_options", None)
            if callable(set_options):
                set_options(
                    QueryOptions(
                        allow_stale=allow_stale,
                        wait_time=self.block_wait_time,
                        wait_index=self._last_index,
                        default_lease=self.default_lease,
                        cancelled=self._cancelled,
                    )
                )
            self._event(Trace(self.id(), "fetching value"))
            try:
                data, meta = self.dependency.fetch(self.clients)
            except DependencyStopped as err:
                self._event(Trace(self.id(), str(err)))
                return
            except Exception as err:
                if "context canceled" in str(err):
                    self._event(Trace(self.id(), str(err)))
                else:
                    err_queue.put(err)
                return

            if meta is None:
                err_queue.put(
                    RuntimeError(
                        "received nil response metadata - this is a bug "
                        "and should be reported"
                    )
                )
                return

            self._event(Trace(self.id(), "successful data response"))
            success.set()

            if allow_stale and meta.last_contact > self.max_stale:
                allow_stale = False
                self._event(StaleData(self.id(), meta.last_contact))
                continue

            if self.max_stale != 0:
                allow_stale = True

            if meta.last_index == self._last_index:
                self._event(Trace(self.id(), "same index, no new data"))
                continue

            if self._received_data:
                pause = rate_limiter(start)
                if pause > 0:
                    time.sleep(pause)

            with self._lock:
                if meta.last_index < self._last_index:
                    self._event(Trace(self.id(), "wrong index order, resetting"))
                    self._last_index = 0
                    continue
                self._last_index = meta.last_index

                if self._received_data and data == self._data:
                    self._event(NoNewData(self.id()))
                    continue

                if getattr(self.dependency, "blocking_query", False) and data is None:
                    self._event(BlockingWait(self.id()))
                    continue

            self._event(NewData(self.id(), data))
            self.store(data)
            done.set()
            return

    def store(self, data: Any) -> "View":
        """Store *data* as received and return the view."""
        with self._lock:
            self._data = data
            self._received_data = True
        return self

    def stop(self) -> None:
        """Stop the dependency and halt polling and fetching."""
        self.dependency.stop()
        self._stopped.set()
        self._cancelled.set()


def rate_limiter(start: float) -> float:
    """Seconds to sleep so updates are spaced by at least the minimum delay.

    *start* is a :func:`time.monotonic` reading.
    """
    remaining = MIN_DELAY_BETWEEN_UPDATES - (time.monotonic() - start)
    if remaining > 0:
        return remaining + random.uniform(0.0, 0.02)
    return 0.0


def get_response_code_from_error(err: BaseException) -> int:
    """Extract the HTTP status from an "Unexpected response code" error, or 0."""
    match = _UNEXPECTED_RESPONSE_CODE.search(str(err))
    if match is None:
        return 0
    return int(match.group(1))