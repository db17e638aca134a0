"""Input producer thread and the event types it queues.

A single daemon thread blocks on terminal input and pushes one event per key
or terminal size change. The queue is bounded and ``put`` blocks, so bursts
are delayed rather than dropped.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable
from dataclasses import dataclass

from ..geometry import Point
from ..input import read_key

logger = logging.getLogger(__name__)

EVENT_QUEUE_SIZE = 64
INPUT_POLL_MS = 120
PUT_RETRY_SECONDS = 0.1


@dataclass(frozen=True)
class KeyEvent:
    key: str


@dataclass(frozen=True)
class ResizeEvent:
    size: Point


@dataclass(frozen=True)
class InputClosedEvent:
    """Terminal input can no longer be read."""

    reason: str = ""


Event = KeyEvent | ResizeEvent | InputClosedEvent


def new_event_queue() -> queue.Queue[Event]:
    return queue.Queue(maxsize=EVENT_QUEUE_SIZE)


class InputProducer:
    """Background reader feeding key, resize and input-closed events into a queue."""

    def __init__(
        self,
        stdin_fd: int,
        events: queue.Queue[Event],
        get_size: Callable[[], Point],
        initial_size: Point,
        *,
        read_key_fn: Callable[..., str] = read_key,
        poll_ms: int = INPUT_POLL_MS,
    ) -> None:
        self.stdin_fd = stdin_fd
        self.events = events
        self._get_size = get_size
        self._last_size = initial_size
        self._read_key = read_key_fn
        self._poll_ms = poll_ms
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        self._thread = threading.Thread(
            target=self._run,
            name="lazydig-input",
            daemon=True,
        )
        self._thread.start()

    def stop(self, timeout: float = 1.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def _put(self, event: Event) -> bool:
        """Block until ``event`` is queued; give up only when stopping."""
        while not self._stop.is_set():
            try:
                self.events.put(event, timeout=PUT_RETRY_SECONDS)
                return True
            except queue.Full:
                continue
        return False

    def poll_once(self) -> None:
        """Read at most one key and report any size change."""
        key = self._read_key(self.stdin_fd, timeout_ms=self._poll_ms)
        if key:
            self._put(KeyEvent(key))
        size = self._get_size()
        if size != self._last_size:
            self._last_size = size
            self._put(ResizeEvent(size))

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                self.poll_once()
            except EOFError:
                logger.info("terminal input reached end of file")
                self._put(InputClosedEvent("eof"))
                return
            except OSError as exc:
                logger.error("terminal input failed: %s", exc)
                self._put(InputClosedEvent(str(exc)))
                return
