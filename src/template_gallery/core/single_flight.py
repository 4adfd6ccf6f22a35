"""Single-flight memoization of an async operation.

The first caller starts the operation; callers arriving while it runs
await the same task, and callers after it finishes get the stored value.
There is no expiry. The cell is an ordinary object handed to whoever needs
it, so its lifetime (and reset between tests) is controlled by the owner.
"""

from __future__ import annotations

import asyncio
import enum
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from template_gallery.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class FlightState(enum.Enum):
    """Lifecycle of a single-flight cell."""

    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    DONE = "done"


class SingleFlight(Generic[T]):
    """Cache cell that runs an async factory at most once.

    Thread Safety:
        Safe for concurrent asyncio tasks on one event loop. Not shared
        across event loops.

    Failure:
        If the factory raises, every waiting caller receives the exception
        and the cell returns to IDLE so a later call can try again.
    """

    def __init__(self, name: str = "value") -> None:
        """Initialize an empty cell.

        Args:
            name: Label used in log messages

        """
        self.name = name
        self._task: asyncio.Task[T] | None = None
        self._value: T | None = None
        self._state = FlightState.IDLE

    @property
    def state(self) -> FlightState:
        """Current lifecycle state."""
        return self._state

    async def get(self, factory: Callable[[], Awaitable[T]]) -> T:
        """Return the memoized value, starting the factory if needed.

        Args:
            factory: Coroutine function producing the value; only called
                by the first caller

        Returns:
            The shared result

        """
        if self._state is FlightState.DONE:
            return self._value  # type: ignore[return-value]

        if self._task is None:
            logger.debug("Starting single-flight fetch of %s", self.name)
            self._task = asyncio.ensure_future(factory())
            self._state = FlightState.IN_FLIGHT
            self._task.add_done_callback(self._on_done)

        # shield() so one cancelled waiter does not cancel the shared fetch
        return await asyncio.shield(self._task)

    def _on_done(self, task: asyncio.Task[T]) -> None:
        if task is not self._task:
            return
        if task.cancelled() or task.exception() is not None:
            logger.debug("Single-flight fetch of %s failed", self.name)
            self._task = None
            self._state = FlightState.IDLE
            return
        self._value = task.result()
        self._state = FlightState.DONE

    def reset(self) -> None:
        """Forget the stored value so the next call fetches again.

        A fetch already in flight keeps running for its current waiters.
        """
        self._task = None
        self._value = None
        self._state = FlightState.IDLE
