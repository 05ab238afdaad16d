"""
Simulated external calls.

Login, registration and booking confirmation stand in for calls to remote
services: each waits a configured delay, may fail at a configured rate, and
reports its outcome as ``Ok(value)`` or ``Err(reason)``.

The operation's side effect runs only after the delay elapses and only if the
call was neither cancelled nor timed out, so abandoning a call never leaves
partial state behind.
"""

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Callable, ClassVar, Generic, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")

GENERIC_FAILURE = "Something went wrong. Please try again."


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Err:
    """Failed outcome.

    ``code`` is one of ``rejected`` (the request itself was refused),
    ``failed`` (the remote side failed) or ``timeout``.
    """

    reason: str
    code: str = "failed"
    retryable: bool = True
    ok: ClassVar[bool] = False


Result = Union[Ok[T], Err]


class SimulatedGateway:
    """Runs an operation behind an artificial delay with optional failure injection."""

    def __init__(
        self,
        name: str,
        delay: float = 0.0,
        failure_rate: float = 0.0,
        timeout: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ):
        self.name = name
        self.delay = delay
        self.failure_rate = failure_rate
        self.timeout = timeout
        self._rng = rng or random.Random()

    async def call(self, operation: Callable[[], Result]) -> Result:
        """Wait, then run ``operation`` unless the simulated call fails.

        Cancelling the awaiting task abandons the call before ``operation``
        runs; the cancellation propagates to the caller.
        """
        try:
            return await asyncio.wait_for(self._run(operation), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"[GATEWAY] {self.name} timed out after {self.timeout}s")
            return Err(
                reason=f"{self.name} timed out. Please try again.",
                code="timeout",
                retryable=True,
            )

    async def _run(self, operation: Callable[[], Result]) -> Result:
        if self.delay:
            await asyncio.sleep(self.delay)

        if self.failure_rate and self._rng.random() < self.failure_rate:
            logger.warning(f"[GATEWAY] {self.name} failed (simulated)")
            return Err(reason=GENERIC_FAILURE, code="failed", retryable=True)

        return operation()
