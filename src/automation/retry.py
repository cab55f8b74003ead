"""
Bounded retry of a UI action whose effect shows up asynchronously.

A click on the storefront occasionally fails to register (slow network,
transient overlay, detached element). ``ActionRetrier`` performs the
action, races a set of success conditions, and repeats up to a fixed
number of attempts, giving the caller a confirmed outcome.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence

from common.exceptions import ActionExhaustedError
from common.models import RetryOutcome

from .clock import Clock, SystemClock
from .conditions import Condition, ConditionEvaluation

logger = logging.getLogger(__name__)

Action = Callable[[], Awaitable[Any]]


class ActionRetrier:
    """
    Perform an action up to ``max_attempts`` times until a success condition fires.

    Each attempt invokes the action once and then awaits all conditions
    concurrently, each with ``per_attempt_timeout_ms``. The first condition
    to be satisfied wins and the remaining evaluations are cancelled. An
    action that raises counts as a failed attempt and does not abort the loop.
    """

    DEFAULT_MAX_ATTEMPTS = 3
    DEFAULT_PER_ATTEMPT_TIMEOUT_MS = 15_000

    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        per_attempt_timeout_ms: float = DEFAULT_PER_ATTEMPT_TIMEOUT_MS,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Initialize the retrier.

        Args:
            max_attempts: Maximum number of times the action is invoked.
            per_attempt_timeout_ms: Timeout given to each success condition.
            clock: Time source for elapsed-time reporting.
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if per_attempt_timeout_ms < 0:
            raise ValueError("per_attempt_timeout_ms cannot be negative")

        self.max_attempts = max_attempts
        self.per_attempt_timeout_ms = per_attempt_timeout_ms
        self.clock = clock or SystemClock()

    async def run(
        self,
        action: Action,
        conditions: Sequence[Condition],
        description: str = "action",
    ) -> RetryOutcome:
        """
        Run the action until a success condition fires or attempts run out.

        Args:
            action: Retryable side-effecting operation, e.g. a click.
            conditions: Success conditions raced after every attempt.
            description: Name of the action for logs and diagnostics.

        Returns:
            RetryOutcome describing the run.
        """
        if not conditions:
            raise ValueError("at least one success condition is required")

        start = self.clock.now_ms()
        last_error: Optional[str] = None

        for attempt in range(1, self.max_attempts + 1):
            logger.debug(
                "Attempt %d/%d: %s", attempt, self.max_attempts, description
            )

            try:
                await action()
            except Exception as e:
                last_error = f"{type(e).__name__}: {e}"
                logger.warning(
                    "Attempt %d/%d of '%s' raised %s",
                    attempt,
                    self.max_attempts,
                    description,
                    last_error,
                )
                continue

            winner = await self._race(conditions)
            if winner is not None:
                elapsed = self.clock.now_ms() - start
                logger.info(
                    "'%s' succeeded on attempt %d via %s",
                    description,
                    attempt,
                    winner.condition,
                )
                return RetryOutcome(
                    attempts=attempt,
                    succeeded=True,
                    matched_condition=winner.condition,
                    elapsed_ms=elapsed,
                    last_error=last_error,
                )

            logger.info(
                "Attempt %d/%d of '%s': no success condition within %dms",
                attempt,
                self.max_attempts,
                description,
                self.per_attempt_timeout_ms,
            )

        elapsed = self.clock.now_ms() - start
        logger.error(
            "'%s' exhausted %d attempts", description, self.max_attempts
        )
        return RetryOutcome(
            attempts=self.max_attempts,
            succeeded=False,
            elapsed_ms=elapsed,
            last_error=last_error,
        )

    async def run_or_raise(
        self,
        action: Action,
        conditions: Sequence[Condition],
        description: str = "action",
        location: Optional[Callable[[], str]] = None,
    ) -> RetryOutcome:
        """
        Like ``run``, but raise when every attempt fails.

        Args:
            action: Retryable side-effecting operation.
            conditions: Success conditions raced after every attempt.
            description: Name of the action for logs and diagnostics.
            location: Returns the current page location for the error message.

        Raises:
            ActionExhaustedError: If no success condition fired.
        """
        outcome = await self.run(action, conditions, description)
        if not outcome.succeeded:
            raise ActionExhaustedError(
                description=description,
                attempts=outcome.attempts,
                elapsed_ms=outcome.elapsed_ms,
                location=location() if location else None,
                last_error=outcome.last_error,
                details={
                    "conditions": [c.name for c in conditions],
                    "last_error": outcome.last_error,
                },
            )
        return outcome

    async def _race(
        self, conditions: Sequence[Condition]
    ) -> Optional[ConditionEvaluation]:
        """Await all conditions; return the first satisfied evaluation, if any."""
        tasks = [
            asyncio.ensure_future(c.evaluate(self.per_attempt_timeout_ms))
            for c in conditions
        ]
        pending = set(tasks)
        winner: Optional[ConditionEvaluation] = None

        try:
            while pending and winner is None:
                done, pending = await asyncio.wait(
                    pending, return_when=asyncio.FIRST_COMPLETED
                )
                # Conditions finishing together resolve in declaration order
                for task in tasks:
                    if task in done and task.result().satisfied:
                        winner = task.result()
                        break
        finally:
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        return winner
