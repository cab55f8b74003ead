"""
Deadline-bounded status polling.

Payment confirmation on the storefront is asynchronous and offers no
callback to the test. ``StatusPoller`` repeatedly nudges the page (e.g.
clicks "Cek Status" when it is shown) and checks for a terminal marker
until it appears or the deadline passes.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from common.exceptions import DeadlineExceededError
from common.models import PollOutcome

from .clock import Clock, SystemClock
from .conditions import Condition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Probe:
    """A side-effecting nudge, invoked only while its trigger is present."""

    name: str
    trigger: Condition
    action: Callable[[], Awaitable[Any]]


class StatusPoller:
    """
    Check a terminal condition on a fixed interval until a deadline.

    Every cycle checks the terminal condition first, then fires the probe
    if its trigger is currently present, then sleeps. The probe and the
    sleep are both cut short at the deadline, so a run never blocks past
    ``deadline + interval``.
    """

    DEFAULT_INTERVAL_MS = 3_000
    DEFAULT_DEADLINE_MS = 120_000

    def __init__(
        self,
        interval_ms: float = DEFAULT_INTERVAL_MS,
        deadline_ms: float = DEFAULT_DEADLINE_MS,
        clock: Optional[Clock] = None,
    ) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        if deadline_ms <= 0:
            raise ValueError("deadline_ms must be positive")

        self.interval_ms = interval_ms
        self.deadline_ms = deadline_ms
        self.clock = clock or SystemClock()

    async def poll(
        self,
        terminal: Condition,
        probe: Optional[Probe] = None,
    ) -> PollOutcome:
        """
        Poll until ``terminal`` holds or the deadline elapses.

        Args:
            terminal: Condition marking completion, checked instantaneously.
            probe: Optional nudge fired each cycle while its trigger is present.

        Returns:
            PollOutcome with ``completed`` set if the terminal condition was seen.
        """
        start = self.clock.now_ms()
        probe_count = 0

        while self.clock.now_ms() - start < self.deadline_ms:
            evaluation = await terminal.evaluate(0)
            if evaluation.satisfied:
                elapsed = self.clock.now_ms() - start
                logger.info(
                    "%s after %d probe(s) (%.1fs)",
                    terminal.name,
                    probe_count,
                    elapsed / 1000,
                )
                return self._outcome(elapsed, probe_count, completed=True)

            if probe is not None and (await probe.trigger.evaluate(0)).satisfied:
                probe_count += 1
                try:
                    await asyncio.wait_for(
                        probe.action(), timeout=self._remaining_ms(start) / 1000
                    )
                except asyncio.TimeoutError:
                    logger.warning(
                        "Probe '%s' #%d cut off at the deadline",
                        probe.name,
                        probe_count,
                    )
                except Exception as e:
                    logger.warning(
                        "Probe '%s' #%d raised %s: %s",
                        probe.name,
                        probe_count,
                        type(e).__name__,
                        e,
                    )
                else:
                    logger.debug("Probe '%s' #%d fired", probe.name, probe_count)

            remaining = self._remaining_ms(start)
            if remaining <= 0:
                break
            await self.clock.sleep_ms(min(self.interval_ms, remaining))

        elapsed = self.clock.now_ms() - start
        logger.warning(
            "%s not observed within %.1fs (%d probe(s))",
            terminal.name,
            self.deadline_ms / 1000,
            probe_count,
        )
        return self._outcome(elapsed, probe_count, completed=False)

    async def poll_or_raise(
        self,
        terminal: Condition,
        probe: Optional[Probe] = None,
        step: Optional[str] = None,
        location: Optional[Callable[[], str]] = None,
    ) -> PollOutcome:
        """
        Like ``poll``, but raise when the deadline elapses.

        Raises:
            DeadlineExceededError: If the terminal condition was never observed.
        """
        outcome = await self.poll(terminal, probe)
        if not outcome.completed:
            raise DeadlineExceededError(
                step=step or f"wait for {terminal.name}",
                outcome=outcome,
                location=location() if location else None,
            )
        return outcome

    def _outcome(self, elapsed: float, probe_count: int, completed: bool) -> PollOutcome:
        return PollOutcome(
            elapsed_ms=elapsed,
            probe_count=probe_count,
            completed=completed,
            deadline_ms=self.deadline_ms,
            interval_ms=self.interval_ms,
        )

    def _remaining_ms(self, start: float) -> float:
        return max(self.deadline_ms - (self.clock.now_ms() - start), 0)
