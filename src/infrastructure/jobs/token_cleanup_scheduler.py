"""Recurring eviction of stale session tokens.

TokenCleanupScheduler owns one asyncio task for the whole process. Every
``interval`` it issues a single bulk DELETE for tokens whose last_used_at
is older than the inactivity threshold. The task runs on the event loop
next to request handling; database I/O is awaited, so a tick never blocks
a request.

Lifecycle:
    scheduler = TokenCleanupScheduler(database, SystemClock(), logger)
    scheduler.start()        # idempotent
    ...
    await scheduler.stop()   # graceful shutdown

Testing:
    Inject ``clock`` to control "now" and ``sleep`` to decide when a tick
    fires; ``run_once()`` performs one tick directly.
"""

import asyncio
import contextlib
from collections.abc import Awaitable, Callable
from datetime import timedelta

from src.domain.protocols.clock_protocol import ClockProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.repositories.token_repository import (
    TokenRepository,
)

DEFAULT_CLEANUP_INTERVAL = timedelta(hours=1)
DEFAULT_INACTIVITY_THRESHOLD = timedelta(days=7)


class TokenCleanupScheduler:
    """Background job deleting session tokens unused for too long.

    Attributes:
        interval: Delay between two ticks.
        inactivity_threshold: Tokens idle for longer are evicted.
    """

    def __init__(
        self,
        database: Database,
        clock: ClockProtocol,
        logger: LoggerProtocol,
        *,
        interval: timedelta = DEFAULT_CLEANUP_INTERVAL,
        inactivity_threshold: timedelta = DEFAULT_INACTIVITY_THRESHOLD,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the scheduler without starting it.

        Args:
            database: Database providing a fresh session per tick.
            clock: Source of "now" for the eviction cutoff.
            logger: Structured logger.
            interval: Delay between two ticks (default: 1 hour).
            inactivity_threshold: Idle time after which a token is stale
                (default: 7 days).
            sleep: Awaitable used to wait between ticks.
        """
        self.interval = interval
        self.inactivity_threshold = inactivity_threshold
        self._database = database
        self._clock = clock
        self._logger = logger.bind(job="token_cleanup")
        self._sleep = sleep
        self._task: asyncio.Task[None] | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> bool:
        """Start the recurring task on the running event loop.

        Returns:
            True if a task was created, False if one is already running.
        """
        if self.is_running:
            return False

        self._task = asyncio.get_running_loop().create_task(
            self._run(), name="token-cleanup"
        )
        self._logger.info(
            "token_cleanup_started",
            interval_seconds=self.interval.total_seconds(),
            inactivity_threshold_seconds=self.inactivity_threshold.total_seconds(),
        )
        return True

    async def stop(self) -> None:
        """Cancel the recurring task and wait for it to finish.

        Safe to call when the scheduler was never started.
        """
        task, self._task = self._task, None
        if task is None:
            return

        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        self._logger.info("token_cleanup_stopped")

    async def run_once(self) -> int:
        """Perform one eviction pass.

        Failures (database unreachable, lock timeout) are logged and
        swallowed so the next tick still happens.

        Returns:
            Number of deleted tokens (0 when the pass failed).
        """
        cutoff = self._clock.now() - self.inactivity_threshold
        try:
            async with self._database.get_session() as session:
                deleted = await TokenRepository(session).delete_older_than(cutoff)
        except Exception as e:
            self._logger.error(
                "token_cleanup_failed", error=e, cutoff=cutoff.isoformat()
            )
            return 0

        self._logger.info(
            "token_cleanup_completed", deleted=deleted, cutoff=cutoff.isoformat()
        )
        return deleted

    async def _run(self) -> None:
        while True:
            await self._sleep(self.interval.total_seconds())
            await self.run_once()
