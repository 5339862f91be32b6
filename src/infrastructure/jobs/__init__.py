"""Background jobs running inside the API process.

- TokenCleanupScheduler: hourly bulk eviction of stale session tokens

Usage:
    from src.core.container import create_token_cleanup_scheduler

    scheduler = create_token_cleanup_scheduler()
    scheduler.start()
"""

from src.infrastructure.jobs.token_cleanup_scheduler import TokenCleanupScheduler

__all__ = ["TokenCleanupScheduler"]
