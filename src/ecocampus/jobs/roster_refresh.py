"""Background scheduler for leaderboard roster refreshes."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from fastapi import FastAPI
from sqlalchemy.orm import Session

from ..core.config import get_settings
from ..core.database import SessionLocal
from ..services.leaderboard_service import load_roster
from ..services.roster_cache import RosterCache, roster_cache

logger = logging.getLogger(__name__)

JOB_ID = "roster_refresh"

_scheduler = AsyncIOScheduler(timezone="UTC")


def refresh_roster_once(
    session_factory: Callable[[], Session] = SessionLocal,
    cache: RosterCache = roster_cache,
) -> int:
    """Fetch the roster and publish it to the cache; return the entry count."""

    generation = cache.next_generation()
    session = session_factory()
    try:
        entries = load_roster(session, limit=get_settings().roster_fetch_limit)
    except Exception:
        session.rollback()
        logger.exception("roster refresh failed")
        raise
    finally:
        session.close()

    cache.publish(entries, generation=generation)
    return len(entries)


def _execute_roster_refresh() -> None:
    # Runs in the scheduler thread pool; must stay synchronous
    try:
        count = refresh_roster_once()
        logger.info("roster refresh completed: %d entries", count)
    except Exception:
        logger.exception("roster refresh job failed")


def register_scheduler(app: FastAPI) -> None:
    """Attach APScheduler lifecycle hooks to the FastAPI app."""

    settings = get_settings()
    if not settings.roster_refresh_enabled:
        logger.info("roster refresh scheduler disabled")
        return

    @app.on_event("startup")
    async def start_scheduler() -> None:
        if not _scheduler.running:
            _scheduler.add_job(
                _execute_roster_refresh,
                "interval",
                seconds=settings.roster_refresh_seconds,
                id=JOB_ID,
                next_run_time=datetime.now(timezone.utc),
                replace_existing=True,
                max_instances=1,
                coalesce=True,
            )
            _scheduler.start()
            logger.info("roster refresh scheduler started")

    @app.on_event("shutdown")
    async def shutdown_scheduler() -> None:
        if _scheduler.running:
            _scheduler.shutdown(wait=False)
            logger.info("roster refresh scheduler stopped")
