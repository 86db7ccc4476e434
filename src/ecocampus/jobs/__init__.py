"""Scheduled background jobs."""

from .roster_refresh import register_scheduler, refresh_roster_once

__all__ = ["refresh_roster_once", "register_scheduler"]
