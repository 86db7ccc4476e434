"""Leaderboard aggregation services."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import User
from ..schemas.leaderboard import DepartmentAggregate, LeaderboardSnapshot, RosterEntry
from .aggregation_service import aggregate
from .normalizer_service import normalize
from .ranking_service import DEFAULT_PODIUM_SIZE, present

logger = logging.getLogger(__name__)

MAX_ROSTER_LIMIT = 5000


class LeaderboardRuleViolation(Exception):
    """Raised when a leaderboard lookup cannot be satisfied."""

    def __init__(self, detail: str, status_code: int = 400) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


def build_snapshot(
    entries: Iterable[Any],
    current_user_id: Optional[str] = None,
    *,
    podium_size: int = DEFAULT_PODIUM_SIZE,
) -> LeaderboardSnapshot:
    """Run normalization, aggregation and ranking over one roster snapshot."""

    normalized = normalize(entries, current_user_id)
    departments = aggregate(normalized.users)
    snapshot = present(normalized.users, departments, podium_size=podium_size)

    if normalized.skipped:
        logger.warning("leaderboard built with %d skipped roster records", len(normalized.skipped))
    logger.debug(
        "leaderboard built: %d students across %d departments",
        len(snapshot.individuals),
        len(snapshot.departments),
    )
    return snapshot.model_copy(update={"skipped": normalized.skipped})


def load_roster(session: Session, *, limit: int = 1000) -> Tuple[RosterEntry, ...]:
    """Return the top users by lifetime points as roster entries."""

    limit = max(1, min(limit, MAX_ROSTER_LIMIT))

    stmt = (
        select(User)
        .order_by(User.lifetime_points.desc(), User.id.asc())
        .limit(limit)
    )
    users = session.execute(stmt).scalars().all()
    return tuple(
        RosterEntry(
            id=user.id,
            display_name=user.full_name,
            affiliation=user.course,
            lifetime_points=user.lifetime_points,
            avatar_url=user.profile_img_url,
        )
        for user in users
    )


def find_department(snapshot: LeaderboardSnapshot, name: str) -> Tuple[int, DepartmentAggregate]:
    """Return the rank and aggregate for a department in the snapshot."""

    key = name.strip().upper()
    for rank, department in enumerate(snapshot.departments, start=1):
        if department.name == key:
            return rank, department
    raise LeaderboardRuleViolation(f"Department {name} not found", status_code=404)
