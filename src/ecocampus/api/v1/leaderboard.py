"""Leaderboard endpoints."""

from __future__ import annotations

from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.orm import Session

from ...core.config import get_settings
from ...core.database import get_db
from ...schemas.leaderboard import NormalizedUser, RankedUser, RosterEntry
from ...schemas.views import (
    DepartmentDetailRead,
    DepartmentStandingRead,
    PodiumSlotRead,
    RankedStudent,
    StudentLeaderboardRead,
    StudentSummary,
)
from ...services import leaderboard_service
from ...services.leaderboard_service import LeaderboardRuleViolation
from ...services.roster_cache import roster_cache
from ...utils.avatars import resolve_avatar_url

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])

_STUDENT_EXAMPLE = {
    "student_id": "bbbbbbbb-bbbb-bbbb-bbbb-bbbbbbbbbbbb",
    "display_name": "John Roe",
    "initials": "JR",
    "department": "BCOM",
    "lifetime_points": 700,
    "avatar_url": "https://ui-avatars.com/api/?name=John+Roe&background=10B981&color=fff&size=128",
    "is_current_user": False,
}


def get_roster(db: Session = Depends(get_db)) -> Tuple[RosterEntry, ...]:
    """Return the cached roster, falling back to a direct database read."""

    cached = roster_cache.latest()
    if cached is not None:
        return cached.entries
    return leaderboard_service.load_roster(db, limit=get_settings().roster_fetch_limit)


def _student(user: NormalizedUser) -> StudentSummary:
    return StudentSummary(
        student_id=user.id,
        display_name=user.display_name,
        initials=user.initials,
        department=user.department,
        lifetime_points=user.lifetime_points,
        avatar_url=resolve_avatar_url(user.avatar_url, user.display_name),
        is_current_user=user.is_current_user,
    )


def _ranked(entry: RankedUser) -> RankedStudent:
    return RankedStudent(rank=entry.rank, student=_student(entry.user))


@router.get(
    "",
    response_model=StudentLeaderboardRead,
    summary="Student leaderboard",
    responses={
        200: {
            "description": "Podium and ranked students ordered by lifetime points",
            "content": {
                "application/json": {
                    "example": {
                        "podium": [
                            {"rank": 1, "student": _STUDENT_EXAMPLE},
                            {"rank": 2, "student": None},
                            {"rank": 3, "student": None},
                        ],
                        "rest": [],
                        "current_user": None,
                        "total_students": 1,
                        "skipped_records": 0,
                    }
                }
            },
        }
    },
)
def get_student_leaderboard(
    current_user_id: Optional[str] = Query(None, description="Highlights this user in the response"),
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Ranks to return, podium included; never below the podium size"),
    roster: Tuple[RosterEntry, ...] = Depends(get_roster),
) -> StudentLeaderboardRead:
    """Return the podium and the ranked students that follow it."""

    settings = get_settings()
    # The podium is always shown in full
    limit = max(limit or settings.leaderboard_display_limit, settings.podium_size)
    snapshot = leaderboard_service.build_snapshot(
        roster, current_user_id, podium_size=settings.podium_size
    )
    return StudentLeaderboardRead(
        podium=[
            PodiumSlotRead(rank=slot.rank, student=_student(slot.user) if slot.user else None)
            for slot in snapshot.podium
        ],
        rest=[_ranked(entry) for entry in snapshot.rest if entry.rank <= limit],
        current_user=_ranked(snapshot.current_user) if snapshot.current_user else None,
        total_students=len(snapshot.individuals),
        skipped_records=len(snapshot.skipped),
    )


@router.get(
    "/departments",
    response_model=List[DepartmentStandingRead],
    summary="Department leaderboard",
    responses={
        200: {
            "description": "Departments ordered by total lifetime points",
            "content": {
                "application/json": {
                    "example": [
                        {"rank": 1, "name": "BAF", "total_points": 800, "member_count": 2},
                        {"rank": 2, "name": "BCOM", "total_points": 700, "member_count": 1},
                    ]
                }
            },
        }
    },
)
def get_department_leaderboard(
    roster: Tuple[RosterEntry, ...] = Depends(get_roster),
) -> List[DepartmentStandingRead]:
    """Return departments ranked by the points of their students."""

    snapshot = leaderboard_service.build_snapshot(roster, podium_size=get_settings().podium_size)
    return [
        DepartmentStandingRead(
            rank=rank,
            name=department.name,
            total_points=department.total_points,
            member_count=department.member_count,
        )
        for rank, department in enumerate(snapshot.departments, start=1)
    ]


@router.get(
    "/departments/{name}",
    response_model=DepartmentDetailRead,
    summary="Department drill-down",
    responses={404: {"description": "Department not found"}},
)
def get_department_detail(
    name: str = Path(..., description="Department code, e.g. BAF"),
    current_user_id: Optional[str] = Query(None, description="Highlights this user in the response"),
    roster: Tuple[RosterEntry, ...] = Depends(get_roster),
) -> DepartmentDetailRead:
    """Return one department with its students ranked by points."""

    snapshot = leaderboard_service.build_snapshot(
        roster, current_user_id, podium_size=get_settings().podium_size
    )
    try:
        rank, department = leaderboard_service.find_department(snapshot, name)
    except LeaderboardRuleViolation as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc

    return DepartmentDetailRead(
        rank=rank,
        name=department.name,
        total_points=department.total_points,
        member_count=department.member_count,
        members=[
            RankedStudent(rank=position, student=_student(member))
            for position, member in enumerate(department.members, start=1)
        ],
    )
