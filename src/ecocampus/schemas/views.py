"""Leaderboard response schemas."""

from typing import List, Optional

from pydantic import BaseModel, Field


class StudentSummary(BaseModel):
    """Leaderboard projection of a single student."""

    student_id: str
    display_name: str
    initials: str
    department: str
    lifetime_points: int = Field(..., ge=0)
    avatar_url: str
    is_current_user: bool = False


class RankedStudent(BaseModel):
    rank: int = Field(..., ge=1)
    student: StudentSummary


class PodiumSlotRead(BaseModel):
    """Podium position; ``student`` is null for an absent slot."""

    rank: int = Field(..., ge=1)
    student: Optional[StudentSummary] = None


class StudentLeaderboardRead(BaseModel):
    """Student leaderboard payload: podium plus the ranked remainder."""

    podium: List[PodiumSlotRead]
    rest: List[RankedStudent]
    current_user: Optional[RankedStudent] = None
    total_students: int = Field(..., ge=0)
    skipped_records: int = Field(..., ge=0)


class DepartmentStandingRead(BaseModel):
    """Department leaderboard row."""

    rank: int = Field(..., ge=1)
    name: str
    total_points: int = Field(..., ge=0)
    member_count: int = Field(..., ge=0)


class DepartmentDetailRead(BaseModel):
    """Department drill-down with its ranked members."""

    rank: int = Field(..., ge=1)
    name: str
    total_points: int = Field(..., ge=0)
    member_count: int = Field(..., ge=0)
    members: List[RankedStudent]
