"""Immutable leaderboard types shared by the aggregation pipeline."""

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RosterEntry(BaseModel):
    """Raw roster row as supplied by the data layer."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Optional[str] = None
    display_name: Optional[str] = None
    affiliation: Optional[str] = None
    lifetime_points: Optional[int] = None
    avatar_url: Optional[str] = None

    @field_validator("id", "display_name", "affiliation", "avatar_url", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Optional[str]:
        return None if value is None else str(value)

    @field_validator("lifetime_points", mode="before")
    @classmethod
    def coerce_points(cls, value: Any) -> Optional[int]:
        # Unparseable point totals count as zero rather than dropping the user
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError):
            pass
        try:
            return int(float(value))
        except (TypeError, ValueError, OverflowError):
            return 0


class NormalizedUser(BaseModel):
    """Canonical view record for one roster entry."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    initials: str = Field(..., max_length=2)
    department: str = Field(..., min_length=1)
    lifetime_points: int = Field(..., ge=0)
    is_current_user: bool = False
    avatar_url: Optional[str] = None


class DepartmentAggregate(BaseModel):
    """Points rollup for a single department."""

    model_config = ConfigDict(frozen=True)

    name: str
    total_points: int
    member_count: int
    members: Tuple[NormalizedUser, ...] = ()


class SkippedRecord(BaseModel):
    """Roster entry excluded during normalization."""

    model_config = ConfigDict(frozen=True)

    index: int
    record_id: Optional[str] = None
    reason: str


class RankedUser(BaseModel):
    model_config = ConfigDict(frozen=True)

    rank: int = Field(..., ge=1)
    user: NormalizedUser


class PodiumSlot(BaseModel):
    """A podium position; ``user`` is ``None`` when the slot is absent."""

    model_config = ConfigDict(frozen=True)

    rank: int = Field(..., ge=1)
    user: Optional[NormalizedUser] = None

    @property
    def is_absent(self) -> bool:
        return self.user is None


class LeaderboardSnapshot(BaseModel):
    """Fully computed result of one aggregation pass.

    Snapshots are never updated in place; the next recomputation supersedes
    them wholesale.
    """

    model_config = ConfigDict(frozen=True)

    individuals: Tuple[NormalizedUser, ...] = ()
    departments: Tuple[DepartmentAggregate, ...] = ()
    podium: Tuple[PodiumSlot, ...] = ()
    rest: Tuple[RankedUser, ...] = ()
    current_user: Optional[RankedUser] = None
    skipped: Tuple[SkippedRecord, ...] = ()
