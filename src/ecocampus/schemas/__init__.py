"""Public schema exports."""

from .leaderboard import (
	DepartmentAggregate,
	LeaderboardSnapshot,
	NormalizedUser,
	PodiumSlot,
	RankedUser,
	RosterEntry,
	SkippedRecord,
)
from .views import (
	DepartmentDetailRead,
	DepartmentStandingRead,
	PodiumSlotRead,
	RankedStudent,
	StudentLeaderboardRead,
	StudentSummary,
)

__all__ = [
	"DepartmentAggregate",
	"DepartmentDetailRead",
	"DepartmentStandingRead",
	"LeaderboardSnapshot",
	"NormalizedUser",
	"PodiumSlot",
	"PodiumSlotRead",
	"RankedStudent",
	"RankedUser",
	"RosterEntry",
	"SkippedRecord",
	"StudentLeaderboardRead",
	"StudentSummary",
]
