"""Rank assignment and podium partitioning."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from ..schemas.leaderboard import (
    DepartmentAggregate,
    LeaderboardSnapshot,
    NormalizedUser,
    PodiumSlot,
    RankedUser,
)
from .aggregation_service import department_sort_key, member_sort_key

DEFAULT_PODIUM_SIZE = 3


def rank_individuals(users: Iterable[NormalizedUser]) -> Tuple[NormalizedUser, ...]:
    """Order users by points descending with ids breaking ties."""

    return tuple(sorted(users, key=member_sort_key))


def present(
    users: Iterable[NormalizedUser],
    departments: Iterable[DepartmentAggregate],
    podium_size: int = DEFAULT_PODIUM_SIZE,
) -> LeaderboardSnapshot:
    """Build the read-only snapshot consumed by presentation layers.

    The podium always has ``podium_size`` slots; positions the roster cannot
    fill are returned with ``user=None`` so callers can render placeholders.
    """

    if podium_size < 0:
        raise ValueError(f"podium_size must be non-negative, got {podium_size}")

    individuals = rank_individuals(users)

    podium = tuple(
        PodiumSlot(rank=rank, user=individuals[rank - 1] if rank <= len(individuals) else None)
        for rank in range(1, podium_size + 1)
    )
    rest = tuple(
        RankedUser(rank=rank, user=user)
        for rank, user in enumerate(individuals[podium_size:], start=podium_size + 1)
    )

    current_user: Optional[RankedUser] = None
    for rank, user in enumerate(individuals, start=1):
        if user.is_current_user:
            current_user = RankedUser(rank=rank, user=user)
            break

    return LeaderboardSnapshot(
        individuals=individuals,
        departments=tuple(sorted(departments, key=department_sort_key)),
        podium=podium,
        rest=rest,
        current_user=current_user,
    )
