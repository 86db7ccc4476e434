"""Department-level leaderboard aggregation."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from ..schemas.leaderboard import DepartmentAggregate, NormalizedUser


class AggregateInvariantViolation(RuntimeError):
    """Raised when a department rollup disagrees with its own members."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


def member_sort_key(user: NormalizedUser) -> tuple:
    return (-(user.lifetime_points or 0), user.id)


def department_sort_key(department: DepartmentAggregate) -> tuple:
    return (-department.total_points, department.name)


def verify_aggregate(department: DepartmentAggregate) -> DepartmentAggregate:
    """Check that totals and counts match the member list."""

    expected_total = sum(member.lifetime_points or 0 for member in department.members)
    if department.total_points != expected_total:
        raise AggregateInvariantViolation(
            f"Department {department.name!r} total {department.total_points} "
            f"does not match member sum {expected_total}."
        )
    if department.member_count != len(department.members):
        raise AggregateInvariantViolation(
            f"Department {department.name!r} member count {department.member_count} "
            f"does not match {len(department.members)} members."
        )
    return department


def aggregate(users: Iterable[NormalizedUser]) -> Tuple[DepartmentAggregate, ...]:
    """Group users by department and rank the departments by total points.

    Members are ordered by points descending then id ascending; departments by
    total descending then name ascending, so equal inputs give equal output.
    """

    groups: Dict[str, List[NormalizedUser]] = {}
    totals: Dict[str, int] = {}
    for user in users:
        groups.setdefault(user.department, []).append(user)
        totals[user.department] = totals.get(user.department, 0) + (user.lifetime_points or 0)

    departments = [
        verify_aggregate(
            DepartmentAggregate(
                name=name,
                total_points=totals[name],
                member_count=len(members),
                members=tuple(sorted(members, key=member_sort_key)),
            )
        )
        for name, members in groups.items()
    ]
    departments.sort(key=department_sort_key)
    return tuple(departments)
