import pytest

from ecocampus.schemas import DepartmentAggregate, NormalizedUser
from ecocampus.services.aggregation_service import (
    AggregateInvariantViolation,
    aggregate,
    verify_aggregate,
)
from ecocampus.services.normalizer_service import normalize


def _user(user_id, department, points):
    return NormalizedUser(
        id=user_id,
        display_name=user_id.upper(),
        initials=user_id[:1].upper(),
        department=department,
        lifetime_points=points,
    )


def test_aggregate_scenario(scenario_roster):
    departments = aggregate(normalize(scenario_roster, "a").users)

    assert [(d.name, d.total_points, d.member_count) for d in departments] == [
        ("BAF", 800, 2),
        ("BCOM", 700, 1),
    ]
    assert [member.id for member in departments[0].members] == ["a", "c"]


def test_aggregate_totals_match_members_and_roster():
    users = [
        _user("u1", "BAF", 10),
        _user("u2", "BSC", 25),
        _user("u3", "BAF", 0),
        _user("u4", "OTHER", 7),
        _user("u5", "BSC", 3),
    ]

    departments = aggregate(users)

    for department in departments:
        expected = sum(u.lifetime_points for u in users if u.department == department.name)
        assert department.total_points == expected
        assert department.member_count == len(department.members)
    assert sum(d.total_points for d in departments) == sum(u.lifetime_points for u in users)
    assert sorted(m.id for d in departments for m in d.members) == ["u1", "u2", "u3", "u4", "u5"]


def test_aggregate_breaks_ties_deterministically():
    users = [
        _user("u2", "BMS", 50),
        _user("u1", "BMS", 50),
        _user("z", "BCOM", 100),
        _user("y", "BAF", 100),
    ]

    departments = aggregate(users)

    assert [d.name for d in departments] == ["BAF", "BCOM", "BMS"]
    assert [m.id for m in departments[2].members] == ["u1", "u2"]
    assert aggregate(list(reversed(users))) == departments


def test_aggregate_is_case_sensitive_on_department_key():
    departments = aggregate([_user("u1", "BAF", 1), _user("u2", "baf", 1)])
    assert {d.name for d in departments} == {"BAF", "baf"}


def test_aggregate_empty():
    assert aggregate([]) == ()


def test_verify_aggregate_rejects_total_mismatch():
    broken = DepartmentAggregate(
        name="BAF",
        total_points=999,
        member_count=1,
        members=(_user("u1", "BAF", 10),),
    )
    with pytest.raises(AggregateInvariantViolation):
        verify_aggregate(broken)


def test_verify_aggregate_rejects_count_mismatch():
    broken = DepartmentAggregate(
        name="BAF",
        total_points=10,
        member_count=2,
        members=(_user("u1", "BAF", 10),),
    )
    with pytest.raises(AggregateInvariantViolation):
        verify_aggregate(broken)
