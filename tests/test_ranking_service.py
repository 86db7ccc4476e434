import pytest

from ecocampus.schemas import NormalizedUser
from ecocampus.services.aggregation_service import aggregate
from ecocampus.services.ranking_service import present


def _user(user_id, points, current=False):
    return NormalizedUser(
        id=user_id,
        display_name=user_id,
        initials=user_id[:1].upper(),
        department="BAF",
        lifetime_points=points,
        is_current_user=current,
    )


def test_present_orders_individuals_and_partitions_podium():
    users = [_user("d", 10), _user("a", 40), _user("c", 20), _user("b", 30, current=True), _user("e", 5)]

    snapshot = present(users, aggregate(users))

    assert [u.id for u in snapshot.individuals] == ["a", "b", "c", "d", "e"]
    assert [(slot.rank, slot.user.id) for slot in snapshot.podium] == [(1, "a"), (2, "b"), (3, "c")]
    assert [(entry.rank, entry.user.id) for entry in snapshot.rest] == [(4, "d"), (5, "e")]
    assert snapshot.current_user.rank == 2
    assert snapshot.current_user.user.id == "b"


def test_present_two_entries_leaves_third_slot_absent():
    users = [_user("x", 5), _user("y", 9)]

    snapshot = present(users, aggregate(users))

    assert len(snapshot.podium) == 3
    assert [slot.is_absent for slot in snapshot.podium] == [False, False, True]
    assert snapshot.podium[2].rank == 3
    assert snapshot.rest == ()


def test_present_empty_roster():
    snapshot = present([], [])

    assert [slot.rank for slot in snapshot.podium] == [1, 2, 3]
    assert all(slot.user is None for slot in snapshot.podium)
    assert snapshot.rest == ()
    assert snapshot.individuals == ()
    assert snapshot.departments == ()
    assert snapshot.current_user is None


def test_present_tie_break_by_id():
    users = [_user("u2", 100), _user("u1", 100)]

    for _ in range(3):
        snapshot = present(users, aggregate(users))
        assert [u.id for u in snapshot.individuals] == ["u1", "u2"]


def test_present_custom_podium_size():
    users = [_user("a", 3), _user("b", 2), _user("c", 1)]

    snapshot = present(users, aggregate(users), podium_size=1)
    assert [slot.user.id for slot in snapshot.podium] == ["a"]
    assert [entry.rank for entry in snapshot.rest] == [2, 3]

    snapshot = present(users, aggregate(users), podium_size=0)
    assert snapshot.podium == ()
    assert [entry.rank for entry in snapshot.rest] == [1, 2, 3]


def test_present_rejects_negative_podium_size():
    with pytest.raises(ValueError):
        present([], [], podium_size=-1)
