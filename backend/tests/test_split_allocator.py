import random

import pytest

from app.services.split_allocator import (
    EmptyParticipantSet,
    InvalidAmount,
    Split,
    SplitError,
    allocate,
)


def test_remainder_goes_to_first_participant():
    assert allocate(1000, ["A", "B", "C"]) == [
        Split("A", 334),
        Split("B", 333),
        Split("C", 333),
    ]


def test_even_split():
    assert [s.amount for s in allocate(900, ["A", "B", "C"])] == [300, 300, 300]


def test_total_equal_to_count_gives_one_each():
    assert [s.amount for s in allocate(4, ["A", "B", "C", "D"])] == [1, 1, 1, 1]


def test_total_below_count_gives_trailing_zero_shares():
    assert [s.amount for s in allocate(2, ["A", "B", "C"])] == [1, 1, 0]


def test_single_participant_gets_everything():
    assert allocate(1234, ["A"]) == [Split("A", 1234)]


def test_keeps_participant_order():
    assert [s.member_id for s in allocate(10, ["z", "a", "m"])] == ["z", "a", "m"]


@pytest.mark.parametrize("total", [0, -5, 10.5, "100", True, None])
def test_invalid_amount(total):
    with pytest.raises(InvalidAmount):
        allocate(total, ["A", "B"])


def test_empty_participants():
    with pytest.raises(EmptyParticipantSet):
        allocate(100, [])


def test_errors_are_value_errors():
    assert issubclass(InvalidAmount, SplitError)
    assert issubclass(EmptyParticipantSet, SplitError)
    assert issubclass(SplitError, ValueError)


def test_sum_and_fairness_hold_for_random_inputs():
    rng = random.Random(1234)
    for _ in range(500):
        count = rng.randint(1, 25)
        total = rng.randint(1, 100_000)
        participants = [f"m{i}" for i in range(count)]
        amounts = [s.amount for s in allocate(total, participants)]
        assert len(amounts) == count
        assert sum(amounts) == total
        assert max(amounts) - min(amounts) <= 1
