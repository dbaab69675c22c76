"""Divide an amount (in pence) between participants without losing a penny."""
from typing import NamedTuple, Sequence


class SplitError(ValueError):
    """Base class for allocator input errors."""


class InvalidAmount(SplitError):
    pass


class EmptyParticipantSet(SplitError):
    pass


class Split(NamedTuple):
    member_id: str
    amount: int


def allocate(total: int, participants: Sequence[str]) -> list[Split]:
    """
    Split `total` across `participants` in the order given.

    The first `total % n` participants get one extra penny, so shares never
    differ by more than 1 and always sum to `total`. Participants beyond the
    total (when total < n) get a share of 0.
    """
    if isinstance(total, bool) or not isinstance(total, int) or total <= 0:
        raise InvalidAmount(f"Amount must be a positive integer, got {total!r}")
    if not participants:
        raise EmptyParticipantSet("At least one participant required")

    base, remainder = divmod(total, len(participants))
    return [
        Split(member_id=member_id, amount=base + 1 if index < remainder else base)
        for index, member_id in enumerate(participants)
    ]
