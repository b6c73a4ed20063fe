"""Builders for teams, draft orders and traded-pick records."""

from draft_war_room.models import Team, TradeRecord


def make_teams(count: int) -> list[Team]:
    return [
        Team(
            roster_id=i,
            user_id=f"user{i}",
            display_name=f"Manager {i}",
            username=f"manager{i}",
        )
        for i in range(1, count + 1)
    ]


def identity_order(count: int) -> dict[str, int]:
    """user{i} picks from slot i."""
    return {f"user{i}": i for i in range(1, count + 1)}


def trade(
    round_num: int,
    slot: int,
    owner_id: int | None,
    created: int | None = None,
    **kwargs,
) -> TradeRecord:
    return TradeRecord(
        round=round_num, pick=slot, owner_id=owner_id, created=created, **kwargs
    )
