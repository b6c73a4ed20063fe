"""Pydantic models and schemas."""

from draft_war_room.models.draft import Draft, DraftType
from draft_war_room.models.league import League, Roster, Team, User
from draft_war_room.models.picks import (
    BoardCell,
    DraftBoard,
    PickInfo,
    PickMappings,
    PickOwnership,
    PickStatus,
    TeamPick,
    TeamPicks,
    TradeChain,
    TradeRecord,
    TradeStep,
)

__all__ = [
    # Draft
    "Draft",
    "DraftType",
    # League
    "League",
    "Roster",
    "Team",
    "User",
    # Picks
    "BoardCell",
    "DraftBoard",
    "PickInfo",
    "PickMappings",
    "PickOwnership",
    "PickStatus",
    "TeamPick",
    "TeamPicks",
    "TradeChain",
    "TradeRecord",
    "TradeStep",
]
