"""
Draft Pick API Routes

Endpoints for pick ownership, trade chains and per-team draft capital.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path

from draft_war_room.api.dependencies import PickAttributionDep, RoundPath, SlotPath
from draft_war_room.models import DraftBoard, PickInfo, PickOwnership, TeamPicks, TradeChain

router = APIRouter()


@router.get(
    "/{league_id}/ownership",
    response_model=PickOwnership,
    summary="Get pick ownership",
    description="Original and current owner of every pick, keyed by round-slot.",
)
async def get_pick_ownership(
    attribution: PickAttributionDep,
) -> PickOwnership:
    """Get original and final ownership tables."""
    attribution.conflicts()
    return attribution.ownership


@router.get(
    "/{league_id}/board",
    response_model=DraftBoard,
    summary="Get draft board",
    description="Every pick in the draft with its current owner and trade count.",
)
async def get_draft_board(
    attribution: PickAttributionDep,
) -> DraftBoard:
    """Get the draft board."""
    return attribution.board()


@router.get(
    "/{league_id}/teams",
    response_model=list[TeamPicks],
    summary="Get picks for all teams",
    description="Picks owned and traded away for every team in the league.",
)
async def get_all_team_picks(
    attribution: PickAttributionDep,
) -> list[TeamPicks]:
    """Get draft capital for all teams."""
    return attribution.all_team_picks()


@router.get(
    "/{league_id}/teams/{roster_id}",
    response_model=TeamPicks,
    summary="Get team picks",
    description="Picks a team owns (original, acquired, reacquired) and picks it sent away.",
)
async def get_team_picks(
    attribution: PickAttributionDep,
    roster_id: Annotated[int, Path(description="Roster ID")],
) -> TeamPicks:
    """Get draft capital for one team."""
    if roster_id not in attribution.roster_ids():
        raise HTTPException(status_code=404, detail=f"Roster {roster_id} not found")
    return attribution.team_picks(roster_id)


@router.get(
    "/{league_id}/chain/{round}/{slot}",
    response_model=TradeChain,
    summary="Get pick trade chain",
    description="Every ownership change for one pick, oldest first.",
)
async def get_pick_chain(
    attribution: PickAttributionDep,
    round: RoundPath,
    slot: SlotPath,
) -> TradeChain:
    """Get the trade chain for a pick."""
    if not attribution.contains(round, slot):
        raise HTTPException(
            status_code=404, detail=f"Pick {round}.{slot:02d} is not in this draft"
        )
    return attribution.chain(round, slot)


@router.get(
    "/{league_id}/trades",
    response_model=list[PickInfo],
    summary="Get traded picks",
    description="Every traded pick record with the original and receiving team.",
)
async def get_traded_picks(
    attribution: PickAttributionDep,
) -> list[PickInfo]:
    """Get traded picks, oldest first."""
    return attribution.traded_pick_info()
