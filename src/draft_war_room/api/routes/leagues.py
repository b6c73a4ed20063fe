"""
League API Routes

Endpoints for league information, teams and drafts.
"""

from typing import Annotated

from fastapi import APIRouter, Path

from draft_war_room.api.dependencies import (
    LeagueContextDep,
    SeasonQuery,
    SettingsDep,
    SleeperClientDep,
)
from draft_war_room.models import Draft, League, Roster, Team, User

router = APIRouter()


@router.get(
    "/user/{username}",
    response_model=list[League],
    summary="Get user's leagues",
    description="Get all leagues for a user in a given season.",
)
async def get_user_leagues(
    username: Annotated[str, Path(description="Sleeper username")],
    client: SleeperClientDep,
    settings: SettingsDep,
    season: SeasonQuery = None,
) -> list[League]:
    """Get all leagues for a user; season defaults to WAR_ROOM_DEFAULT_SEASON."""
    user = await client.get_user(username)
    if not user:
        return []

    return await client.get_user_leagues(user.user_id, season or settings.default_season)


@router.get(
    "/{league_id}",
    response_model=League,
    summary="Get league details",
    description="Get detailed information about a specific league.",
)
async def get_league(
    ctx: LeagueContextDep,
) -> League:
    """Get league information."""
    return ctx.league


@router.get(
    "/{league_id}/users",
    response_model=list[User],
    summary="Get league users",
    description="Get all users/managers in a league.",
)
async def get_league_users(
    ctx: LeagueContextDep,
) -> list[User]:
    """Get all users in the league."""
    return ctx.users


@router.get(
    "/{league_id}/rosters",
    response_model=list[Roster],
    summary="Get league rosters",
    description="Get all rosters in a league.",
)
async def get_league_rosters(
    ctx: LeagueContextDep,
) -> list[Roster]:
    """Get all rosters in the league."""
    return ctx.rosters


@router.get(
    "/{league_id}/teams",
    response_model=list[Team],
    summary="Get league teams",
    description="Get every roster joined with the user who manages it.",
)
async def get_league_teams(
    ctx: LeagueContextDep,
) -> list[Team]:
    """Get all teams in the league."""
    return ctx.teams


@router.get(
    "/{league_id}/drafts",
    response_model=list[Draft],
    summary="Get league drafts",
    description="Get all drafts for a league with their draft order.",
)
async def get_league_drafts(
    ctx: LeagueContextDep,
    client: SleeperClientDep,
) -> list[Draft]:
    """Get all drafts for the league."""
    return await client.get_drafts(ctx.league_id)
