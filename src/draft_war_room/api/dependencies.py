"""
API Dependencies

Shared dependencies for FastAPI route handlers including
client management, league context and pick attribution.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Path, Query

from draft_war_room.clients.sleeper import LeagueContext, SleeperAPIError, SleeperClient
from draft_war_room.config import Settings, get_settings
from draft_war_room.services.draft_picks import DraftPickService
from draft_war_room.services.pick_attribution import PickAttribution


class ClientManager:
    """
    Manages SleeperClient lifecycle for the application.

    Creates a single client instance that can be reused across requests.
    """

    _client: SleeperClient | None = None

    @classmethod
    async def get_client(cls) -> SleeperClient:
        """Get or create the SleeperClient instance."""
        if cls._client is None:
            cls._client = SleeperClient()
            await cls._client.__aenter__()
        return cls._client

    @classmethod
    async def close_client(cls) -> None:
        """Close the SleeperClient instance."""
        if cls._client is not None:
            await cls._client.__aexit__(None, None, None)
            cls._client = None


async def get_sleeper_client() -> SleeperClient:
    """Dependency to get the SleeperClient."""
    return await ClientManager.get_client()


async def get_league_context(
    league_id: Annotated[str, Path(description="Sleeper league ID")],
    client: Annotated[SleeperClient, Depends(get_sleeper_client)],
) -> LeagueContext:
    """
    Dependency to create a LeagueContext for a given league.

    Raises HTTPException if league not found.
    """
    try:
        return await LeagueContext.create(client, league_id)
    except SleeperAPIError as e:
        raise HTTPException(
            status_code=404,
            detail=f"League not found: {league_id}. Error: {e.message}",
        )


async def get_pick_attribution(
    ctx: Annotated[LeagueContext, Depends(get_league_context)],
    client: Annotated[SleeperClient, Depends(get_sleeper_client)],
    draft_id: Annotated[
        str | None,
        Query(description="Draft ID (defaults to the league's current draft)"),
    ] = None,
) -> PickAttribution:
    """Dependency to build the pick ownership snapshot for a league's draft."""
    service = DraftPickService(client, ctx)
    try:
        return await service.build_attribution(draft_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


# Type aliases for cleaner route signatures
SleeperClientDep = Annotated[SleeperClient, Depends(get_sleeper_client)]
LeagueContextDep = Annotated[LeagueContext, Depends(get_league_context)]
PickAttributionDep = Annotated[PickAttribution, Depends(get_pick_attribution)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Common parameters
SeasonQuery = Annotated[
    int | None,
    Query(description="NFL season year", ge=2017, le=2035),
]

RoundPath = Annotated[int, Path(description="Draft round", ge=1)]
SlotPath = Annotated[int, Path(description="Draft slot", ge=1)]
