"""API package - FastAPI routes and dependencies."""

from draft_war_room.api.dependencies import (
    ClientManager,
    LeagueContextDep,
    PickAttributionDep,
    SettingsDep,
    SleeperClientDep,
    get_league_context,
    get_pick_attribution,
    get_sleeper_client,
)

__all__ = [
    "ClientManager",
    "get_sleeper_client",
    "get_league_context",
    "get_pick_attribution",
    "SleeperClientDep",
    "LeagueContextDep",
    "PickAttributionDep",
    "SettingsDep",
]
