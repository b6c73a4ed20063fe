"""External API clients."""

from draft_war_room.clients.sleeper import LeagueContext, SleeperAPIError, SleeperClient

__all__ = ["SleeperClient", "SleeperAPIError", "LeagueContext"]
