"""
Async Sleeper API Client

Handles the Sleeper endpoints needed to attribute draft picks: leagues,
rosters, users, drafts and traded picks.
Uses httpx for async HTTP requests with connection pooling.

API Documentation: https://docs.sleeper.com/
"""

import asyncio
from typing import Any

import httpx
from pydantic import ValidationError

from draft_war_room.config import Settings, get_settings
from draft_war_room.models import Draft, League, Roster, Team, TradeRecord, User


class SleeperAPIError(Exception):
    """Exception raised for Sleeper API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class SleeperClient:
    """
    Async client for the Sleeper Fantasy Football API.

    Usage:
        async with SleeperClient() as client:
            league = await client.get_league("1127116641403351040")
            picks = await client.get_draft_traded_picks(league.draft_id)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "SleeperClient":
        """Create HTTP client on context entry."""
        self._client = httpx.AsyncClient(
            base_url=self.settings.sleeper_base_url,
            timeout=httpx.Timeout(self.settings.sleeper_timeout),
            headers={"Accept": "application/json"},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close HTTP client on context exit."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the HTTP client, raising if not initialized."""
        if self._client is None:
            raise RuntimeError(
                "SleeperClient must be used as async context manager: "
                "async with SleeperClient() as client: ..."
            )
        return self._client

    async def _get(self, endpoint: str) -> Any:
        """Make a GET request to the Sleeper API."""
        response = await self.client.get(endpoint)

        if response.status_code == 404:
            return None

        if response.status_code != 200:
            raise SleeperAPIError(
                f"API request failed: {endpoint}",
                status_code=response.status_code,
            )

        return response.json()

    # ==================== User Endpoints ====================

    async def get_user(self, username: str) -> User | None:
        """
        Get user information by username or user_id.

        Args:
            username: Sleeper username or user ID

        Returns:
            User object or None if not found
        """
        data = await self._get(f"/user/{username}")
        if data is None:
            return None
        return User(**data)

    async def get_user_leagues(
        self, user_id: str, season: int, sport: str = "nfl"
    ) -> list[League]:
        """
        Get all leagues for a user in a given season.

        Args:
            user_id: Sleeper user ID
            season: Season year (e.g., 2025)
            sport: Sport type (default: nfl)

        Returns:
            List of League objects
        """
        data = await self._get(f"/user/{user_id}/leagues/{sport}/{season}")
        if data is None:
            return []
        return [League(**league) for league in data]

    # ==================== League Endpoints ====================

    async def get_league(self, league_id: str) -> League | None:
        """Get league information, or None if not found."""
        data = await self._get(f"/league/{league_id}")
        if data is None:
            return None
        return League(**data)

    async def get_league_rosters(self, league_id: str) -> list[Roster]:
        """Get all rosters in a league."""
        data = await self._get(f"/league/{league_id}/rosters")
        if data is None:
            return []
        return [Roster(**roster) for roster in data]

    async def get_league_users(self, league_id: str) -> list[User]:
        """Get all users in a league."""
        data = await self._get(f"/league/{league_id}/users")
        if data is None:
            return []
        return [User(**user) for user in data]

    # ==================== Draft Endpoints ====================

    async def get_drafts(self, league_id: str) -> list[Draft]:
        """
        Get all drafts for a league, most recent first.

        Args:
            league_id: Sleeper league ID

        Returns:
            List of Draft objects
        """
        data = await self._get(f"/league/{league_id}/drafts")
        if data is None:
            return []
        return [Draft(**draft) for draft in data]

    async def get_draft(self, draft_id: str) -> Draft | None:
        """Get specific draft information, or None if not found."""
        data = await self._get(f"/draft/{draft_id}")
        if data is None:
            return None
        return Draft(**data)

    async def get_draft_traded_picks(self, draft_id: str) -> list[TradeRecord]:
        """
        Get traded picks for a specific draft.

        Args:
            draft_id: Sleeper draft ID

        Returns:
            List of TradeRecord objects; malformed entries are skipped
        """
        data = await self._get(f"/draft/{draft_id}/traded_picks")
        return self._parse_traded_picks(data)

    @staticmethod
    def _parse_traded_picks(data: list[dict] | None) -> list[TradeRecord]:
        if not data:
            return []

        records = []
        for raw in data:
            try:
                records.append(TradeRecord(**raw))
            except ValidationError:
                continue
        return records


class LeagueContext:
    """
    Helper class to hold league context and provide convenient lookups.

    Joins rosters with their users so roster IDs can be resolved to team
    names and user IDs to roster IDs.
    """

    def __init__(self, league: League, users: list[User], rosters: list[Roster]):
        self.league = league
        self.users = users
        self.rosters = rosters

        self._user_map: dict[str, User] = {u.user_id: u for u in users}
        self._roster_map: dict[int, Roster] = {r.roster_id: r for r in rosters}

    @classmethod
    async def create(cls, client: SleeperClient, league_id: str) -> "LeagueContext":
        """
        Factory method to create a LeagueContext by fetching all required data.

        Args:
            client: SleeperClient instance
            league_id: Sleeper league ID

        Returns:
            Initialized LeagueContext
        """
        league, users, rosters = await asyncio.gather(
            client.get_league(league_id),
            client.get_league_users(league_id),
            client.get_league_rosters(league_id),
        )

        if league is None:
            raise SleeperAPIError(f"League not found: {league_id}", status_code=404)

        return cls(league=league, users=users, rosters=rosters)

    @property
    def league_id(self) -> str:
        return self.league.league_id

    @property
    def league_name(self) -> str:
        return self.league.name

    @property
    def teams(self) -> list[Team]:
        """Every roster joined with the user that manages it."""
        teams = []
        for roster in sorted(self.rosters, key=lambda r: r.roster_id):
            user = self._user_map.get(roster.owner_id) if roster.owner_id else None
            teams.append(
                Team(
                    roster_id=roster.roster_id,
                    user_id=roster.owner_id,
                    display_name=user.team_name if user else None,
                    username=user.username if user else None,
                )
            )
        return teams

    def get_team_name(self, roster_id: int) -> str:
        """Get team name from roster ID."""
        roster = self._roster_map.get(roster_id)
        if roster and roster.owner_id in self._user_map:
            return self._user_map[roster.owner_id].team_name
        return f"Team {roster_id}"

    def roster_ids(self) -> list[int]:
        """Get all roster IDs in the league."""
        return list(self._roster_map.keys())
