"""
League-related Pydantic models.
"""

from pydantic import BaseModel, Field


class League(BaseModel):
    """Sleeper league information."""

    league_id: str
    name: str
    status: str
    sport: str = "nfl"
    season: str
    season_type: str = "regular"
    total_rosters: int
    roster_positions: list[str] = Field(default_factory=list)
    settings: dict = Field(default_factory=dict)
    avatar: str | None = None
    draft_id: str | None = None
    previous_league_id: str | None = None

    @property
    def draft_rounds(self) -> int | None:
        """Draft rounds configured on the league, if any."""
        return self.settings.get("draft_rounds")


class User(BaseModel):
    """Sleeper user information."""

    user_id: str
    username: str | None = None
    display_name: str
    avatar: str | None = None
    metadata: dict = Field(default_factory=dict)
    is_owner: bool | None = False

    @property
    def team_name(self) -> str:
        """Get team name from metadata or display name."""
        if self.metadata and "team_name" in self.metadata:
            return self.metadata["team_name"]
        return self.display_name


class Roster(BaseModel):
    """League roster information."""

    roster_id: int
    owner_id: str | None = None
    league_id: str
    players: list[str] | None = None
    settings: dict = Field(default_factory=dict)
    metadata: dict | None = None


class Team(BaseModel):
    """A roster joined with the user that manages it."""

    roster_id: int
    user_id: str | None = None
    display_name: str | None = None
    username: str | None = None

    @property
    def name(self) -> str:
        return self.display_name or self.username or f"Team {self.roster_id}"
