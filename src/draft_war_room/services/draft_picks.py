"""
Draft Pick Service

Fetches a league's draft and traded picks from Sleeper and builds the
ownership snapshot used by the API and CLI.
"""

from draft_war_room.clients.sleeper import LeagueContext, SleeperClient
from draft_war_room.config import Settings, get_settings
from draft_war_room.models import Draft, TradeRecord
from draft_war_room.services.pick_attribution import PickAttribution


class DraftPickService:
    """
    Service for attributing draft picks in a league.

    A new PickAttribution is built on every call so results always reflect
    the latest traded picks.
    """

    def __init__(
        self,
        client: SleeperClient,
        context: LeagueContext,
        settings: Settings | None = None,
    ):
        self.client = client
        self.ctx = context
        self.settings = settings or get_settings()

    async def get_draft(self, draft_id: str | None = None) -> Draft:
        """
        Get the draft to attribute.

        Uses the given draft ID, then the league's current draft, then the
        first draft Sleeper lists for the league.

        Raises:
            ValueError: If no draft can be found
        """
        if draft_id:
            draft = await self.client.get_draft(draft_id)
            if draft is None:
                raise ValueError(f"Draft not found: {draft_id}")
            return draft

        if self.ctx.league.draft_id:
            draft = await self.client.get_draft(self.ctx.league.draft_id)
            if draft is not None:
                return draft

        drafts = await self.client.get_drafts(self.ctx.league_id)
        if not drafts:
            raise ValueError(f"No drafts found for league {self.ctx.league_id}")

        return drafts[0]

    async def get_traded_picks(self, draft: Draft) -> list[TradeRecord]:
        """Traded picks for the draft's season."""
        trades = await self.client.get_draft_traded_picks(draft.draft_id)

        if draft.season:
            trades = [t for t in trades if not t.season or t.season == draft.season]

        return trades

    async def build_attribution(self, draft_id: str | None = None) -> PickAttribution:
        """
        Build the ownership snapshot for a draft.

        Args:
            draft_id: Optional draft ID (defaults to the league's draft)

        Returns:
            PickAttribution over the league's teams and the draft's trades
        """
        draft = await self.get_draft(draft_id)
        trades = await self.get_traded_picks(draft)

        total_rounds = (
            draft.rounds
            or self.ctx.league.draft_rounds
            or self.settings.default_rounds
        )
        total_rosters = draft.teams or self.ctx.league.total_rosters

        return PickAttribution(
            teams=self.ctx.teams,
            draft_order=draft.draft_order,
            total_rounds=total_rounds,
            total_rosters=total_rosters,
            trades=trades,
            slot_to_roster_id=draft.slot_to_roster_id,
            draft_type=draft.type,
            reversal_round=draft.reversal_round,
            draft_id=draft.draft_id,
        )
