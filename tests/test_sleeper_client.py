"""Tests for the Sleeper client, league context and draft pick service."""

import asyncio
from typing import Any

import httpx
import pytest

from draft_war_room.clients.sleeper import LeagueContext, SleeperAPIError, SleeperClient
from draft_war_room.config import Settings
from draft_war_room.services.draft_picks import DraftPickService

LEAGUE = {
    "league_id": "123",
    "name": "War Room League",
    "status": "pre_draft",
    "season": "2025",
    "season_type": "regular",
    "total_rosters": 4,
    "settings": {"draft_rounds": 3},
    "draft_id": "d1",
}

USERS = [
    {
        "user_id": "user1",
        "username": "manager1",
        "display_name": "Manager 1",
        "metadata": {"team_name": "Team Alpha"},
    },
    {"user_id": "user2", "username": "manager2", "display_name": "Manager 2"},
    {"user_id": "user3", "username": "manager3", "display_name": "Manager 3"},
    {"user_id": "user4", "username": "manager4", "display_name": "Manager 4"},
]

ROSTERS = [
    {"roster_id": i, "owner_id": f"user{i}", "league_id": "123", "players": None}
    for i in range(1, 5)
]

DRAFT = {
    "draft_id": "d1",
    "league_id": "123",
    "season": "2025",
    "status": "pre_draft",
    "type": "snake",
    "settings": {"rounds": 2, "teams": 4},
    "draft_order": {"user1": 4, "user2": 3, "user3": 2, "user4": 1},
    "slot_to_roster_id": None,
}

TRADED_PICKS = [
    {"season": "2025", "round": 1, "roster_id": 1, "previous_owner_id": 1, "owner_id": 3},
    {"season": "2026", "round": 1, "roster_id": 2, "previous_owner_id": 2, "owner_id": 3},
    {"season": "2025", "round": "first", "roster_id": 2, "owner_id": 1},
]


def make_client(routes: dict[str, tuple[int, Any]]) -> SleeperClient:
    """SleeperClient answering from a path -> (status, payload) table."""

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix("/v1")
        status, payload = routes.get(path, (404, None))
        return httpx.Response(status, json=payload)

    return SleeperClient(settings=Settings(), transport=httpx.MockTransport(handler))


@pytest.fixture
def routes() -> dict[str, tuple[int, Any]]:
    return {
        "/league/123": (200, LEAGUE),
        "/league/123/users": (200, USERS),
        "/league/123/rosters": (200, ROSTERS),
        "/league/123/drafts": (200, [DRAFT]),
        "/draft/d1": (200, DRAFT),
        "/draft/d1/traded_picks": (200, TRADED_PICKS),
    }


class TestSleeperClient:
    """Test suite for HTTP handling."""

    def test_requires_context_manager(self):
        client = SleeperClient(settings=Settings())
        with pytest.raises(RuntimeError, match="async context manager"):
            _ = client.client

    def test_not_found_returns_none(self, routes):
        async def run():
            async with make_client(routes) as client:
                return await client.get_league("missing"), await client.get_drafts("missing")

        league, drafts = asyncio.run(run())
        assert league is None
        assert drafts == []

    def test_server_error_raises(self):
        async def run():
            async with make_client({"/league/123": (500, {})}) as client:
                await client.get_league("123")

        with pytest.raises(SleeperAPIError) as exc_info:
            asyncio.run(run())
        assert exc_info.value.status_code == 500

    def test_traded_picks_skip_malformed(self, routes):
        async def run():
            async with make_client(routes) as client:
                return await client.get_draft_traded_picks("d1")

        picks = asyncio.run(run())
        assert len(picks) == 2
        assert picks[0].roster_id == 1
        assert picks[0].owner_id == 3


class TestLeagueContext:
    """Test suite for joining rosters with users."""

    def test_teams(self, routes):
        async def run():
            async with make_client(routes) as client:
                return await LeagueContext.create(client, "123")

        ctx = asyncio.run(run())

        assert ctx.league_name == "War Room League"
        assert [t.roster_id for t in ctx.teams] == [1, 2, 3, 4]
        assert ctx.teams[0].name == "Team Alpha"
        assert ctx.teams[1].user_id == "user2"
        assert ctx.get_team_name(2) == "Manager 2"
        assert ctx.get_team_name(9) == "Team 9"

    def test_missing_league(self, routes):
        async def run():
            async with make_client(routes) as client:
                await LeagueContext.create(client, "999")

        with pytest.raises(SleeperAPIError, match="League not found"):
            asyncio.run(run())


class TestDraftPickService:
    """Test suite for building ownership from live Sleeper data."""

    def test_build_attribution(self, routes):
        async def run():
            async with make_client(routes) as client:
                ctx = await LeagueContext.create(client, "123")
                return await DraftPickService(client, ctx).build_attribution()

        attribution = asyncio.run(run())

        assert attribution.draft_id == "d1"
        assert attribution.total_rounds == 2
        assert attribution.total_rosters == 4
        # roster 1 holds slot 4; its first-rounder went to roster 3
        assert attribution.original_owner_of(1, 4) == 1
        assert attribution.owner_of(1, 4) == 3
        # the 2026 pick is a different draft
        assert attribution.owner_of(1, 3) == 2
        assert len(attribution.trades) == 1

    def test_falls_back_to_listed_drafts(self, routes):
        league = {**LEAGUE, "draft_id": None}
        routes["/league/123"] = (200, league)

        async def run():
            async with make_client(routes) as client:
                ctx = await LeagueContext.create(client, "123")
                return await DraftPickService(client, ctx).get_draft()

        assert asyncio.run(run()).draft_id == "d1"

    def test_rounds_fall_back_to_league_settings(self, routes):
        routes["/draft/d1"] = (200, {**DRAFT, "settings": {"teams": 4}})

        async def run():
            async with make_client(routes) as client:
                ctx = await LeagueContext.create(client, "123")
                return await DraftPickService(client, ctx).build_attribution()

        assert asyncio.run(run()).total_rounds == 3

    def test_unknown_draft(self, routes):
        async def run():
            async with make_client(routes) as client:
                ctx = await LeagueContext.create(client, "123")
                await DraftPickService(client, ctx).build_attribution("nope")

        with pytest.raises(ValueError, match="Draft not found"):
            asyncio.run(run())

    def test_no_drafts(self, routes):
        routes["/league/123"] = (200, {**LEAGUE, "draft_id": None})
        routes["/league/123/drafts"] = (200, [])

        async def run():
            async with make_client(routes) as client:
                ctx = await LeagueContext.create(client, "123")
                await DraftPickService(client, ctx).build_attribution()

        with pytest.raises(ValueError, match="No drafts found"):
            asyncio.run(run())
