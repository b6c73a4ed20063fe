"""Shared fixtures for draft pick tests."""

import pytest

from draft_war_room.models import League, Roster, Team, User
from draft_war_room.services.pick_attribution import PickAttribution
from tests.helpers import identity_order, make_teams, trade


@pytest.fixture
def twelve_teams() -> list[Team]:
    return make_teams(12)


@pytest.fixture
def league_context_data():
    """League, users and rosters for a four-team league."""
    league = League(
        league_id="123",
        name="War Room League",
        status="pre_draft",
        season="2025",
        season_type="regular",
        total_rosters=4,
        draft_id="d1",
    )
    users = [
        User(user_id=f"user{i}", username=f"manager{i}", display_name=f"Manager {i}")
        for i in range(1, 5)
    ]
    rosters = [
        Roster(roster_id=i, owner_id=f"user{i}", league_id="123") for i in range(1, 5)
    ]
    return league, users, rosters


@pytest.fixture
def small_attribution() -> PickAttribution:
    """Four teams, two rounds, pick 1.2 traded 2 -> 3 -> 4."""
    return PickAttribution(
        teams=make_teams(4),
        draft_order=identity_order(4),
        total_rounds=2,
        total_rosters=4,
        trades=[
            trade(1, 2, 4, created=200),
            trade(1, 2, 3, created=100),
        ],
        draft_id="d1",
    )
