"""Tests for CLI text output."""

from draft_war_room.cli import DraftWarRoom, format_chain, format_team_picks
from draft_war_room.config import Settings
from draft_war_room.services.pick_attribution import PickAttribution
from tests.helpers import identity_order, make_teams, trade


def test_format_team_picks_sender(small_attribution):
    lines = format_team_picks(small_attribution.team_picks(2), small_attribution)

    assert lines == [
        "Manager 2 - Picks Owned (1)",
        "  Round 2 • Pick 02 (Original)",
        "Manager 2 - Picks Traded Away (1)",
        "  Round 1 • Pick 02 (to Manager 4)",
    ]


def test_format_team_picks_receiver(small_attribution):
    lines = format_team_picks(small_attribution.team_picks(4), small_attribution)

    assert "  Round 1 • Pick 02 (from Manager 3)" in lines
    assert not any("Traded Away" in line for line in lines)


def test_format_team_picks_reacquired():
    attribution = PickAttribution(
        teams=make_teams(2),
        draft_order=identity_order(2),
        total_rounds=1,
        total_rosters=2,
        trades=[trade(1, 1, 2, created=1), trade(1, 1, 1, created=2)],
    )

    lines = format_team_picks(attribution.team_picks(1), attribution)
    assert lines[1] == "  Round 1 • Pick 01 (Original, reacquired)"


def test_format_chain(small_attribution):
    lines = format_chain(small_attribution.chain(1, 2), small_attribution)

    assert lines == [
        "Round 1 • Pick 02 - originally Manager 2",
        "  Manager 2 -> Manager 3",
        "  Manager 3 -> Manager 4",
        "  Current owner: Manager 4",
    ]


def test_format_untraded_chain(small_attribution):
    lines = format_chain(small_attribution.chain(2, 1), small_attribution)
    assert "  Never traded" in lines


def test_acquired_pick_names_last_sender():
    attribution = PickAttribution(
        teams=make_teams(4),
        draft_order=identity_order(4),
        total_rounds=1,
        total_rosters=4,
        trades=[
            trade(1, 1, 2, created=1),
            trade(1, 1, 3, created=2),
            trade(1, 1, 4, created=3),
        ],
    )

    lines = format_team_picks(attribution.team_picks(4), attribution)
    assert "  Round 1 • Pick 01 (from Manager 3)" in lines
    assert not any("from Manager 1" in line for line in lines)


def test_format_chain_outside_draft(small_attribution):
    lines = format_chain(small_attribution.chain(99, 1), small_attribution)
    assert lines == ["Round 99 • Pick 01 is not in this draft"]

    lines = format_chain(small_attribution.chain(1, 5), small_attribution)
    assert lines == ["Round 1 • Pick 05 is not in this draft"]


def test_war_room_season_defaults_to_settings(monkeypatch):
    monkeypatch.setattr(
        "draft_war_room.cli.get_settings", lambda: Settings(default_season=2023)
    )

    assert DraftWarRoom().season == 2023
    assert DraftWarRoom(season=2021).season == 2021
