"""Tests for Sleeper payload parsing."""

from draft_war_room.models import Draft, Team, TradeRecord


class TestTradeRecord:
    """Test suite for traded-pick records."""

    def test_sleeper_payload(self):
        record = TradeRecord(
            **{
                "season": "2025",
                "round": 2,
                "roster_id": 4,
                "previous_owner_id": 4,
                "owner_id": 7,
                "draft_id": 998877,
            }
        )

        assert record.owner_id == 7
        assert record.pick is None
        assert record.key is None
        assert record.draft_id == "998877"

    def test_legacy_owner_field(self):
        record = TradeRecord(**{"round": 1, "pick": 3, "new_owner_roster_id": 5})
        assert record.owner_id == 5
        assert record.key == "1-3"

    def test_numeric_season(self):
        assert TradeRecord(round=1, season=2025).season == "2025"


class TestDraft:
    """Test suite for draft objects."""

    def test_settings_helpers(self):
        draft = Draft(
            draft_id="d1",
            season=2025,
            type="snake",
            settings={"rounds": 15, "teams": 12, "reversal_round": 0},
            draft_order={"user1": 1, "user2": None},
        )

        assert draft.rounds == 15
        assert draft.teams == 12
        assert draft.reversal_round is None
        assert draft.season == "2025"
        assert draft.draft_order == {"user1": 1}
        assert not draft.is_started

    def test_missing_order(self):
        draft = Draft(draft_id="d1", status="drafting")
        assert draft.draft_order is None
        assert draft.rounds is None
        assert draft.is_started


class TestTeam:
    def test_name_fallbacks(self):
        assert Team(roster_id=1, display_name="Alpha", username="a").name == "Alpha"
        assert Team(roster_id=1, username="a").name == "a"
        assert Team(roster_id=1).name == "Team 1"
