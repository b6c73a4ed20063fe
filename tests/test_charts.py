"""Tests for Plotly chart generation."""

from draft_war_room.models import DraftBoard
from draft_war_room.visualization import charts


def test_draft_board_chart(small_attribution):
    html = charts.draft_board_chart(small_attribution.board(), title="Test Board")
    assert "Test Board" in html
    assert "Manager 4" in html


def test_empty_board():
    board = DraftBoard(draft_type="snake", total_rounds=0, total_rosters=0)
    assert charts.draft_board_chart(board) == "<div>No draft board data available</div>"


def test_pick_capital_chart(small_attribution):
    html = charts.pick_capital_chart(small_attribution.all_team_picks())
    assert "Traded away" in html


def test_empty_pick_capital():
    assert charts.pick_capital_chart([]) == "<div>No pick data available</div>"
