"""
Plotly Chart Generators

Generates interactive draft-board charts.
All charts return HTML strings for embedding or standalone use.
"""

import plotly.graph_objects as go

from draft_war_room.models.picks import DraftBoard, TeamPicks


DARK_THEME = {
    "paper_bgcolor": "#1a1a2e",
    "plot_bgcolor": "#16213e",
    "font_color": "#e8e8e8",
    "gridcolor": "#2d3a4f",
    "colorway": [
        "#00d9ff",
        "#ff6b6b",
        "#4ecdc4",
        "#ffe66d",
        "#a855f7",
        "#f97316",
        "#10b981",
        "#ec4899",
        "#3b82f6",
        "#84cc16",
    ],
}


def _apply_dark_theme(fig: go.Figure) -> go.Figure:
    """Apply dark theme styling to a figure."""
    fig.update_layout(
        paper_bgcolor=DARK_THEME["paper_bgcolor"],
        plot_bgcolor=DARK_THEME["plot_bgcolor"],
        font={"color": DARK_THEME["font_color"], "family": "Inter, sans-serif"},
        colorway=DARK_THEME["colorway"],
        margin={"l": 60, "r": 40, "t": 60, "b": 60},
    )
    fig.update_xaxes(
        gridcolor=DARK_THEME["gridcolor"],
        linecolor=DARK_THEME["gridcolor"],
    )
    fig.update_yaxes(
        gridcolor=DARK_THEME["gridcolor"],
        linecolor=DARK_THEME["gridcolor"],
    )
    return fig


def draft_board_chart(board: DraftBoard, title: str = "Draft Board") -> str:
    """
    Create a round x slot grid showing who holds each pick.

    Traded picks are highlighted; hovering shows the original owner and
    how many times the pick changed hands.

    Args:
        board: DraftBoard to render
        title: Chart title

    Returns:
        HTML string containing the chart
    """
    if not board.cells:
        return "<div>No draft board data available</div>"

    slots = [f"Slot {s}" for s in range(1, board.total_rosters + 1)]
    rounds = [f"Round {r}" for r in range(1, board.total_rounds + 1)]

    z = []
    text = []
    hover = []
    for round_num in range(1, board.total_rounds + 1):
        row = []
        text_row = []
        hover_row = []
        for cell in board.round_cells(round_num):
            row.append(min(cell.trade_count, 3) if cell.is_traded else 0)
            text_row.append(cell.current_team)
            pick_label = f"#{cell.pick_no}" if cell.pick_no else "-"
            hover_row.append(
                f"{pick_label} from {cell.original_team}"
                if cell.is_traded
                else pick_label
            )
        z.append(row)
        text.append(text_row)
        hover.append(hover_row)

    fig = go.Figure(
        data=go.Heatmap(
            z=z,
            x=slots,
            y=rounds,
            text=text,
            customdata=hover,
            texttemplate="%{text}",
            textfont={"size": 10},
            colorscale=[
                [0, "#16213e"],
                [0.34, "#4ecdc4"],
                [1, "#ff6b6b"],
            ],
            zmin=0,
            zmax=3,
            showscale=False,
            hovertemplate=(
                "<b>%{y}, %{x}</b><br>"
                "Owner: %{text}<br>"
                "%{customdata}"
                "<extra></extra>"
            ),
        )
    )

    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        height=max(400, board.total_rounds * 40),
        yaxis={"autorange": "reversed"},
    )

    _apply_dark_theme(fig)
    return fig.to_html(full_html=False, include_plotlyjs="cdn")


def pick_capital_chart(
    all_picks: list[TeamPicks], title: str = "Draft Capital by Team"
) -> str:
    """
    Create a stacked bar chart of original, acquired and traded-away picks.

    Args:
        all_picks: TeamPicks for every team
        title: Chart title

    Returns:
        HTML string containing the chart
    """
    if not all_picks:
        return "<div>No pick data available</div>"

    ordered = sorted(all_picks, key=lambda t: len(t.owned), reverse=True)
    teams = [t.team_name for t in ordered]
    kept = [len(t.owned) - t.acquired_count for t in ordered]
    acquired = [t.acquired_count for t in ordered]
    sent = [-len(t.sent) for t in ordered]

    fig = go.Figure()
    fig.add_trace(go.Bar(x=teams, y=kept, name="Own picks", marker_color="#4ecdc4"))
    fig.add_trace(go.Bar(x=teams, y=acquired, name="Acquired", marker_color="#10b981"))
    fig.add_trace(go.Bar(x=teams, y=sent, name="Traded away", marker_color="#ef4444"))

    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        barmode="relative",
        xaxis={"tickangle": 45},
        yaxis={"title": "Picks"},
        legend={"orientation": "h", "y": -0.3},
    )

    _apply_dark_theme(fig)
    return fig.to_html(full_html=False, include_plotlyjs="cdn")
