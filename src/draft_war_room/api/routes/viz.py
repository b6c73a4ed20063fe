"""
Visualization API Routes

Endpoints for generating interactive Plotly charts.
All endpoints return HTML content for embedding or viewing directly.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from draft_war_room.api.dependencies import LeagueContextDep, PickAttributionDep
from draft_war_room.visualization import charts


router = APIRouter()


@router.get(
    "/{league_id}/draft-board",
    response_class=HTMLResponse,
    summary="Draft board chart",
    description="Generate a round-by-slot grid showing the current owner of every pick.",
)
async def get_draft_board_chart(
    ctx: LeagueContextDep,
    attribution: PickAttributionDep,
) -> HTMLResponse:
    """Generate the draft board heatmap."""
    html = charts.draft_board_chart(
        attribution.board(), title=f"{ctx.league_name} - Draft Board"
    )
    return HTMLResponse(content=html)


@router.get(
    "/{league_id}/pick-capital",
    response_class=HTMLResponse,
    summary="Draft capital chart",
    description="Generate a bar chart of picks kept, acquired and traded away per team.",
)
async def get_pick_capital_chart(
    ctx: LeagueContextDep,
    attribution: PickAttributionDep,
) -> HTMLResponse:
    """Generate the draft capital bar chart."""
    html = charts.pick_capital_chart(
        attribution.all_team_picks(), title=f"{ctx.league_name} - Draft Capital"
    )
    return HTMLResponse(content=html)
