"""API route handlers."""

from draft_war_room.api.routes import leagues, picks, viz

__all__ = [
    "leagues",
    "picks",
    "viz",
]
