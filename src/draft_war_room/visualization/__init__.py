"""Plotly chart generation."""

from draft_war_room.visualization import charts

__all__ = ["charts"]
