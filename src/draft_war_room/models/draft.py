"""
Draft Models

Sleeper draft objects as returned by the draft endpoints.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class DraftType(str, Enum):
    """Draft ordering styles supported by Sleeper."""

    SNAKE = "snake"
    LINEAR = "linear"
    AUCTION = "auction"


class Draft(BaseModel):
    """A Sleeper draft and its order configuration."""

    draft_id: str
    league_id: str | None = None
    season: str | None = None
    status: str = "pre_draft"
    type: str = DraftType.SNAKE.value
    settings: dict = Field(default_factory=dict)
    draft_order: dict[str, int] | None = Field(
        default=None, description="User ID -> draft slot"
    )
    slot_to_roster_id: dict[str, int] | None = Field(
        default=None, description="Draft slot -> Roster ID"
    )
    start_time: int | None = None
    created: int | None = None

    @field_validator("season", mode="before")
    @classmethod
    def _season_as_str(cls, value):
        return str(value) if value is not None else None

    @field_validator("draft_order", "slot_to_roster_id", mode="before")
    @classmethod
    def _drop_null_entries(cls, value):
        # Sleeper leaves unassigned slots as null
        if isinstance(value, dict):
            return {k: int(v) for k, v in value.items() if v is not None}
        return value

    @property
    def rounds(self) -> int | None:
        return self.settings.get("rounds")

    @property
    def teams(self) -> int | None:
        return self.settings.get("teams")

    @property
    def reversal_round(self) -> int | None:
        """Round from which snake direction flips (3 for a 3RR draft)."""
        return self.settings.get("reversal_round") or None

    @property
    def is_started(self) -> bool:
        return self.status not in ("pre_draft", "")
