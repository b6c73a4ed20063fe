"""
Draft Pick Ownership Models

Traded-pick records, ownership chains and the per-team and board views
built from them.
"""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class TradeRecord(BaseModel):
    """One ownership transfer of a draft pick."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    round: int
    pick: int | None = Field(default=None, description="Draft slot of the pick")
    roster_id: int | None = Field(
        default=None, description="Roster that originally held the pick"
    )
    owner_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("owner_id", "new_owner_roster_id"),
        description="Roster holding the pick after this transfer",
    )
    previous_owner_id: int | None = None
    season: str | None = None
    draft_id: str | None = None
    created: int | None = Field(default=None, description="Unix timestamp (ms)")

    @field_validator("season", "draft_id", mode="before")
    @classmethod
    def _as_str(cls, value):
        return str(value) if value is not None else None

    @property
    def key(self) -> str | None:
        """Pick key for this record, once the slot is known."""
        if not self.pick:
            return None
        return f"{self.round}-{self.pick}"


class TradeStep(BaseModel):
    """A single hop in a pick's ownership chain."""

    model_config = ConfigDict(populate_by_name=True)

    from_owner: int | None = Field(alias="from")
    to_owner: int | None = Field(alias="to")
    trade: TradeRecord
    timestamp: int | None = None


class TradeChain(BaseModel):
    """Every ownership change for one pick, oldest first."""

    round: int
    slot: int
    original_owner: int | None
    chain: list[TradeStep] = Field(default_factory=list)
    final_owner: int | None

    @property
    def is_traded(self) -> bool:
        return self.final_owner != self.original_owner


class PickMappings(BaseModel):
    """Lookup tables linking users, rosters and draft slots."""

    user_to_roster: dict[str, int] = Field(default_factory=dict)
    slot_to_user: dict[int, str] = Field(default_factory=dict)
    slot_to_roster: dict[int, int] = Field(default_factory=dict)

    @property
    def roster_to_slot(self) -> dict[int, int]:
        # First slot wins if the mapping is not a bijection
        inverse: dict[int, int] = {}
        for slot in sorted(self.slot_to_roster):
            inverse.setdefault(self.slot_to_roster[slot], slot)
        return inverse


class PickOwnership(BaseModel):
    """Original and current owner of every pick, keyed by "round-slot"."""

    original: dict[str, int] = Field(default_factory=dict)
    final: dict[str, int] = Field(default_factory=dict)


class PickStatus(str, Enum):
    """How a team came to hold (or lose) a pick."""

    ORIGINAL = "original"
    ACQUIRED = "acquired"
    REACQUIRED = "reacquired"
    TRADED_AWAY = "traded_away"


class TeamPick(BaseModel):
    """A pick a team holds or has traded away."""

    round: int
    slot: int
    pick_no: int | None = Field(default=None, description="Overall pick number")
    original_owner: int | None
    current_owner: int | None
    status: PickStatus
    trade_chain: list[TradeStep] = Field(default_factory=list)

    @property
    def label(self) -> str:
        return f"Round {self.round} • Pick {self.slot:02d}"


class TeamPicks(BaseModel):
    """Picks owned by a team and picks it has sent elsewhere."""

    roster_id: int
    team_name: str
    owned: list[TeamPick] = Field(default_factory=list)
    sent: list[TeamPick] = Field(default_factory=list)

    @property
    def acquired_count(self) -> int:
        return len([p for p in self.owned if p.status == PickStatus.ACQUIRED])


class PickInfo(BaseModel):
    """Display row for one traded-pick record."""

    round: int
    pick: int | None
    from_team: str
    to_team: str
    is_traded: bool


class BoardCell(BaseModel):
    """One (round, slot) cell of the draft board."""

    round: int
    slot: int
    pick_no: int | None = None
    original_owner: int | None
    current_owner: int | None
    original_team: str
    current_team: str
    is_traded: bool
    trade_count: int = 0


class DraftBoard(BaseModel):
    """Current ownership of every pick in the draft."""

    draft_id: str | None = None
    draft_type: str
    total_rounds: int
    total_rosters: int
    cells: list[BoardCell] = Field(default_factory=list)

    def round_cells(self, round_num: int) -> list[BoardCell]:
        """Cells of a round in slot order."""
        return sorted(
            (c for c in self.cells if c.round == round_num), key=lambda c: c.slot
        )

    @property
    def traded_count(self) -> int:
        return len([c for c in self.cells if c.is_traded])
