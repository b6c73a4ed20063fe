"""
Draft Pick Attribution

Works out who holds every (round, slot) pick of a draft: the original owner
from the pre-draft slot assignment, then the current owner after replaying
the league's traded-pick records in chronological order.

Everything here is pure computation over data already fetched from Sleeper.
Missing data never raises; unknown owners come back as ``None``.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping

from draft_war_room.models.draft import DraftType
from draft_war_room.models.league import Team
from draft_war_room.models.picks import (
    BoardCell,
    DraftBoard,
    PickInfo,
    PickMappings,
    PickOwnership,
    PickStatus,
    TeamPick,
    TeamPicks,
    TradeChain,
    TradeRecord,
    TradeStep,
)

logger = logging.getLogger(__name__)


def pick_key(round_num: int, slot: int) -> str:
    """Key used by the ownership tables: "round-slot"."""
    return f"{round_num}-{slot}"


def parse_pick_key(key: str) -> tuple[int, int]:
    round_part, slot_part = key.split("-", 1)
    return int(round_part), int(slot_part)


def team_name(roster_id: int | None, teams: Iterable[Team]) -> str:
    """Resolve a roster ID to a display name."""
    if roster_id is None:
        return "Unknown"
    team = next((t for t in teams if t.roster_id == roster_id), None)
    if team:
        return team.name
    return f"Team {roster_id}"


def overall_pick_number(
    round_num: int,
    slot: int,
    total_rosters: int,
    draft_type: str = DraftType.SNAKE.value,
    reversal_round: int | None = None,
) -> int | None:
    """
    Overall pick number of a (round, slot) pick.

    Slot ownership never rotates between rounds; only the order in which
    slots pick does. Snake drafts reverse every even round, and a
    ``reversal_round`` (3 for a "3RR" draft) flips the direction again from
    that round on.

    Returns:
        1-based overall pick number, or None for auction drafts
    """
    if draft_type == DraftType.AUCTION.value:
        return None

    reversed_round = False
    if draft_type == DraftType.SNAKE.value:
        reversed_round = round_num % 2 == 0
        if reversal_round and round_num >= reversal_round:
            reversed_round = not reversed_round

    position = total_rosters - slot + 1 if reversed_round else slot
    return (round_num - 1) * total_rosters + position


# ==================== Slot Mapper ====================


def build_pick_mappings(
    teams: Iterable[Team],
    draft_order: Mapping[str, int | str] | None,
    slot_to_roster_id: Mapping[str | int, int] | None = None,
) -> PickMappings:
    """
    Build user/slot/roster lookup tables.

    Args:
        teams: League teams (roster joined with its user)
        draft_order: User ID -> draft slot
        slot_to_roster_id: Slot -> roster ID when the draft already has one

    Returns:
        PickMappings; users without a team are left out of slot_to_roster
    """
    user_to_roster = {t.user_id: t.roster_id for t in teams if t.user_id}

    slot_to_user: dict[int, str] = {}
    for user_id, slot in (draft_order or {}).items():
        slot_to_user[int(slot)] = user_id

    slot_to_roster: dict[int, int] = {}
    if slot_to_roster_id:
        for slot, roster_id in slot_to_roster_id.items():
            if roster_id is not None:
                slot_to_roster[int(slot)] = int(roster_id)
    else:
        for slot, user_id in slot_to_user.items():
            roster_id = user_to_roster.get(user_id)
            if roster_id is not None:
                slot_to_roster[slot] = roster_id

    seen: dict[int, int] = {}
    for slot in sorted(slot_to_roster):
        roster_id = slot_to_roster[slot]
        if roster_id in seen:
            logger.warning(
                "Roster %s holds slots %s and %s", roster_id, seen[roster_id], slot
            )
        else:
            seen[roster_id] = slot

    return PickMappings(
        user_to_roster=user_to_roster,
        slot_to_user=slot_to_user,
        slot_to_roster=slot_to_roster,
    )


def normalize_trade_records(
    trades: Iterable[TradeRecord], mappings: PickMappings
) -> list[TradeRecord]:
    """
    Make sure every record names its slot.

    Sleeper identifies a traded pick by the roster that originally held it;
    that roster's slot is filled in as ``pick``. Records whose slot cannot
    be determined are dropped.
    """
    roster_to_slot = mappings.roster_to_slot
    normalized: list[TradeRecord] = []

    for trade in trades:
        if trade.pick:
            normalized.append(trade)
            continue

        slot = roster_to_slot.get(trade.roster_id) if trade.roster_id is not None else None
        if slot is None:
            logger.debug(
                "Dropping traded pick round %s roster %s: no draft slot",
                trade.round,
                trade.roster_id,
            )
            continue
        normalized.append(trade.model_copy(update={"pick": slot}))

    return normalized


# ==================== Ownership ====================


def calculate_original_owners(
    mappings: PickMappings, total_rounds: int, total_rosters: int
) -> dict[str, int]:
    """Original owner of every pick, before any trade."""
    original: dict[str, int] = {}

    for round_num in range(1, total_rounds + 1):
        for slot in range(1, total_rosters + 1):
            roster_id = mappings.slot_to_roster.get(slot)
            if roster_id is not None:
                original[pick_key(round_num, slot)] = roster_id

    return original


def sort_trades(trades: Iterable[TradeRecord]) -> list[TradeRecord]:
    """Oldest first; records without a timestamp count as 0, ties keep input order."""
    return sorted(trades, key=lambda t: t.created or 0)


def resolve_trade_chain(
    round_num: int,
    slot: int,
    trades: Iterable[TradeRecord],
    original_owner: int | None,
) -> TradeChain:
    """
    Replay the trades of one pick.

    Args:
        round_num: Pick round
        slot: Pick slot
        trades: Traded-pick records (any picks, any order)
        original_owner: Roster that held the pick before any trade

    Returns:
        TradeChain with every hop and the final owner
    """
    matching = [t for t in trades if t.round == round_num and t.pick == slot]

    current = original_owner
    chain: list[TradeStep] = []

    for trade in sort_trades(matching):
        # A record without a new owner leaves the pick where it was
        new_owner = trade.owner_id if trade.owner_id is not None else current
        chain.append(
            TradeStep(
                from_owner=current,
                to_owner=new_owner,
                trade=trade,
                timestamp=trade.created,
            )
        )
        current = new_owner

    return TradeChain(
        round=round_num,
        slot=slot,
        original_owner=original_owner,
        chain=chain,
        final_owner=current,
    )


def group_trades_by_pick(trades: Iterable[TradeRecord]) -> dict[str, list[TradeRecord]]:
    grouped: dict[str, list[TradeRecord]] = defaultdict(list)
    for trade in trades:
        if trade.key:
            grouped[trade.key].append(trade)
    return grouped


def resolve_final_owners(
    original: Mapping[str, int], trades: Iterable[TradeRecord]
) -> dict[str, int]:
    """Current owner of every pick in the original table, via the chain walk."""
    grouped = group_trades_by_pick(trades)
    final: dict[str, int] = {}

    for key, original_owner in original.items():
        round_num, slot = parse_pick_key(key)
        resolved = resolve_trade_chain(
            round_num, slot, grouped.get(key, []), original_owner
        )
        final[key] = resolved.final_owner

    return final


def apply_trades_to_table(
    original: Mapping[str, int], trades: Iterable[TradeRecord]
) -> dict[str, int]:
    """
    Table-wide view of final ownership.

    Overwrites the original table with each trade's new owner in
    chronological order. Must agree with resolve_final_owners.
    """
    final = dict(original)

    for trade in sort_trades(trades):
        key = trade.key
        if key not in final or trade.owner_id is None:
            continue
        final[key] = trade.owner_id

    return final


def find_ownership_conflicts(
    original: Mapping[str, int], trades: Iterable[TradeRecord]
) -> list[str]:
    """Pick keys where the chain walk and the table overwrite disagree."""
    trades = list(trades)
    by_chain = resolve_final_owners(original, trades)
    by_table = apply_trades_to_table(original, trades)
    return sorted(
        (k for k in original if by_chain.get(k) != by_table.get(k)),
        key=parse_pick_key,
    )


# ==================== Team Picks ====================


def partition_team_picks(
    roster_id: int,
    original: Mapping[str, int],
    final: Mapping[str, int],
    trades: Iterable[TradeRecord],
    total_rounds: int,
    total_rosters: int,
    draft_type: str = DraftType.SNAKE.value,
    reversal_round: int | None = None,
    name: str | None = None,
) -> TeamPicks:
    """
    Split a team's draft capital into picks it holds and picks it sent away.

    A pick the team originally held and still holds is only listed under
    ``owned``.
    """
    grouped = group_trades_by_pick(trades)
    owned: list[TeamPick] = []
    sent: list[TeamPick] = []

    for round_num in range(1, total_rounds + 1):
        for slot in range(1, total_rosters + 1):
            key = pick_key(round_num, slot)
            original_owner = original.get(key)
            final_owner = final.get(key)

            if final_owner != roster_id and original_owner != roster_id:
                continue

            chain = resolve_trade_chain(
                round_num, slot, grouped.get(key, []), original_owner
            ).chain

            if final_owner == roster_id:
                if original_owner != roster_id:
                    status = PickStatus.ACQUIRED
                elif chain:
                    status = PickStatus.REACQUIRED
                else:
                    status = PickStatus.ORIGINAL
                bucket = owned
            else:
                status = PickStatus.TRADED_AWAY
                bucket = sent

            bucket.append(
                TeamPick(
                    round=round_num,
                    slot=slot,
                    pick_no=overall_pick_number(
                        round_num, slot, total_rosters, draft_type, reversal_round
                    ),
                    original_owner=original_owner,
                    current_owner=final_owner,
                    status=status,
                    trade_chain=chain,
                )
            )

    return TeamPicks(
        roster_id=roster_id,
        team_name=name or f"Team {roster_id}",
        owned=owned,
        sent=sent,
    )


def format_pick_info(
    trade: TradeRecord, original: Mapping[str, int], teams: Iterable[Team]
) -> PickInfo:
    """Display row for one traded-pick record."""
    teams = list(teams)
    original_owner = original.get(trade.key) if trade.key else None

    return PickInfo(
        round=trade.round,
        pick=trade.pick,
        from_team=team_name(original_owner, teams),
        to_team=team_name(trade.owner_id, teams),
        is_traded=original_owner != trade.owner_id,
    )


class PickAttribution:
    """
    Ownership snapshot for one draft.

    Built from a fixed set of teams, draft order and traded picks. When the
    trade list changes, build a new instance instead of mutating this one.

    Example:
        attribution = PickAttribution(
            teams=ctx.teams,
            draft_order=draft.draft_order,
            total_rounds=15,
            total_rosters=12,
            trades=traded_picks,
        )
        mine = attribution.team_picks(roster_id=3)
    """

    def __init__(
        self,
        teams: list[Team],
        draft_order: Mapping[str, int | str] | None,
        total_rounds: int,
        total_rosters: int,
        trades: list[TradeRecord] | None = None,
        slot_to_roster_id: Mapping[str | int, int] | None = None,
        draft_type: str = DraftType.SNAKE.value,
        reversal_round: int | None = None,
        draft_id: str | None = None,
    ):
        self.teams = teams
        self.total_rounds = total_rounds
        self.total_rosters = total_rosters
        self.draft_type = draft_type
        self.reversal_round = reversal_round
        self.draft_id = draft_id

        self.mappings = build_pick_mappings(teams, draft_order, slot_to_roster_id)
        self.trades = normalize_trade_records(trades or [], self.mappings)
        self._trades_by_pick = group_trades_by_pick(self.trades)

        self.original = calculate_original_owners(
            self.mappings, total_rounds, total_rosters
        )
        self.final = resolve_final_owners(self.original, self.trades)

    # ---------- lookups ----------

    def team_name(self, roster_id: int | None) -> str:
        return team_name(roster_id, self.teams)

    def original_owner_of(self, round_num: int, slot: int) -> int | None:
        """Roster that originally held a pick, or None if unknown."""
        return self.original.get(pick_key(round_num, slot))

    def owner_of(self, round_num: int, slot: int) -> int | None:
        """Roster currently holding a pick, or None if unknown."""
        return self.final.get(pick_key(round_num, slot))

    def chain(self, round_num: int, slot: int) -> TradeChain:
        key = pick_key(round_num, slot)
        return resolve_trade_chain(
            round_num,
            slot,
            self._trades_by_pick.get(key, []),
            self.original.get(key),
        )

    def contains(self, round_num: int, slot: int) -> bool:
        """Whether (round, slot) is a pick of this draft."""
        return 1 <= round_num <= self.total_rounds and 1 <= slot <= self.total_rosters

    def roster_ids(self) -> list[int]:
        return sorted(t.roster_id for t in self.teams)

    # ---------- views ----------

    @property
    def ownership(self) -> PickOwnership:
        return PickOwnership(original=dict(self.original), final=dict(self.final))

    def conflicts(self) -> list[str]:
        """Picks where the table-wide overwrite disagrees with the chain walk."""
        conflicts = find_ownership_conflicts(self.original, self.trades)
        if conflicts:
            logger.warning("Pick ownership disagrees for %s", ", ".join(conflicts))
        return conflicts

    def team_picks(self, roster_id: int) -> TeamPicks:
        return partition_team_picks(
            roster_id,
            self.original,
            self.final,
            self.trades,
            self.total_rounds,
            self.total_rosters,
            draft_type=self.draft_type,
            reversal_round=self.reversal_round,
            name=self.team_name(roster_id),
        )

    def all_team_picks(self) -> list[TeamPicks]:
        return [self.team_picks(roster_id) for roster_id in self.roster_ids()]

    def traded_pick_info(self) -> list[PickInfo]:
        """Display rows for every traded pick, oldest first."""
        return [
            format_pick_info(trade, self.original, self.teams)
            for trade in sort_trades(self.trades)
        ]

    def board(self) -> DraftBoard:
        """Every (round, slot) cell with its original and current owner."""
        cells: list[BoardCell] = []

        for round_num in range(1, self.total_rounds + 1):
            for slot in range(1, self.total_rosters + 1):
                key = pick_key(round_num, slot)
                original_owner = self.original.get(key)
                current_owner = self.final.get(key)
                trade_count = len(self._trades_by_pick.get(key, []))

                cells.append(
                    BoardCell(
                        round=round_num,
                        slot=slot,
                        pick_no=overall_pick_number(
                            round_num,
                            slot,
                            self.total_rosters,
                            self.draft_type,
                            self.reversal_round,
                        ),
                        original_owner=original_owner,
                        current_owner=current_owner,
                        original_team=self.team_name(original_owner),
                        current_team=self.team_name(current_owner),
                        is_traded=current_owner != original_owner,
                        trade_count=trade_count,
                    )
                )

        return DraftBoard(
            draft_id=self.draft_id,
            draft_type=self.draft_type,
            total_rounds=self.total_rounds,
            total_rosters=self.total_rosters,
            cells=cells,
        )
