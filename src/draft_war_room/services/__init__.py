"""Business logic services."""

from draft_war_room.services.draft_picks import DraftPickService
from draft_war_room.services.pick_attribution import (
    PickAttribution,
    apply_trades_to_table,
    build_pick_mappings,
    calculate_original_owners,
    find_ownership_conflicts,
    overall_pick_number,
    partition_team_picks,
    resolve_final_owners,
    resolve_trade_chain,
)

__all__ = [
    # Draft picks
    "DraftPickService",
    # Pick attribution
    "PickAttribution",
    "apply_trades_to_table",
    "build_pick_mappings",
    "calculate_original_owners",
    "find_ownership_conflicts",
    "overall_pick_number",
    "partition_team_picks",
    "resolve_final_owners",
    "resolve_trade_chain",
]
