from .catalog import (
    describe_positions,
    format_label,
    is_selection_complete,
    players_per_team,
    position_order,
    positions_for,
    total_slots,
    variant_label,
)
from .engine import TeamAssigner, roster_sort_key
from .roster import format_roster
from .slots import SlotGroup, SlotPool, build_slots
from .validation import RosterValidator

__all__ = [
    "RosterValidator",
    "SlotGroup",
    "SlotPool",
    "TeamAssigner",
    "build_slots",
    "describe_positions",
    "format_label",
    "format_roster",
    "is_selection_complete",
    "players_per_team",
    "position_order",
    "positions_for",
    "roster_sort_key",
    "total_slots",
    "variant_label",
]
