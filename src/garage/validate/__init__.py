"""Roster validation engine."""

from .calc import (
    VehicleStats,
    build_slots_used,
    effective_stats,
    perk_cost,
    sum_costs,
    upgrade_cost,
    vehicle_base_cost,
    vehicle_cost,
    weapon_cost,
)
from .checks import (
    DEFAULT_CHECKS,
    build_slot_check,
    run_all_checks,
    sponsor_perk_check,
    sponsor_vehicle_check,
    unique_weapon_check,
    upgrade_slot_check,
    weapon_slot_check,
)
from .hydrate import hydrate_team, resolve_weapon
from .service import UNKNOWN_SPONSOR, ValidationService, ValidationStage, validate_draft

__all__ = [
    "DEFAULT_CHECKS",
    "UNKNOWN_SPONSOR",
    "ValidationService",
    "ValidationStage",
    "VehicleStats",
    "build_slot_check",
    "build_slots_used",
    "effective_stats",
    "hydrate_team",
    "perk_cost",
    "resolve_weapon",
    "run_all_checks",
    "sponsor_perk_check",
    "sponsor_vehicle_check",
    "sum_costs",
    "unique_weapon_check",
    "upgrade_cost",
    "upgrade_slot_check",
    "validate_draft",
    "vehicle_base_cost",
    "vehicle_cost",
    "weapon_cost",
    "weapon_slot_check",
]
