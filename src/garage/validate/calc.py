"""Cost and stat arithmetic over hydrated vehicles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from garage.models import HydratedVehicle, Perk, Upgrade, VehicleClass, Weapon


@dataclass(frozen=True)
class VehicleStats:
    hull: int
    crew: int
    gear: int
    handling: int


def sum_costs(values: Iterable[int]) -> int:
    return sum(values, 0)


def vehicle_base_cost(vehicle_class: VehicleClass) -> int:
    return vehicle_class.base_cost


def weapon_cost(weapon: Weapon) -> int:
    return weapon.cost


def upgrade_cost(upgrade: Upgrade) -> int:
    return upgrade.cost


def perk_cost(perk: Perk) -> int:
    return perk.cost


def vehicle_cost(vehicle: HydratedVehicle) -> int:
    """Base cost plus every installed weapon, upgrade and perk."""

    return (
        vehicle_base_cost(vehicle.vehicle_class)
        + sum_costs(weapon_cost(w) for w in vehicle.weapons)
        + sum_costs(upgrade_cost(u) for u in vehicle.upgrades)
        + sum_costs(perk_cost(p) for p in vehicle.perks)
    )


def build_slots_used(vehicle: HydratedVehicle) -> int:
    return sum_costs(w.slots for w in vehicle.weapons) + sum_costs(u.slots for u in vehicle.upgrades)


def effective_stats(vehicle: HydratedVehicle) -> VehicleStats:
    """Class profile with upgrade deltas applied; hull and gear never drop below 1."""

    vehicle_class = vehicle.vehicle_class
    hull = vehicle_class.max_hull + sum_costs(u.hull for u in vehicle.upgrades)
    crew = vehicle_class.crew + sum_costs(u.crew for u in vehicle.upgrades)
    gear = vehicle_class.max_gear + sum_costs(u.gear for u in vehicle.upgrades)
    handling = vehicle_class.handling + sum_costs(u.handling for u in vehicle.upgrades)
    return VehicleStats(hull=max(1, hull), crew=max(0, crew), gear=max(1, gear), handling=handling)
