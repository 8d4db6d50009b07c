"""Construction rules applied to a hydrated team.

Each check takes the team and the vehicle reports (one per team vehicle, in
the same order) and appends messages to the matching report. Checks never
raise for rule violations and do not depend on one another.
"""

from __future__ import annotations

from typing import Callable, Iterator, Sequence, Tuple

from garage.models import HydratedVehicle, Team, VehicleReport

from .calc import build_slots_used


Check = Callable[[Team, Sequence[VehicleReport]], None]


def _pairs(team: Team, reports: Sequence[VehicleReport]) -> Iterator[Tuple[HydratedVehicle, VehicleReport]]:
    if len(team.vehicles) != len(reports):
        raise ValueError(f"expected {len(team.vehicles)} vehicle reports, got {len(reports)}")
    return zip(team.vehicles, reports)


def weapon_slot_check(team: Team, reports: Sequence[VehicleReport]) -> None:
    for vehicle, report in _pairs(team, reports):
        limit = vehicle.vehicle_class.weapon_slots
        used = len(vehicle.weapons)
        if used > limit:
            report.errors.append(f"Too many weapons: {used}/{limit} slots")


def unique_weapon_check(team: Team, reports: Sequence[VehicleReport]) -> None:
    for vehicle, report in _pairs(team, reports):
        seen: set[str] = set()
        for weapon in vehicle.weapons:
            if not weapon.unique:
                continue
            if weapon.id in seen:
                report.errors.append(f"Duplicate unique weapon: {weapon.name}")
            else:
                seen.add(weapon.id)


def upgrade_slot_check(team: Team, reports: Sequence[VehicleReport]) -> None:
    for vehicle, report in _pairs(team, reports):
        limit = vehicle.vehicle_class.upgrade_slots
        used = len(vehicle.upgrades)
        if used > limit:
            report.errors.append(f"Too many upgrades: {used}/{limit} slots")


def sponsor_perk_check(team: Team, reports: Sequence[VehicleReport]) -> None:
    sponsor = team.sponsor
    for vehicle, report in _pairs(team, reports):
        for perk in vehicle.perks:
            if not sponsor.allows_perk(perk):
                report.errors.append(f"Invalid perk: {perk.name} is not available for {sponsor.name}")


def build_slot_check(team: Team, reports: Sequence[VehicleReport]) -> None:
    """Only applies to classes that declare a build-slot capacity."""

    for vehicle, report in _pairs(team, reports):
        capacity = vehicle.vehicle_class.build_slots
        if capacity is None:
            continue
        used = build_slots_used(vehicle)
        if used > capacity:
            report.errors.append(f"Too many build slots: {used}/{capacity}")


def sponsor_vehicle_check(team: Team, reports: Sequence[VehicleReport]) -> None:
    sponsor = team.sponsor
    for vehicle, report in _pairs(team, reports):
        vehicle_class = vehicle.vehicle_class
        if not vehicle_class.available_to(sponsor):
            report.errors.append(f"Invalid vehicle: {vehicle_class.name} is not available for {sponsor.name}")


DEFAULT_CHECKS: Tuple[Check, ...] = (
    weapon_slot_check,
    unique_weapon_check,
    upgrade_slot_check,
    sponsor_perk_check,
    build_slot_check,
    sponsor_vehicle_check,
)


def run_all_checks(
    team: Team,
    reports: Sequence[VehicleReport],
    checks: Sequence[Check] = DEFAULT_CHECKS,
) -> None:
    for check in checks:
        check(team, reports)
