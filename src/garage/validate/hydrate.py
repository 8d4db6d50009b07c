"""Resolve a draft's id references into catalog objects."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from garage.catalog import RuleCatalog
from garage.models import Draft, DraftVehicle, HydratedVehicle, Team, Weapon


logger = logging.getLogger(__name__)

T = TypeVar("T")


def resolve_weapon(instance_id: str, catalog: RuleCatalog) -> Optional[Weapon]:
    """Resolve a weapon instance id such as ``machine_gun_1`` to its catalog entry.

    The builder appends a per-instance suffix to weapon ids, so the longest
    ``_``-delimited prefix that names a catalog weapon wins.
    """

    parts = instance_id.split("_")
    for end in range(len(parts), 0, -1):
        weapon = catalog.weapon("_".join(parts[:end]))
        if weapon is not None:
            return weapon
    return None


def _resolve_all(
    ids: Sequence[str],
    lookup: Callable[[str], Optional[T]],
    *,
    kind: str,
    vehicle_id: str,
) -> Tuple[T, ...]:
    resolved: List[T] = []
    for ref in ids:
        item = lookup(ref)
        if item is None:
            logger.warning("Dropping unknown %s %r on vehicle %s", kind, ref, vehicle_id)
            continue
        resolved.append(item)
    return tuple(resolved)


def hydrate_vehicle(vehicle: DraftVehicle, catalog: RuleCatalog) -> Optional[HydratedVehicle]:
    vehicle_class = catalog.vehicle_class(vehicle.type)
    if vehicle_class is None:
        return None
    return HydratedVehicle(
        instance=vehicle,
        vehicle_class=vehicle_class,
        weapons=_resolve_all(
            vehicle.weapons, lambda ref: resolve_weapon(ref, catalog), kind="weapon", vehicle_id=vehicle.id
        ),
        upgrades=_resolve_all(vehicle.upgrades, catalog.upgrade, kind="upgrade", vehicle_id=vehicle.id),
        perks=_resolve_all(vehicle.perks, catalog.perk, kind="perk", vehicle_id=vehicle.id),
    )


def hydrate_team(draft: Draft, catalog: RuleCatalog) -> Optional[Team]:
    """Build a :class:`Team` from ``draft``; ``None`` when the sponsor is unknown.

    Vehicles whose type does not resolve are left out of the team and listed
    in ``Team.skipped_vehicles``.
    """

    sponsor = catalog.sponsor(draft.sponsor)
    if sponsor is None:
        logger.info("Draft references unknown sponsor %r", draft.sponsor)
        return None

    vehicles: List[HydratedVehicle] = []
    skipped: List[DraftVehicle] = []
    for draft_vehicle in draft.vehicles:
        hydrated = hydrate_vehicle(draft_vehicle, catalog)
        if hydrated is None:
            logger.warning("Skipping vehicle %s with unknown type %r", draft_vehicle.id, draft_vehicle.type)
            skipped.append(draft_vehicle)
            continue
        vehicles.append(hydrated)

    return Team(sponsor=sponsor, vehicles=tuple(vehicles), skipped_vehicles=tuple(skipped))
