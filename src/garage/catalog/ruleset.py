"""Immutable catalog handle plus helpers to build and cache it."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, TypeVar

from garage.errors import CatalogError
from garage.models import CatalogRecord, Perk, Sponsor, Upgrade, VehicleClass, Weapon

from .loader import CatalogLoader


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=CatalogRecord)


def _index(records: Iterable[RecordT], kind: str) -> Mapping[str, RecordT]:
    indexed: dict[str, RecordT] = {}
    for record in records:
        if record.id in indexed:
            raise CatalogError(f"duplicate {kind} id {record.id!r}")
        indexed[record.id] = record
    return MappingProxyType(indexed)


@dataclass(frozen=True)
class RuleCatalog:
    """One ruleset version: every entity keyed by id, read-only."""

    sponsors: Mapping[str, Sponsor]
    vehicle_classes: Mapping[str, VehicleClass]
    weapons: Mapping[str, Weapon]
    upgrades: Mapping[str, Upgrade]
    perks: Mapping[str, Perk]

    @classmethod
    def from_records(
        cls,
        *,
        sponsors: Iterable[Sponsor] = (),
        vehicle_classes: Iterable[VehicleClass] = (),
        weapons: Iterable[Weapon] = (),
        upgrades: Iterable[Upgrade] = (),
        perks: Iterable[Perk] = (),
    ) -> "RuleCatalog":
        return cls(
            sponsors=_index(sponsors, "Sponsor"),
            vehicle_classes=_index(vehicle_classes, "VehicleClass"),
            weapons=_index(weapons, "Weapon"),
            upgrades=_index(upgrades, "Upgrade"),
            perks=_index(perks, "Perk"),
        )

    def sponsor(self, sponsor_id: str) -> Optional[Sponsor]:
        return self.sponsors.get(sponsor_id)

    def vehicle_class(self, class_id: str) -> Optional[VehicleClass]:
        return self.vehicle_classes.get(class_id)

    def weapon(self, weapon_id: str) -> Optional[Weapon]:
        return self.weapons.get(weapon_id)

    def upgrade(self, upgrade_id: str) -> Optional[Upgrade]:
        return self.upgrades.get(upgrade_id)

    def perk(self, perk_id: str) -> Optional[Perk]:
        return self.perks.get(perk_id)


def load_catalog(loader: CatalogLoader) -> RuleCatalog:
    """Load every collection from ``loader`` one after another."""

    return RuleCatalog.from_records(
        sponsors=loader.load_sponsors(),
        vehicle_classes=loader.load_vehicle_classes(),
        weapons=loader.load_weapons(),
        upgrades=loader.load_upgrades(),
        perks=loader.load_perks(),
    )


async def load_catalog_async(loader: CatalogLoader) -> RuleCatalog:
    """Load the five independent collections concurrently in worker threads."""

    sponsors, vehicle_classes, weapons, upgrades, perks = await asyncio.gather(
        asyncio.to_thread(loader.load_sponsors),
        asyncio.to_thread(loader.load_vehicle_classes),
        asyncio.to_thread(loader.load_weapons),
        asyncio.to_thread(loader.load_upgrades),
        asyncio.to_thread(loader.load_perks),
    )
    return RuleCatalog.from_records(
        sponsors=sponsors,
        vehicle_classes=vehicle_classes,
        weapons=weapons,
        upgrades=upgrades,
        perks=perks,
    )


class CatalogCache:
    """Caller-owned cache: loads the catalog on first use and keeps it.

    There is no invalidation on content change; build a new cache (or call
    :meth:`clear`) to pick up edited rules.
    """

    def __init__(self, loader: CatalogLoader):
        self._loader = loader
        self._catalog: Optional[RuleCatalog] = None

    @property
    def loaded(self) -> bool:
        return self._catalog is not None

    def get(self) -> RuleCatalog:
        if self._catalog is None:
            logger.debug("Loading rule catalog via %s", type(self._loader).__name__)
            self._catalog = load_catalog(self._loader)
        return self._catalog

    def clear(self) -> None:
        self._catalog = None
