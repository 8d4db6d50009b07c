"""Load rule catalogs from a ruleset directory of JSON files.

A ruleset directory looks like::

    rules/
        sponsors/            one sponsor per file (or a single sponsors.json array)
        vehicles.json
        weapons.json
        upgrades.json        optional
        perks.json

Every file is either a bare JSON array (schema version 1, the format the
builder shipped with) or an envelope ``{"schema_version": 2, "records": [...]}``.
Version 1 records are migrated to the canonical field names here, once, so
nothing downstream has to care which revision a record came from.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Protocol, Sequence, Tuple, Type, TypeVar

from pydantic import ValidationError

from garage.errors import CatalogError
from garage.models import CatalogRecord, Perk, Sponsor, Upgrade, VehicleClass, Weapon


logger = logging.getLogger(__name__)

CATALOG_SCHEMA_VERSION = 2
LEGACY_SCHEMA_VERSION = 1

RecordT = TypeVar("RecordT", bound=CatalogRecord)

_LEGACY_FIELD_NAMES = {
    "baseCost": "base_cost",
    "maxHull": "max_hull",
    "weaponSlots": "weapon_slots",
    "upgradeSlots": "upgrade_slots",
    "maxGear": "max_gear",
    "buildSlots": "build_slots",
    "specialRules": "special_rules",
    "perkClasses": "perk_classes",
}

# Display-only or superseded fields the builder shipped in version 1 files.
_LEGACY_ONLY_FIELDS = frozenset(
    {"type", "level", "starterCans", "weight", "range", "attackDice", "electrical", "trailer", "trailerUpgrade"}
)


class CatalogLoader(Protocol):
    """Source of validated catalog collections.

    Each method either returns the complete collection or raises
    :class:`~garage.errors.CatalogError`; partially valid data is never returned.
    """

    def load_sponsors(self) -> Tuple[Sponsor, ...]: ...

    def load_vehicle_classes(self) -> Tuple[VehicleClass, ...]: ...

    def load_weapons(self) -> Tuple[Weapon, ...]: ...

    def load_upgrades(self) -> Tuple[Upgrade, ...]: ...

    def load_perks(self) -> Tuple[Perk, ...]: ...


def migrate_legacy_record(model: Type[CatalogRecord], record: Mapping[str, Any]) -> Dict[str, Any]:
    """Rewrite a schema version 1 record into canonical field names."""

    data: Dict[str, Any] = {}
    for key, value in record.items():
        data[_LEGACY_FIELD_NAMES.get(key, key)] = value

    if model in (Weapon, Upgrade) and "build_slots" in data:
        data.setdefault("slots", data.pop("build_slots"))
    if model is Weapon and data.get("type") == "upgrade":
        raise ValueError("upgrade records belong in upgrades.json, not weapons.json")
    if model is Perk and "cost" not in data and "level" in data:
        data["cost"] = data.pop("level")
    for key in _LEGACY_ONLY_FIELDS.intersection(data):
        del data[key]
    return data


def _read_json(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"cannot read file ({exc.strerror or exc})", source=str(path)) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"invalid JSON at line {exc.lineno}: {exc.msg}", source=str(path)) from exc


def _unwrap(payload: Any, path: Path) -> Tuple[int, List[Any]]:
    if isinstance(payload, list):
        return LEGACY_SCHEMA_VERSION, payload
    if isinstance(payload, dict) and "records" in payload:
        version = payload.get("schema_version", LEGACY_SCHEMA_VERSION)
        if not isinstance(version, int) or version < LEGACY_SCHEMA_VERSION:
            raise CatalogError(f"invalid schema_version {version!r}", source=str(path))
        if version > CATALOG_SCHEMA_VERSION:
            raise CatalogError(
                f"schema_version {version} is newer than supported version {CATALOG_SCHEMA_VERSION}",
                source=str(path),
            )
        records = payload["records"]
        if not isinstance(records, list):
            raise CatalogError("'records' must be an array", source=str(path))
        return version, records
    if isinstance(payload, dict):
        # Single bare record, the one-sponsor-per-file layout.
        return LEGACY_SCHEMA_VERSION, [payload]
    raise CatalogError("expected an array or a records envelope", source=str(path))


def parse_records(
    model: Type[RecordT],
    raw_records: Sequence[Any],
    *,
    version: int = CATALOG_SCHEMA_VERSION,
    source: str | None = None,
) -> Tuple[RecordT, ...]:
    """Validate raw records against ``model``; any bad record fails the whole batch."""

    parsed: List[RecordT] = []
    seen: set[str] = set()
    for index, raw in enumerate(raw_records):
        if not isinstance(raw, Mapping):
            raise CatalogError(f"record {index} is not an object", source=source)
        try:
            data = migrate_legacy_record(model, raw) if version == LEGACY_SCHEMA_VERSION else dict(raw)
            record = model.model_validate(data)
        except (ValidationError, ValueError) as exc:
            label = raw.get("id", index)
            raise CatalogError(f"invalid {model.__name__} record {label!r}: {exc}", source=source) from exc
        if record.id in seen:
            raise CatalogError(f"duplicate {model.__name__} id {record.id!r}", source=source)
        seen.add(record.id)
        parsed.append(record)
    return tuple(parsed)


class JsonCatalogLoader:
    """Read a ruleset directory laid out as described in the module docstring."""

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def _load_file(self, model: Type[RecordT], filename: str, *, required: bool = True) -> Tuple[RecordT, ...]:
        path = self.root / filename
        if not path.exists():
            if required:
                raise CatalogError("catalog file is missing", source=str(path))
            logger.info("No %s found under %s; using an empty collection", filename, self.root)
            return ()
        version, raw_records = _unwrap(_read_json(path), path)
        records = parse_records(model, raw_records, version=version, source=str(path))
        logger.info("Loaded %d %s records from %s", len(records), model.__name__, path)
        return records

    def load_sponsors(self) -> Tuple[Sponsor, ...]:
        directory = self.root / "sponsors"
        if not directory.is_dir():
            return self._load_file(Sponsor, "sponsors.json")

        records: List[Sponsor] = []
        seen: set[str] = set()
        for path in sorted(directory.glob("*.json")):
            version, raw_records = _unwrap(_read_json(path), path)
            for sponsor in parse_records(Sponsor, raw_records, version=version, source=str(path)):
                if sponsor.id in seen:
                    raise CatalogError(f"duplicate Sponsor id {sponsor.id!r}", source=str(path))
                seen.add(sponsor.id)
                records.append(sponsor)
        logger.info("Loaded %d Sponsor records from %s", len(records), directory)
        return tuple(records)

    def load_vehicle_classes(self) -> Tuple[VehicleClass, ...]:
        return self._load_file(VehicleClass, "vehicles.json")

    def load_weapons(self) -> Tuple[Weapon, ...]:
        return self._load_file(Weapon, "weapons.json")

    def load_upgrades(self) -> Tuple[Upgrade, ...]:
        return self._load_file(Upgrade, "upgrades.json", required=False)

    def load_perks(self) -> Tuple[Perk, ...]:
        return self._load_file(Perk, "perks.json")
