"""Canonical rule catalog records shared by the loader and the validator."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


HEX_COLOR_PATTERN = r"^#([0-9a-fA-F]{3}){1,2}$"


class CatalogRecord(BaseModel):
    """Base for every catalog entity: immutable, identified by ``id``."""

    id: str = Field(..., min_length=1)
    name: str

    model_config = ConfigDict(frozen=True, extra="forbid")


class Sponsor(CatalogRecord):
    color: str = Field(..., pattern=HEX_COLOR_PATTERN)
    perks: Tuple[str, ...] = ()
    perk_classes: Tuple[str, ...] = ()

    def allows_perk(self, perk: "Perk") -> bool:
        return perk.id in self.perks or perk.line in self.perk_classes


class VehicleClass(CatalogRecord):
    base_cost: int = Field(..., ge=0)
    max_hull: int = Field(..., gt=0)
    weapon_slots: int = Field(default=0, ge=0)
    upgrade_slots: int = Field(default=0, ge=0)
    crew: int = Field(default=1, ge=0)
    handling: int = 0
    max_gear: int = Field(default=1, gt=0)
    build_slots: Optional[int] = Field(default=None, ge=0)
    sponsors: Tuple[str, ...] = ()

    def available_to(self, sponsor: Sponsor) -> bool:
        return not self.sponsors or sponsor.id in self.sponsors


class Weapon(CatalogRecord):
    cost: int = Field(..., ge=0)
    slots: int = Field(default=1, ge=0)
    unique: bool = False
    facing: Optional[str] = None
    special_rules: str = ""


class Upgrade(CatalogRecord):
    cost: int = Field(..., ge=0)
    slots: int = Field(default=1, ge=0)
    hull: int = 0
    crew: int = 0
    gear: int = 0
    handling: int = 0


class Perk(CatalogRecord):
    line: str = ""
    cost: int = Field(..., ge=0)
    text: str = ""
