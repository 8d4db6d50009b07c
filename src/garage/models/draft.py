"""Roster submissions, their hydrated form and the validation outcome."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from pydantic import AliasChoices, BaseModel, Field
from pydantic.config import ConfigDict

from garage.models.catalog import Perk, Sponsor, Upgrade, VehicleClass, Weapon


class DraftVehicle(BaseModel):
    """One vehicle instance as submitted by the builder UI."""

    id: str
    name: str = ""
    type: str
    weapons: Tuple[str, ...] = ()
    upgrades: Tuple[str, ...] = ()
    perks: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)


class Draft(BaseModel):
    """Raw, unresolved roster submission."""

    sponsor: str
    vehicles: Tuple[DraftVehicle, ...] = ()
    max_cost: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("max_cost", "maxCost", "maxCans"),
        serialization_alias="maxCost",
    )
    team_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("team_name", "teamName"),
        serialization_alias="teamName",
    )

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> Dict[str, Any]:
        """Return the camelCase wire shape, omitting unset optionals."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class HydratedVehicle:
    instance: DraftVehicle
    vehicle_class: VehicleClass
    weapons: Tuple[Weapon, ...] = ()
    upgrades: Tuple[Upgrade, ...] = ()
    perks: Tuple[Perk, ...] = ()


@dataclass(frozen=True)
class Team:
    """Draft after resolving every id against the rule catalog."""

    sponsor: Sponsor
    vehicles: Tuple[HydratedVehicle, ...]
    skipped_vehicles: Tuple[DraftVehicle, ...] = ()


@dataclass
class VehicleReport:
    vehicle_id: str
    cost: int
    errors: List[str] = field(default_factory=list)


@dataclass
class Validation:
    cost: int
    errors: List[str] = field(default_factory=list)
    vehicle_reports: List[VehicleReport] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors and all(not report.errors for report in self.vehicle_reports)

    def to_payload(self) -> Dict[str, Any]:
        from garage.api.schemas import ValidationResponse

        return ValidationResponse.from_validation(self).model_dump(by_alias=True)
