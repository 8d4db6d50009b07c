"""Catalog records and roster models."""

from .catalog import CatalogRecord, Perk, Sponsor, Upgrade, VehicleClass, Weapon
from .draft import Draft, DraftVehicle, HydratedVehicle, Team, Validation, VehicleReport

__all__ = [
    "CatalogRecord",
    "Draft",
    "DraftVehicle",
    "HydratedVehicle",
    "Perk",
    "Sponsor",
    "Team",
    "Upgrade",
    "Validation",
    "VehicleClass",
    "VehicleReport",
    "Weapon",
]
