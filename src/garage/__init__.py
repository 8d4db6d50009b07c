"""Roster validation for vehicle-combat team drafts."""

from garage.catalog import CatalogCache, JsonCatalogLoader, RuleCatalog, load_catalog, load_catalog_async
from garage.errors import CatalogError, GarageError, ShareCodeError
from garage.models import Draft, Validation, VehicleReport
from garage.share import decode_draft, encode_draft
from garage.validate import ValidationService, validate_draft

__all__ = [
    "CatalogCache",
    "CatalogError",
    "Draft",
    "GarageError",
    "JsonCatalogLoader",
    "RuleCatalog",
    "ShareCodeError",
    "Validation",
    "ValidationService",
    "VehicleReport",
    "decode_draft",
    "encode_draft",
    "load_catalog",
    "load_catalog_async",
    "validate_draft",
]
