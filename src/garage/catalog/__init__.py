"""Rule catalog loading and the immutable catalog handle."""

from .loader import (
    CATALOG_SCHEMA_VERSION,
    CatalogLoader,
    JsonCatalogLoader,
    migrate_legacy_record,
    parse_records,
)
from .ruleset import CatalogCache, RuleCatalog, load_catalog, load_catalog_async

__all__ = [
    "CATALOG_SCHEMA_VERSION",
    "CatalogCache",
    "CatalogLoader",
    "JsonCatalogLoader",
    "RuleCatalog",
    "load_catalog",
    "load_catalog_async",
    "migrate_legacy_record",
    "parse_records",
]
