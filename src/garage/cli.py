"""Command-line interface for validating a team draft."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from garage.catalog import CatalogCache, JsonCatalogLoader
from garage.config import EngineSettings
from garage.errors import CatalogError, ShareCodeError
from garage.models import Draft, Validation
from garage.share import decode_draft
from garage.validate import ValidationService


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_FAILURE = 2


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate a vehicle team draft against a ruleset")
    parser.add_argument("draft", help="Path to a draft JSON file, or a share code with --code")
    parser.add_argument(
        "--code",
        action="store_true",
        help="Treat DRAFT as a share code instead of a file path",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Ruleset directory (default: GARAGE_CATALOG_DIR or the bundled rules)",
    )
    parser.add_argument(
        "--max-cost",
        type=_non_negative_int,
        default=None,
        help="Override the team cost cap in cans (default: draft value, then GARAGE_TEAM_CAP)",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write the validation JSON here")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when the draft has any errors",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g., INFO, DEBUG)")
    return parser.parse_args(argv)


def _load_draft(args: argparse.Namespace) -> Draft:
    if args.code:
        return decode_draft(args.draft)
    payload = json.loads(Path(args.draft).read_text(encoding="utf-8"))
    return Draft.model_validate(payload)


def _print_validation(draft: Draft, validation: Validation) -> None:
    names = {vehicle.id: vehicle.name or vehicle.id for vehicle in draft.vehicles}
    for report in validation.vehicle_reports:
        status = "ok" if not report.errors else f"{len(report.errors)} error(s)"
        print(f"{names.get(report.vehicle_id, report.vehicle_id)}: {report.cost} cans, {status}")
        for message in report.errors:
            print(f"  - {message}")
    print(f"Total: {validation.cost} cans")
    for message in validation.errors:
        print(f"Team: {message}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    settings = EngineSettings.from_env()
    catalog_dir = args.catalog or settings.catalog_dir

    try:
        draft = _load_draft(args)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError, ShareCodeError) as exc:
        print(f"Could not read draft: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    if args.max_cost is not None:
        draft = draft.model_copy(update={"max_cost": args.max_cost})

    service = ValidationService(CatalogCache(JsonCatalogLoader(catalog_dir)).get, settings=settings)
    try:
        validation = service.validate(draft)
    except CatalogError as exc:
        logger.error("Rule catalog failed to load: %s", exc)
        print(f"Rule catalog at {catalog_dir} is invalid: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    _print_validation(draft, validation)
    if args.output:
        args.output.write_text(json.dumps(validation.to_payload(), indent=2), encoding="utf-8")
        print(f"Wrote validation report to {args.output}")

    if args.strict and not validation.is_valid:
        return EXIT_INVALID
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
