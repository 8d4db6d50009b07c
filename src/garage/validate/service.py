"""Validation orchestrator: hydrate, cost, check, aggregate."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from garage.catalog import RuleCatalog
from garage.config import EngineSettings
from garage.models import Draft, Team, Validation, VehicleReport

from .calc import sum_costs, vehicle_cost
from .checks import DEFAULT_CHECKS, Check, run_all_checks
from .hydrate import hydrate_team


logger = logging.getLogger(__name__)

UNKNOWN_SPONSOR = "Unknown sponsor"

DraftInput = Union[Draft, Mapping[str, Any]]


class ValidationStage(str, Enum):
    LOAD_CATALOG = "load_catalog"
    HYDRATE = "hydrate"
    COMPUTE_COSTS = "compute_costs"
    RUN_CHECKS = "run_checks"
    AGGREGATE = "aggregate"
    DONE = "done"


def _enter(stage: ValidationStage) -> None:
    logger.debug("Validation stage: %s", stage.value)


def _coerce_draft(draft: DraftInput) -> Draft:
    if isinstance(draft, Draft):
        return draft
    return Draft.model_validate(draft)


def build_reports(team: Team) -> List[VehicleReport]:
    return [
        VehicleReport(vehicle_id=vehicle.instance.id, cost=vehicle_cost(vehicle))
        for vehicle in team.vehicles
    ]


def team_level_errors(team: Team, total: int, cap: int) -> List[str]:
    errors = [
        f"Unknown vehicle type: {vehicle.type} ({vehicle.name or vehicle.id})"
        for vehicle in team.skipped_vehicles
    ]
    if total > cap:
        errors.append(f"Team exceeds {cap} cans (currently {total})")
    return errors


def validate_draft(
    draft: DraftInput,
    catalog: RuleCatalog,
    *,
    team_cap: Optional[int] = None,
    checks: Sequence[Check] = DEFAULT_CHECKS,
) -> Validation:
    """Validate ``draft`` against an already loaded ``catalog``.

    Rule violations, the cap overrun and an unknown sponsor are reported in
    the returned :class:`Validation`, never raised. A payload that is not a
    draft at all raises :class:`pydantic.ValidationError`.

    The cost cap is the draft's own ``max_cost`` when present, then
    ``team_cap``, then ``GARAGE_TEAM_CAP`` via :meth:`EngineSettings.from_env`.
    """

    draft = _coerce_draft(draft)

    _enter(ValidationStage.HYDRATE)
    team = hydrate_team(draft, catalog)
    if team is None:
        _enter(ValidationStage.DONE)
        return Validation(cost=0, errors=[UNKNOWN_SPONSOR], vehicle_reports=[])

    _enter(ValidationStage.COMPUTE_COSTS)
    reports = build_reports(team)

    _enter(ValidationStage.RUN_CHECKS)
    run_all_checks(team, reports, checks)

    _enter(ValidationStage.AGGREGATE)
    total = sum_costs(report.cost for report in reports)
    if draft.max_cost is not None:
        cap = draft.max_cost
    elif team_cap is not None:
        cap = team_cap
    else:
        cap = EngineSettings.from_env().team_cap
    errors = team_level_errors(team, total, cap)

    _enter(ValidationStage.DONE)
    logger.debug(
        "Validated draft for sponsor %s: %d vehicles, %d cans (cap %d)",
        team.sponsor.id,
        len(reports),
        total,
        cap,
    )
    return Validation(cost=total, errors=errors, vehicle_reports=reports)


class ValidationService:
    """Validate drafts against a catalog obtained from ``catalog_source``.

    ``catalog_source`` is any zero-argument callable returning a
    :class:`RuleCatalog`, typically :meth:`garage.catalog.CatalogCache.get`.
    Catalog failures propagate unchanged and no :class:`Validation` is produced.
    """

    def __init__(
        self,
        catalog_source: Callable[[], RuleCatalog],
        settings: Optional[EngineSettings] = None,
        checks: Sequence[Check] = DEFAULT_CHECKS,
    ):
        self._catalog_source = catalog_source
        self.settings = settings or EngineSettings.from_env()
        self.checks = tuple(checks)

    def validate(self, draft: DraftInput) -> Validation:
        _enter(ValidationStage.LOAD_CATALOG)
        catalog = self._catalog_source()
        return validate_draft(draft, catalog, team_cap=self.settings.team_cap, checks=self.checks)
