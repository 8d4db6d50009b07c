"""Response models for validation results."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from garage.models import Validation, VehicleReport


class VehicleReportResponse(BaseModel):
    vehicle_id: str = Field(alias="vehicleId")
    cost: int = Field(ge=0)
    errors: List[str]

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_report(cls, report: VehicleReport) -> "VehicleReportResponse":
        return cls(vehicle_id=report.vehicle_id, cost=report.cost, errors=list(report.errors))


class ValidationResponse(BaseModel):
    cost: int = Field(ge=0)
    errors: List[str]
    vehicle_reports: List[VehicleReportResponse] = Field(alias="vehicleReports")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_validation(cls, validation: Validation) -> "ValidationResponse":
        return cls(
            cost=validation.cost,
            errors=list(validation.errors),
            vehicle_reports=[VehicleReportResponse.from_report(r) for r in validation.vehicle_reports],
        )
