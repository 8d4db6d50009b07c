"""Pydantic models for validation output."""

from .validation import ValidationResponse, VehicleReportResponse

__all__ = [
    "ValidationResponse",
    "VehicleReportResponse",
]
