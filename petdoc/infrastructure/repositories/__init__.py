"""Repository implementations for infrastructure layer."""

from .vaccine_repository import DatabaseBoosterQueryService, VaccineRepository

__all__ = [
    "DatabaseBoosterQueryService",
    "VaccineRepository",
]
