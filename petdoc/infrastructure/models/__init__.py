"""ORM models used by the application infrastructure."""

from .owner import OwnerModel
from .pet import PetModel
from .vaccine import VaccineModel

__all__ = [
    "OwnerModel",
    "PetModel",
    "VaccineModel",
]
