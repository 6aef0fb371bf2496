"""Domain entity describing a vaccine booster that is due."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

NotificationContext = dict[str, str]


@dataclass(frozen=True)
class BoosterRecord:
    """A scheduled booster dose joined with the pet and owner that receive it."""

    pet_id: int
    vaccine_name: str
    booster_date: date
    owner_email: str
    owner_name: str
    pet_name: str


__all__ = ["BoosterRecord", "NotificationContext"]
