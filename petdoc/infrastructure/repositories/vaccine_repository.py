"""Persistence helpers for vaccine booster lookups."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date

from sqlalchemy.orm import Session, joinedload

from petdoc.domain.entities import BoosterRecord
from petdoc.infrastructure.models import PetModel, VaccineModel


class VaccineRepository:
    """Read vaccine boosters together with their pet and owner."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_due_on(self, target_date: date) -> Sequence[BoosterRecord]:
        query = (
            self.session.query(VaccineModel)
            .options(joinedload(VaccineModel.pet).joinedload(PetModel.owner))
            .filter(VaccineModel.booster_date == target_date)
            .order_by(VaccineModel.id)
        )
        return [self._to_record(model) for model in query.all()]

    @staticmethod
    def _to_record(model: VaccineModel) -> BoosterRecord:
        pet = model.pet
        owner = pet.owner
        return BoosterRecord(
            pet_id=pet.id,
            vaccine_name=model.name,
            booster_date=model.booster_date,
            owner_email=owner.email,
            owner_name=owner.name,
            pet_name=pet.name,
        )


class DatabaseBoosterQueryService:
    """Open a fresh session for every lookup performed by a scheduled run."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def find_due_on(self, target_date: date) -> Sequence[BoosterRecord]:
        session = self._session_factory()
        try:
            return VaccineRepository(session).find_due_on(target_date)
        finally:
            session.close()


__all__ = ["DatabaseBoosterQueryService", "VaccineRepository"]
