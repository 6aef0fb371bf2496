"""SQLAlchemy model for applied vaccines and their booster dates."""

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from petdoc.infrastructure.database import Base


class VaccineModel(Base):
    """A vaccine applied to a pet, optionally followed by a booster dose."""

    __tablename__ = "vaccine"

    id = Column(Integer, primary_key=True, index=True)
    pet_id = Column(
        Integer,
        ForeignKey("pet.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(120), nullable=False)
    applied_on = Column(Date, nullable=False)
    booster_date = Column(Date, nullable=True, index=True)

    pet = relationship("PetModel", back_populates="vaccines")


__all__ = ["VaccineModel"]
