"""SQLAlchemy model for the pet table."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from petdoc.infrastructure.database import Base


class PetModel(Base):
    """Database representation of an animal with a vaccination history."""

    __tablename__ = "pet"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(
        Integer,
        ForeignKey("owner.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(80), nullable=False)

    owner = relationship("OwnerModel", back_populates="pets")
    vaccines = relationship(
        "VaccineModel",
        back_populates="pet",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["PetModel"]
