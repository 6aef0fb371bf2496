"""SQLAlchemy model for the pet owner table."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from petdoc.infrastructure.database import Base


class OwnerModel(Base):
    """Database representation of the person responsible for a pet."""

    __tablename__ = "owner"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(120), nullable=False, index=True)

    pets = relationship(
        "PetModel",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["OwnerModel"]
