import uuid
from datetime import datetime
from typing import Optional
from sqlalchemy import DateTime, Float, String, Text, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from weightwise.database import Base


class WeightEntry(Base):
    __tablename__ = "weight_entries"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    weight: Mapped[float] = mapped_column(Float, nullable=False)  # lbs
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    calories: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    exercise: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    water_intake: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # oz
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    user = relationship("User", back_populates="weight_entries")

    def __repr__(self) -> str:
        return f"<WeightEntry(id={self.id}, date={self.date}, weight={self.weight}lbs)>"
