import uuid
from datetime import datetime
from typing import Optional
from sqlalchemy import String, DateTime, Float, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from weightwise.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4
    )
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    avatar: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    height: Mapped[float] = mapped_column(Float, nullable=False)  # inches
    current_weight: Mapped[float] = mapped_column(Float, nullable=False)  # lbs
    target_weight: Mapped[float] = mapped_column(Float, nullable=False)  # lbs
    date_joined: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.now,
        nullable=False
    )

    # Relationships
    weight_entries = relationship("WeightEntry", back_populates="user", cascade="all, delete-orphan")
    goals = relationship("Goal", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
