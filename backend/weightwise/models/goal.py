import uuid
from datetime import datetime, date
from sqlalchemy import String, Date, DateTime, Float, Boolean, ForeignKey, Enum as SQLEnum, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from weightwise.database import Base
from weightwise.utils.enums import GoalType, GoalDirection


class Goal(Base):
    __tablename__ = "goals"

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
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    target_weight: Mapped[float] = mapped_column(Float, nullable=False)  # lbs
    target_date: Mapped[date] = mapped_column(Date, nullable=False)
    type: Mapped[GoalType] = mapped_column(SQLEnum(GoalType), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Snapshot taken when the goal is created; never recomputed
    start_weight: Mapped[float] = mapped_column(Float, nullable=False)
    direction: Mapped[GoalDirection] = mapped_column(SQLEnum(GoalDirection), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.now,
        nullable=False
    )

    # Relationships
    user = relationship("User", back_populates="goals")

    def __repr__(self) -> str:
        return f"<Goal(id={self.id}, title={self.title}, target={self.target_weight}lbs)>"
