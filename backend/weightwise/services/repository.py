from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_
from typing import List, Optional
import logging
import uuid

from weightwise.models.user import User
from weightwise.models.weight_entry import WeightEntry
from weightwise.models.goal import Goal
from weightwise.schemas.weight_entry import WeightEntryCreate
from weightwise.schemas.goal import GoalCreate, GoalUpdate
from weightwise.analytics.goals import goal_direction
from weightwise.utils.metrics import format_weight, format_date

logger = logging.getLogger(__name__)


class TrackerRepository:
    """
    Weight log and goals for a single user.

    Every query is scoped by the user id given at construction, so callers
    never reach another user's rows.
    """

    def __init__(self, db: AsyncSession, user_id: uuid.UUID):
        self.db = db
        self.user_id = user_id

    async def get_user(self) -> Optional[User]:
        result = await self.db.execute(
            select(User).where(User.id == self.user_id)
        )
        return result.scalar_one_or_none()

    # ==================== Weight entries ====================

    async def list_entries(self) -> List[WeightEntry]:
        """All entries, newest first"""
        result = await self.db.execute(
            select(WeightEntry)
            .where(WeightEntry.user_id == self.user_id)
            .order_by(WeightEntry.date.desc())
        )
        return list(result.scalars().all())

    async def add_entry(self, entry_data: WeightEntryCreate) -> WeightEntry:
        """
        Append an entry and keep the user's current weight in step with the
        newest entry in the log.
        """
        entry = WeightEntry(
            user_id=self.user_id,
            **entry_data.model_dump()
        )
        self.db.add(entry)
        await self.db.flush()

        latest = await self._latest_entry()
        user = await self.get_user()
        if user is not None and latest is not None:
            user.current_weight = latest.weight

        await self.db.flush()
        await self.db.refresh(entry)
        logger.info(f"Logged {format_weight(entry.weight)} for user {self.user_id} on {format_date(entry.date)}")
        return entry

    async def _latest_entry(self) -> Optional[WeightEntry]:
        result = await self.db.execute(
            select(WeightEntry)
            .where(WeightEntry.user_id == self.user_id)
            .order_by(WeightEntry.date.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    # ==================== Goals ====================

    async def list_goals(self) -> List[Goal]:
        result = await self.db.execute(
            select(Goal)
            .where(Goal.user_id == self.user_id)
            .order_by(Goal.created_at)
        )
        return list(result.scalars().all())

    async def get_goal(self, goal_id: uuid.UUID) -> Optional[Goal]:
        result = await self.db.execute(
            select(Goal).where(
                and_(
                    Goal.id == goal_id,
                    Goal.user_id == self.user_id
                )
            )
        )
        return result.scalar_one_or_none()

    async def add_goal(self, goal_data: GoalCreate, start_weight: float) -> Goal:
        """Create a goal, snapshotting the start weight and its direction"""
        goal = Goal(
            user_id=self.user_id,
            start_weight=start_weight,
            direction=goal_direction(start_weight, goal_data.target_weight),
            is_active=True,
            **goal_data.model_dump()
        )
        self.db.add(goal)
        await self.db.flush()
        await self.db.refresh(goal)
        logger.info(
            f"Created {goal.direction.value} goal '{goal.title}' for user {self.user_id}, "
            f"due {format_date(goal.target_date)}"
        )
        return goal

    async def update_goal(self, goal: Goal, update_data: GoalUpdate) -> Goal:
        """
        Apply an edit. The start weight stays as captured at creation; a new
        target re-derives the direction against that start weight.
        """
        update_dict = update_data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_dict.items():
            setattr(goal, field, value)

        if "target_weight" in update_dict:
            goal.direction = goal_direction(goal.start_weight, goal.target_weight)

        await self.db.flush()
        await self.db.refresh(goal)
        return goal

    async def toggle_goal(self, goal: Goal) -> Goal:
        goal.is_active = not goal.is_active
        await self.db.flush()
        await self.db.refresh(goal)
        return goal

    async def delete_goal(self, goal: Goal) -> None:
        await self.db.delete(goal)
        await self.db.flush()
