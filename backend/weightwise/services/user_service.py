from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from typing import Optional
import logging
import uuid

from weightwise.models.user import User
from weightwise.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

# Profile fields a PUT may clear by sending null
CLEARABLE_FIELDS = {"avatar"}


class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get a user by email address"""
        result = await self.db.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def get_user_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        """Get a user by ID"""
        result = await self.db.execute(
            select(User).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def create_user(self, user_data: UserCreate) -> User:
        """Create a new user"""
        user = User(**user_data.model_dump())

        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)
        logger.info(f"Created user {user.id}")
        return user

    async def update_user(self, user: User, update_data: UserUpdate) -> User:
        """Apply a profile edit"""
        update_dict = update_data.model_dump(exclude_unset=True)
        for field, value in update_dict.items():
            if value is None and field not in CLEARABLE_FIELDS:
                continue
            setattr(user, field, value)

        await self.db.flush()
        await self.db.refresh(user)
        return user

    async def delete_user(self, user: User) -> None:
        """Delete the account together with its entries and goals"""
        user_id = user.id
        await self.db.delete(user)
        await self.db.flush()
        logger.info(f"Deleted user {user_id} and all their data")
