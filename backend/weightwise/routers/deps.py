from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
import uuid

from weightwise.database import get_db
from weightwise.services.repository import TrackerRepository


async def get_repository(
    user_id: uuid.UUID,
    db: AsyncSession = Depends(get_db)
) -> TrackerRepository:
    """Repository scoped to the user in the path; 404 if that user does not exist"""
    repository = TrackerRepository(db, user_id)
    if await repository.get_user() is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return repository
