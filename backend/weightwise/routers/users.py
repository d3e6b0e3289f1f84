from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging
import uuid

from weightwise.database import get_db
from weightwise.models.user import User
from weightwise.schemas.user import UserCreate, UserUpdate, UserResponse
from weightwise.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


async def _get_user_or_404(service: UserService, user_id: uuid.UUID) -> User:
    user = await service.get_user_by_id(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    db: AsyncSession = Depends(get_db)
):
    """Sign up a new user"""
    service = UserService(db)

    if await service.get_user_by_email(user_data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    return await service.create_user(user_data)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: uuid.UUID,
    db: AsyncSession = Depends(get_db)
):
    """Get a user's profile"""
    return await _get_user_or_404(UserService(db), user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: uuid.UUID,
    update_data: UserUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Edit a user's profile"""
    service = UserService(db)
    user = await _get_user_or_404(service, user_id)

    if update_data.email and update_data.email != user.email:
        existing = await service.get_user_by_email(update_data.email)
        if existing:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email already registered"
            )

    return await service.update_user(user, update_data)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: uuid.UUID,
    db: AsyncSession = Depends(get_db)
):
    """Delete the account and all of its entries and goals"""
    service = UserService(db)
    user = await _get_user_or_404(service, user_id)
    await service.delete_user(user)
