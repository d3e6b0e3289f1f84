from fastapi import APIRouter, Depends, status
from typing import List

from weightwise.schemas.weight_entry import WeightEntryCreate, WeightEntryResponse
from weightwise.services.repository import TrackerRepository
from weightwise.routers.deps import get_repository

router = APIRouter()


@router.get("", response_model=List[WeightEntryResponse])
async def list_entries(
    repository: TrackerRepository = Depends(get_repository)
):
    """Get the user's weight log, newest first"""
    return await repository.list_entries()


@router.post("", response_model=WeightEntryResponse, status_code=status.HTTP_201_CREATED)
async def create_entry(
    entry_data: WeightEntryCreate,
    repository: TrackerRepository = Depends(get_repository)
):
    """Log a new weight entry. Entries cannot be edited once logged."""
    return await repository.add_entry(entry_data)
