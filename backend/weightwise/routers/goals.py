from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import uuid

from weightwise.models.goal import Goal
from weightwise.schemas.goal import GoalCreate, GoalUpdate, GoalResponse
from weightwise.services.repository import TrackerRepository
from weightwise.routers.deps import get_repository

router = APIRouter()


async def _get_goal_or_404(repository: TrackerRepository, goal_id: uuid.UUID) -> Goal:
    goal = await repository.get_goal(goal_id)
    if not goal:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Goal not found"
        )
    return goal


@router.get("", response_model=List[GoalResponse])
async def list_goals(
    repository: TrackerRepository = Depends(get_repository)
):
    """Get all goals for the user"""
    return await repository.list_goals()


@router.post("", response_model=GoalResponse, status_code=status.HTTP_201_CREATED)
async def create_goal(
    goal_data: GoalCreate,
    repository: TrackerRepository = Depends(get_repository)
):
    """
    Create a goal.

    The user's current weight is stored on the goal as its starting point,
    and the goal is fixed as a loss or gain goal from that snapshot.
    """
    user = await repository.get_user()
    return await repository.add_goal(goal_data, start_weight=user.current_weight)


@router.put("/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: uuid.UUID,
    update_data: GoalUpdate,
    repository: TrackerRepository = Depends(get_repository)
):
    """Edit a goal"""
    goal = await _get_goal_or_404(repository, goal_id)
    return await repository.update_goal(goal, update_data)


@router.post("/{goal_id}/toggle", response_model=GoalResponse)
async def toggle_goal(
    goal_id: uuid.UUID,
    repository: TrackerRepository = Depends(get_repository)
):
    """Flip a goal between active and inactive"""
    goal = await _get_goal_or_404(repository, goal_id)
    return await repository.toggle_goal(goal)


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(
    goal_id: uuid.UUID,
    repository: TrackerRepository = Depends(get_repository)
):
    """Delete a goal"""
    goal = await _get_goal_or_404(repository, goal_id)
    await repository.delete_goal(goal)
