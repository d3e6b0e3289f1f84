"""Goal progress and deadline helpers."""

import math
from datetime import date, datetime
from typing import List, Optional, Sequence, Tuple, TypeVar, Union

from weightwise.utils.enums import GoalDirection

G = TypeVar("G")

SECONDS_PER_DAY = 24 * 60 * 60


def goal_direction(start_weight: float, target_weight: float) -> GoalDirection:
    """Decide once, at creation, whether a goal is about losing or gaining."""
    if target_weight <= start_weight:
        return GoalDirection.loss
    return GoalDirection.gain


def goal_progress(goal, current_weight: float, start_weight: Optional[float] = None) -> float:
    """
    Percentage of the distance from start to target already covered.

    Args:
        goal: Goal with `target_weight` and a `start_weight` snapshot
        current_weight: Latest weight in lbs
        start_weight: Override for the goal's stored snapshot

    Returns:
        Progress in [0, 100]; 100 when start and target coincide
    """
    if start_weight is None:
        start_weight = goal.start_weight
    target_weight = goal.target_weight

    if start_weight == target_weight:
        return 100.0

    total_distance = abs(start_weight - target_weight)
    covered = abs(start_weight - current_weight)
    return min(100.0, covered / total_distance * 100)


def is_goal_complete(goal, current_weight: float) -> bool:
    if GoalDirection(goal.direction) == GoalDirection.loss:
        return current_weight <= goal.target_weight
    return current_weight >= goal.target_weight


def days_until(target: Union[date, datetime], now: Optional[datetime] = None) -> int:
    """Whole days left before `target`, rounded up. Negative means overdue."""
    if now is None:
        now = datetime.now()
    if not isinstance(target, datetime):
        target = datetime.combine(target, datetime.min.time())
    return math.ceil((target - now).total_seconds() / SECONDS_PER_DAY)


def weight_to_go(current_weight: float, target_weight: float) -> float:
    return abs(current_weight - target_weight)


def split_goals(goals: Sequence[G], current_weight: float) -> Tuple[List[G], List[G]]:
    """
    Partition goals for display.

    A goal can be in both lists: an active goal whose target has been reached
    is shown as active and as completed.
    """
    active = [g for g in goals if g.is_active]
    completed = [g for g in goals if not g.is_active or is_goal_complete(g, current_weight)]
    return active, completed
