# WeightWise Database Models
from weightwise.models.user import User
from weightwise.models.weight_entry import WeightEntry
from weightwise.models.goal import Goal

__all__ = [
    "User",
    "WeightEntry",
    "Goal",
]
