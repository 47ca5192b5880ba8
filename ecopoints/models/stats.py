"""Derived display models: statistics, reward status and dashboard snapshot"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .activity import Activity
from .user import User

NO_FAVORITE = "None yet"


class ActivityStats(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total: int = 0
    today: int = 0
    this_week: int = Field(default=0, alias="thisWeek")
    favorite: str = NO_FAVORITE


class RewardStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    reached: bool
    threshold: int
    points: int
    message: str = ""


class Dashboard(BaseModel):
    """Everything the dashboard view renders for the current user"""

    model_config = ConfigDict(frozen=True)

    user: User
    stats: ActivityStats
    recent_activities: List[Activity] = Field(default_factory=list)
    reward: RewardStatus
