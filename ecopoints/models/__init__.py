from .activity import ACTION_CATALOG, ActionSpec, ActionType, Activity
from .stats import NO_FAVORITE, ActivityStats, Dashboard, RewardStatus
from .user import User, canonical_email, normalize_email

__all__ = [
    "ACTION_CATALOG",
    "ActionSpec",
    "ActionType",
    "Activity",
    "ActivityStats",
    "Dashboard",
    "NO_FAVORITE",
    "RewardStatus",
    "User",
    "canonical_email",
    "normalize_email",
]
