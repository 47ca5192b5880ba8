"""Reward milestone check shown on the dashboard"""

from ..models.stats import RewardStatus
from ..models.user import User

REWARD_THRESHOLD = 100


def reward_status(user: User, threshold: int = REWARD_THRESHOLD) -> RewardStatus:
    reached = user.eco_points >= threshold
    message = ""
    if reached:
        message = (
            f"Congratulations, {user.name}! You've reached {threshold}+ EcoPoints! "
            "Keep up the amazing work!"
        )
    return RewardStatus(reached=reached, threshold=threshold, points=user.eco_points, message=message)
