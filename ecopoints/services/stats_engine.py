"""
Aggregate statistics over a user's retained activities.

Nothing here is cached or stored: stats are recomputed from the
activity log on every call. Because the log keeps only the most recent
entries, ``total`` counts retained activities rather than every action
ever logged, and can fall behind the user's EcoPoints history.
"""

from datetime import datetime
from typing import Dict, Iterable, Optional

from ..models.activity import Activity
from ..models.stats import NO_FAVORITE, ActivityStats
from ..utils.timeutils import start_of_day, start_of_rolling_week
from .activity_log import ActivityLog


def favorite_label(activities: Iterable[Activity]) -> str:
    """
    Most frequent label. On a tie the label seen first while iterating
    (newest-first for a stored log) wins.
    """
    counts: Dict[str, int] = {}
    for activity in activities:
        counts[activity.label] = counts.get(activity.label, 0) + 1

    favorite, best = NO_FAVORITE, 0
    for label, count in counts.items():
        if count > best:
            favorite, best = label, count
    return favorite


def compute_stats(activities: Iterable[Activity], now: Optional[datetime] = None) -> ActivityStats:
    activities = list(activities)
    today_start = start_of_day(now)
    week_start = start_of_rolling_week(now)

    return ActivityStats(
        total=len(activities),
        today=sum(1 for a in activities if a.timestamp >= today_start),
        this_week=sum(1 for a in activities if a.timestamp >= week_start),
        favorite=favorite_label(activities),
    )


class StatsEngine:
    """Computes stats from an ActivityLog at call time"""

    def __init__(self, activity_log: ActivityLog):
        self.activity_log = activity_log

    def get_stats(self, email: str, now: Optional[datetime] = None) -> ActivityStats:
        return compute_stats(self.activity_log.get_activities(email), now=now)
