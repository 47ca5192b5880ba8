"""
Per-user activity history.
Stored newest-first under the "activities" key and trimmed to the most
recent max_entries records on every append.
"""

from datetime import datetime
from typing import Dict, List, Optional, Union

from ..models.activity import ActionType, Activity
from ..models.user import normalize_email
from ..storage.base import ACTIVITIES_KEY, KeyValueStore
from ..utils.exceptions import StorageUnavailable
from ..utils.logger import get_logger

logger = get_logger(__name__)

MAX_ACTIVITIES = 100


class ActivityLog:
    """Bounded, newest-first activity sequences keyed by normalized email"""

    def __init__(self, store: KeyValueStore, max_entries: int = MAX_ACTIVITIES):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.store = store
        self.max_entries = max_entries

    def _load_all(self) -> Dict[str, List[dict]]:
        data = self.store.get(ACTIVITIES_KEY, {})
        if not isinstance(data, dict):
            raise StorageUnavailable(f"Stored '{ACTIVITIES_KEY}' is not a mapping", key=ACTIVITIES_KEY)
        return data

    def append(self, email: str, activity: Activity) -> None:
        data = self._load_all()
        key = normalize_email(email)
        entries = [activity.to_record()] + data.get(key, [])
        data[key] = entries[: self.max_entries]
        self.store.set(ACTIVITIES_KEY, data)
        if len(entries) > self.max_entries:
            logger.debug("Activity log trimmed", email=key, dropped=len(entries) - self.max_entries)

    def get_activities(self, email: str) -> List[Activity]:
        entries = self._load_all().get(normalize_email(email), [])
        return [Activity.model_validate(entry) for entry in entries]

    def log_action(
        self, email: str, action: Union[ActionType, str], timestamp: Optional[datetime] = None
    ) -> Activity:
        """Record a catalog action for a user and return the new activity"""
        activity = Activity.for_action(action, timestamp=timestamp)
        self.append(email, activity)
        logger.info(
            "Activity logged",
            email=normalize_email(email),
            action=activity.action.value,
            points=activity.points,
        )
        return activity
