"""Application facade the view layer calls into"""

from datetime import datetime
from typing import List, Optional, Union

from .auth.validation import validate_login, validate_signup
from .models.activity import ActionType, Activity
from .models.stats import ActivityStats, Dashboard, RewardStatus
from .models.user import User
from .services.activity_log import ActivityLog
from .services.rewards import reward_status
from .services.session_store import SessionStore
from .services.stats_engine import StatsEngine, compute_stats
from .services.user_store import UserStore
from .storage import KeyValueStore, create_store
from .utils.config import Settings, load_settings
from .utils.exceptions import AuthFailure
from .utils.logger import get_logger, setup_logger

logger = get_logger(__name__)

RECENT_ACTIVITY_LIMIT = 5


class EcoPointsApp:
    """Wires the stores over one key-value backend and exposes the user flows"""

    def __init__(self, settings: Optional[Settings] = None, store: Optional[KeyValueStore] = None):
        self.settings = settings or Settings()
        self.store = store if store is not None else create_store(self.settings.storage)
        self.users = UserStore(self.store, bcrypt_rounds=self.settings.security.bcrypt_rounds)
        self.sessions = SessionStore(self.store, self.users)
        self.activity_log = ActivityLog(self.store, max_entries=self.settings.tracker.max_activities)
        self.stats_engine = StatsEngine(self.activity_log)

    @classmethod
    def from_config(cls, config_path: Optional[str] = None) -> "EcoPointsApp":
        """Load settings, set up logging and build the app"""
        settings = load_settings(config_path)
        setup_logger(
            log_level=settings.logging.level,
            log_format=settings.logging.format,
            file_path=settings.logging.file_path,
            max_bytes=settings.logging.max_bytes,
            backup_count=settings.logging.backup_count,
        )
        logger.info(
            "Configuration loaded",
            app_name=settings.app.name,
            version=settings.app.version,
            environment=settings.app.environment,
            backend=settings.storage.backend,
        )
        return cls(settings)

    def sign_up(self, name: str, email: str, password: str) -> User:
        """Register a new user. Does not start a session."""
        name, email, password = validate_signup(name, email, password)
        return self.users.create_user(name, email, password)

    def log_in(self, email: str, password: str) -> User:
        email, password = validate_login(email, password)
        user = self.users.authenticate(email, password)
        if not user:
            logger.info("Login failed", email=email)
            raise AuthFailure("Invalid email or password")
        self.sessions.set_current(user.email)
        return user

    def log_out(self) -> None:
        self.sessions.clear_current()

    def current_user(self) -> Optional[User]:
        return self.sessions.get_current()

    def _require_user(self) -> User:
        user = self.sessions.get_current()
        if not user:
            raise AuthFailure("No user is logged in")
        return user

    def log_action(self, action: Union[ActionType, str], timestamp: Optional[datetime] = None) -> User:
        """Log an eco action for the current user and credit its points"""
        user = self._require_user()
        activity = self.activity_log.log_action(user.email, action, timestamp=timestamp)
        return self.users.add_points(user.email, activity.points)

    def activities(self) -> List[Activity]:
        return self.activity_log.get_activities(self._require_user().email)

    def stats(self, now: Optional[datetime] = None) -> ActivityStats:
        return self.stats_engine.get_stats(self._require_user().email, now=now)

    def reward_status(self) -> RewardStatus:
        return reward_status(self._require_user(), threshold=self.settings.tracker.reward_threshold)

    def dashboard(self, now: Optional[datetime] = None) -> Dashboard:
        user = self._require_user()
        activities = self.activity_log.get_activities(user.email)
        return Dashboard(
            user=user,
            stats=compute_stats(activities, now=now),
            recent_activities=activities[:RECENT_ACTIVITY_LIMIT],
            reward=reward_status(user, threshold=self.settings.tracker.reward_threshold),
        )
