"""Single current-user session reference"""

from typing import Optional

from ..models.user import User, normalize_email
from ..storage.base import CURRENT_USER_KEY, KeyValueStore
from ..utils.logger import get_logger
from .user_store import UserStore

logger = get_logger(__name__)


class SessionStore:
    """
    Tracks at most one current email under the "currentUser" key.
    Never writes user records.
    """

    def __init__(self, store: KeyValueStore, user_store: UserStore):
        self.store = store
        self.user_store = user_store

    def set_current(self, email: str) -> None:
        key = normalize_email(email)
        if self.current_email() == key:
            return
        self.store.set(CURRENT_USER_KEY, key)
        logger.info("Session started", email=key)

    def current_email(self) -> Optional[str]:
        email = self.store.get(CURRENT_USER_KEY)
        return email if isinstance(email, str) and email else None

    def get_current(self) -> Optional[User]:
        """Resolve the current email; None if no session or the user is gone"""
        email = self.current_email()
        if email is None:
            return None
        return self.user_store.find_by_email(email)

    def clear_current(self) -> None:
        email = self.current_email()
        self.store.delete(CURRENT_USER_KEY)
        if email:
            logger.info("Session cleared", email=email)
