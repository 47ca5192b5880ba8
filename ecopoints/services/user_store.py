"""
User storage service.
Records live under the "users" key as a mapping of normalized email to
the persisted user record. save() is the only write path.
"""

from typing import Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from ..auth.passwords import DEFAULT_ROUNDS, hash_password, verify_password
from ..models.user import User, canonical_email, normalize_email
from ..storage.base import USERS_KEY, KeyValueStore
from ..utils.exceptions import AlreadyExists, NotFound, StorageUnavailable, ValidationError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class UserStore:
    """User records keyed by normalized email"""

    def __init__(self, store: KeyValueStore, bcrypt_rounds: int = DEFAULT_ROUNDS):
        self.store = store
        self.bcrypt_rounds = bcrypt_rounds

    def _load_records(self) -> Dict[str, dict]:
        records = self.store.get(USERS_KEY, {})
        if not isinstance(records, dict):
            raise StorageUnavailable(f"Stored '{USERS_KEY}' is not a mapping", key=USERS_KEY)
        return records

    def create_user(self, name: str, email: str, password: str) -> User:
        """Create a new user with zero EcoPoints"""
        try:
            key = canonical_email(email)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid email: {e.errors()[0]['msg']}", field="email")
        if self.exists(key):
            raise AlreadyExists(f"Email '{key}' is already registered", email=key)

        try:
            user = User(
                name=name,
                email=key,
                password_hash=hash_password(password, rounds=self.bcrypt_rounds),
            )
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid user data: {e.errors()[0]['msg']}")

        self.save(user)
        logger.info("User created", email=user.email)
        return user

    def find_by_email(self, email: str) -> Optional[User]:
        record = self._load_records().get(normalize_email(email))
        if record is None:
            return None
        return User.model_validate(record)

    def exists(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def save(self, user: User) -> None:
        """Overwrite the record for user.email"""
        records = self._load_records()
        records[user.email] = user.to_record()
        self.store.set(USERS_KEY, records)

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the user if the password matches the stored hash, else None"""
        user = self.find_by_email(email)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    def add_points(self, email: str, points: int) -> User:
        """Add EcoPoints to a user (read-modify-write, not atomic across writers)"""
        if points <= 0:
            raise ValidationError("Points to add must be positive", field="points")
        user = self.find_by_email(email)
        if not user:
            raise NotFound(f"No user registered with email '{normalize_email(email)}'")
        updated = user.model_copy(update={"eco_points": user.eco_points + points})
        self.save(updated)
        logger.info("EcoPoints added", email=updated.email, points=points, total=updated.eco_points)
        return updated
