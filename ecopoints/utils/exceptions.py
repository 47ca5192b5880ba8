"""Custom exceptions for the EcoPoints data layer"""

from typing import Optional


class EcoPointsError(Exception):
    """Base exception for EcoPoints"""
    pass


class ValidationError(EcoPointsError):
    """Missing or malformed input"""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class AlreadyExists(EcoPointsError):
    """A record with the same identity key already exists"""

    def __init__(self, message: str, email: Optional[str] = None):
        self.email = email
        super().__init__(message)


class NotFound(EcoPointsError):
    """An operation required a record that does not exist"""
    pass


class AuthFailure(EcoPointsError):
    """Credential mismatch or no active session"""
    pass


class StorageUnavailable(EcoPointsError):
    """Backing key-value store cannot be read or written"""

    def __init__(self, message: str, key: Optional[str] = None):
        self.key = key
        super().__init__(message)


class ConfigError(EcoPointsError):
    """Configuration error"""
    pass
