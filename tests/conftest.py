import logging

import pytest
import structlog

from ecopoints.services.activity_log import ActivityLog
from ecopoints.services.session_store import SessionStore
from ecopoints.services.stats_engine import StatsEngine
from ecopoints.services.user_store import UserStore
from ecopoints.storage import MemoryKeyValueStore

# Lowest cost bcrypt accepts; keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep config lookups and env overrides away from the real workspace."""
    monkeypatch.chdir(tmp_path)
    for var in ("ECOPOINTS_CONFIG", "ECOPOINTS_DATA_DIR", "ECOPOINTS_LOG_LEVEL", "ECOPOINTS_ENV"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def kv():
    return MemoryKeyValueStore()


@pytest.fixture
def user_store(kv):
    return UserStore(kv, bcrypt_rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def session_store(kv, user_store):
    return SessionStore(kv, user_store)


@pytest.fixture
def activity_log(kv):
    return ActivityLog(kv)


@pytest.fixture
def stats_engine(activity_log):
    return StatsEngine(activity_log)


@pytest.fixture
def reset_logging():
    """Undo setup_logger() so handlers don't leak into later tests."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    structlog.reset_defaults()
