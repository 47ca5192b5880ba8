"""Tests for reward milestone status"""

from ecopoints.models.user import User
from ecopoints.services.rewards import REWARD_THRESHOLD, reward_status


def _user(points):
    return User(name="Ana", email="ana@x.com", password_hash="x", eco_points=points)


def test_below_threshold():
    status = reward_status(_user(REWARD_THRESHOLD - 1))
    assert status.reached is False
    assert status.message == ""
    assert status.points == 99


def test_reached_at_exact_threshold():
    status = reward_status(_user(100))
    assert status.reached is True
    assert status.threshold == 100
    assert "Congratulations, Ana!" in status.message
    assert "100+ EcoPoints" in status.message


def test_custom_threshold():
    assert reward_status(_user(30), threshold=25).reached is True
    assert reward_status(_user(30), threshold=50).reached is False
