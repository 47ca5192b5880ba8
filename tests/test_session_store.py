"""Tests for SessionStore"""


def test_no_session_by_default(session_store):
    assert session_store.get_current() is None
    assert session_store.current_email() is None


def test_set_and_get_current(session_store, user_store):
    user = user_store.create_user("Ana", "ana@x.com", "secret1")
    session_store.set_current("ANA@x.com")
    assert session_store.current_email() == "ana@x.com"
    assert session_store.get_current() == user


def test_set_current_is_idempotent(session_store, user_store):
    user_store.create_user("Ana", "ana@x.com", "secret1")
    session_store.set_current("ana@x.com")
    session_store.set_current("ana@x.com")
    assert session_store.current_email() == "ana@x.com"


def test_only_one_session(session_store, user_store):
    user_store.create_user("Ana", "ana@x.com", "secret1")
    bo = user_store.create_user("Bo", "bo@x.com", "secret2")
    session_store.set_current("ana@x.com")
    session_store.set_current("bo@x.com")
    assert session_store.get_current() == bo


def test_clear_current(session_store, user_store):
    user_store.create_user("Ana", "ana@x.com", "secret1")
    session_store.set_current("ana@x.com")
    session_store.clear_current()
    assert session_store.get_current() is None
    # clearing twice is harmless
    session_store.clear_current()
    assert session_store.current_email() is None


def test_session_for_missing_user_resolves_to_none(session_store):
    session_store.set_current("ghost@x.com")
    assert session_store.current_email() == "ghost@x.com"
    assert session_store.get_current() is None


def test_session_does_not_touch_user_records(session_store, user_store, kv):
    user_store.create_user("Ana", "ana@x.com", "secret1")
    before = kv.get("users")
    session_store.set_current("ana@x.com")
    session_store.clear_current()
    assert kv.get("users") == before
