"""Unit tests for the SessionStore — login, logout, profile and rehydration."""

import base64
import json

import pytest

from prms.application.services.session_store import (
    KEY_IS_AUTH,
    KEY_PROFILE,
    KEY_ROLE,
    KEY_THEME,
    KEY_USERNAME,
    SessionStore,
    decode_profile,
    encode_profile,
)
from prms.domain.entities import UserProfile, UserRole
from prms.infrastructure.storage import InMemoryKeyValueStore

CREDENTIALS = {
    "admin": ("772012", UserRole.ADMIN),
    "employee": ("123", UserRole.EMPLOYEE),
}


@pytest.fixture
def storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def session(storage: InMemoryKeyValueStore) -> SessionStore:
    return SessionStore(storage, CREDENTIALS)


def test_fresh_session_is_signed_out_with_default_profile(session: SessionStore):
    assert session.is_authenticated is False
    assert session.role is None
    assert session.username is None
    assert session.profile == UserProfile.default()
    assert session.theme == "light"


def test_admin_login_sets_and_persists_session(session: SessionStore, storage):
    assert session.login("admin", "772012") is True
    assert session.is_authenticated is True
    assert session.role is UserRole.ADMIN
    assert session.username == "admin"
    assert storage.get(KEY_IS_AUTH) == "true"
    assert storage.get(KEY_ROLE) == "Admin"
    assert storage.get(KEY_USERNAME) == "admin"


def test_employee_login_sets_employee_role(session: SessionStore, storage):
    assert session.login("employee", "123") is True
    assert session.role is UserRole.EMPLOYEE
    assert storage.get(KEY_ROLE) == "Employee"


@pytest.mark.parametrize(
    "username,password",
    [("admin", "123"), ("employee", "772012"), ("root", "772012"), ("", "")],
)
def test_rejected_login_leaves_state_unchanged(session: SessionStore, storage, username, password):
    session.login("employee", "123")
    before = dict((k, storage.get(k)) for k in storage.keys())

    assert session.login(username, password) is False
    assert session.role is UserRole.EMPLOYEE
    assert session.username == "employee"
    assert dict((k, storage.get(k)) for k in storage.keys()) == before


def test_logout_removes_persisted_session_keys(session: SessionStore, storage):
    session.login("admin", "772012")
    session.logout()

    assert session.is_authenticated is False
    assert session.role is None
    assert session.username is None
    for key in (KEY_IS_AUTH, KEY_ROLE, KEY_USERNAME):
        assert storage.get(key) is None


def test_logout_is_idempotent(session: SessionStore, storage):
    session.logout()
    session.logout()
    assert session.is_authenticated is False
    assert storage.keys() == []


def test_session_is_rehydrated_from_storage(storage):
    SessionStore(storage, CREDENTIALS).login("admin", "772012")

    restored = SessionStore(storage, CREDENTIALS)
    assert restored.is_authenticated is True
    assert restored.role is UserRole.ADMIN
    assert restored.username == "admin"


def test_unknown_persisted_role_is_treated_as_signed_out():
    storage = InMemoryKeyValueStore({KEY_IS_AUTH: "true", KEY_ROLE: "Owner", KEY_USERNAME: "x"})
    session = SessionStore(storage, CREDENTIALS)
    assert session.is_authenticated is False
    assert session.role is None
    assert storage.keys() == []


@pytest.mark.parametrize(
    "persisted",
    [
        {KEY_IS_AUTH: "true", KEY_USERNAME: "admin"},
        {KEY_IS_AUTH: "true", KEY_ROLE: "Admin"},
        {KEY_ROLE: "Admin", KEY_USERNAME: "admin"},
    ],
)
def test_incomplete_persisted_session_is_discarded(persisted):
    storage = InMemoryKeyValueStore({**persisted, KEY_THEME: "dark"})

    session = SessionStore(storage, CREDENTIALS)

    assert session.is_authenticated is False
    assert storage.keys() == [KEY_THEME]


def test_update_profile_persists_base64_json(session: SessionStore, storage):
    profile = UserProfile(
        first_name="Sara",
        last_name="Khan",
        email="sara@example.com",
        phone="+971 50 123 4567",
        photo="data:image/png;base64,AAAA",
    )
    session.update_profile(profile)

    assert session.profile == profile
    decoded = json.loads(base64.b64decode(storage.get(KEY_PROFILE)))
    assert decoded == {
        "firstName": "Sara",
        "lastName": "Khan",
        "email": "sara@example.com",
        "phone": "+971 50 123 4567",
        "photo": "data:image/png;base64,AAAA",
    }
    assert SessionStore(storage, CREDENTIALS).profile == profile


@pytest.mark.parametrize(
    "stored",
    [
        "not base64 !!",
        base64.b64encode(b"{broken json").decode(),
        base64.b64encode(b'["a list"]').decode(),
        base64.b64encode(b'{"firstName": "only"}').decode(),
    ],
)
def test_corrupt_profile_falls_back_to_default(stored: str):
    storage = InMemoryKeyValueStore({KEY_PROFILE: stored})
    session = SessionStore(storage, CREDENTIALS)
    assert session.profile == UserProfile.default()
    assert storage.get(KEY_PROFILE) is None


def test_decode_profile_raises_value_error_on_garbage():
    with pytest.raises(ValueError):
        decode_profile("%%%")


def test_encode_decode_profile():
    profile = UserProfile.default()
    assert decode_profile(encode_profile(profile)) == profile


def test_theme_is_written_through(session: SessionStore, storage):
    session.set_theme(True)
    assert session.theme == "dark"
    assert storage.get(KEY_THEME) == "dark"
    assert SessionStore(storage, CREDENTIALS).theme == "dark"

    session.set_theme(False)
    assert storage.get(KEY_THEME) == "light"


def test_performer_follows_role(session: SessionStore):
    assert session.performer == "System"
    session.login("employee", "123")
    assert session.performer == "Employee"


def test_clear_signs_out_and_resets_profile_everywhere(session: SessionStore, storage):
    session.login("admin", "772012")
    session.update_profile(UserProfile("A", "B", "c@d.e", "1", "p"))

    session.clear()

    assert session.is_authenticated is False
    assert session.profile == UserProfile.default()
    assert storage.get(KEY_PROFILE) is None
    assert SessionStore(storage, CREDENTIALS).profile == session.profile
