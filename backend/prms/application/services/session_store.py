"""Session store — authentication state, profile and theme with write-through persistence.

Persisted layout (all string values):
    isAuth       "true" | absent
    userRole     "Admin" | "Employee" | absent
    username     raw username | absent
    userProfile  base64(JSON(UserProfile))
    theme        "dark" | "light"
"""

import base64
import binascii
import json
import logging

from prms.application.interfaces import KeyValueStore
from prms.domain.entities import UserProfile, UserRole

logger = logging.getLogger(__name__)

KEY_IS_AUTH = "isAuth"
KEY_ROLE = "userRole"
KEY_USERNAME = "username"
KEY_PROFILE = "userProfile"
KEY_THEME = "theme"

SESSION_KEYS = (KEY_IS_AUTH, KEY_ROLE, KEY_USERNAME)

THEME_DARK = "dark"
THEME_LIGHT = "light"


def encode_profile(profile: UserProfile) -> str:
    raw = json.dumps(profile.to_dict()).encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


def decode_profile(encoded: str) -> UserProfile:
    """Decode a persisted profile. Raises ValueError on any malformed input."""
    try:
        raw = base64.b64decode(encoded, validate=True)
        data = json.loads(raw.decode("utf-8"))
        if not isinstance(data, dict):
            raise ValueError("profile payload is not an object")
        return UserProfile.from_dict(data)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError, KeyError, TypeError) as exc:
        raise ValueError(f"Malformed persisted profile: {exc}") from exc


class SessionStore:
    """Holds who is signed in, mirrored synchronously into a KeyValueStore.

    Every mutation updates memory and storage together; nothing is
    deferred.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        credentials: dict[str, tuple[str, UserRole]],
    ):
        self._storage = storage
        self._credentials = dict(credentials)
        self.is_authenticated = False
        self.role: UserRole | None = None
        self.username: str | None = None
        self.profile = UserProfile.default()
        self.theme = THEME_LIGHT
        self._rehydrate()

    # ── Lifecycle ───────────────────────────────────────────────────

    def _rehydrate(self) -> None:
        role_raw = self._storage.get(KEY_ROLE)
        role: UserRole | None = None
        if role_raw is not None:
            try:
                role = UserRole(role_raw)
            except ValueError:
                logger.warning("Ignoring unknown persisted role %r", role_raw)

        username = self._storage.get(KEY_USERNAME)
        if self._storage.get(KEY_IS_AUTH) == "true" and role is not None and username:
            self.is_authenticated = True
            self.role = role
            self.username = username
        elif any(self._storage.get(key) is not None for key in SESSION_KEYS):
            logger.warning("Discarding incomplete persisted session")
            self._remove_session_keys()

        saved_profile = self._storage.get(KEY_PROFILE)
        if saved_profile:
            try:
                self.profile = decode_profile(saved_profile)
            except ValueError as exc:
                logger.warning("Falling back to default profile: %s", exc)
                self.profile = UserProfile.default()
                self._storage.remove(KEY_PROFILE)

        self.theme = THEME_DARK if self._storage.get(KEY_THEME) == THEME_DARK else THEME_LIGHT

        if self.is_authenticated:
            logger.info("Restored session for '%s' (%s)", self.username, self.role.value)

    def clear(self) -> None:
        """Sign out and drop the saved profile."""
        self.logout()
        self.profile = UserProfile.default()
        self._storage.remove(KEY_PROFILE)

    # ── Authentication ──────────────────────────────────────────────

    def login(self, username: str, password: str) -> bool:
        """Accept one of the configured credential pairs.

        On failure nothing changes, in memory or in storage.
        """
        match = self._credentials.get(username)
        if match is None or match[0] != password:
            logger.warning("Rejected login for '%s'", username)
            return False

        role = match[1]
        self.is_authenticated = True
        self.role = role
        self.username = username
        self._storage.set(KEY_IS_AUTH, "true")
        self._storage.set(KEY_ROLE, role.value)
        self._storage.set(KEY_USERNAME, username)
        logger.info("'%s' signed in as %s", username, role.value)
        return True

    def logout(self) -> None:
        if self.is_authenticated:
            logger.info("'%s' signed out", self.username)
        self.is_authenticated = False
        self.role = None
        self.username = None
        self._remove_session_keys()

    def _remove_session_keys(self) -> None:
        for key in SESSION_KEYS:
            self._storage.remove(key)

    # ── Profile & preferences ───────────────────────────────────────

    def update_profile(self, profile: UserProfile) -> None:
        self.profile = profile
        self._storage.set(KEY_PROFILE, encode_profile(profile))
        logger.info("Profile updated for %s %s", profile.first_name, profile.last_name)

    def set_theme(self, dark: bool) -> None:
        self.theme = THEME_DARK if dark else THEME_LIGHT
        self._storage.set(KEY_THEME, self.theme)

    @property
    def performer(self) -> str:
        """Name recorded on activity entries: the role, or "System"."""
        return self.role.value if self.role is not None else "System"
