"""Domain entity for activity-log notifications."""

from dataclasses import dataclass
from enum import Enum


class NotificationType(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SUCCESS = "success"


@dataclass(frozen=True)
class AppNotification:
    """One human-readable activity entry.

    ``performer`` is the acting role name, or ``"System"`` when no
    session is active. ``timestamp`` is a display string.
    """

    id: str
    type: NotificationType
    message: str
    performer: str
    timestamp: str
