"""Domain entity for tenants."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class TenantStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


@dataclass
class Tenant:
    """A person renting a room.

    ``room`` is the room *label* (its number), not a room id.
    """

    name: str
    room: str
    phone: str = ""
    move_in_date: date | None = None
    status: TenantStatus = TenantStatus.ACTIVE
    id: str = ""
