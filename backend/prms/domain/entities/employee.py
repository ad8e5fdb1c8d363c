"""Domain entity for employee accounts."""

from dataclasses import dataclass, field
from enum import Enum

from .permissions import Permissions


class UserRole(str, Enum):
    ADMIN = "Admin"
    EMPLOYEE = "Employee"


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"

    def toggled(self) -> "EmployeeStatus":
        if self is EmployeeStatus.ACTIVE:
            return EmployeeStatus.INACTIVE
        return EmployeeStatus.ACTIVE


@dataclass
class Employee:
    """A system account with per-module permissions.

    ``assigned_room_ids`` may reference rooms that no longer exist; such
    ids are kept as-is and shown unresolved.
    """

    username: str
    name: str
    email: str = ""
    password: str | None = None
    role: UserRole = UserRole.EMPLOYEE
    permissions: Permissions = field(default_factory=Permissions)
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    assigned_room_ids: list[str] = field(default_factory=list)
    id: str = ""
