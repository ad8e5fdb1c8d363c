"""Per-module capability flags and the acting-user variants built on them."""

from dataclasses import dataclass, field
from enum import Enum


class Module(str, Enum):
    """Data modules used as the unit of permission granularity."""

    ROOMS = "rooms"
    TENANTS = "tenants"
    PAYMENTS = "payments"
    EXPENSES = "expenses"


class Action(str, Enum):
    """Capabilities that can be granted per module."""

    VIEW = "view"
    ADD = "add"
    EDIT = "edit"
    DELETE = "delete"


@dataclass
class ModulePermissions:
    """Independent view/add/edit/delete flags for one module."""

    view: bool = False
    add: bool = False
    edit: bool = False
    delete: bool = False

    def allows(self, action: Action) -> bool:
        return bool(getattr(self, action.value))


def _view_only() -> ModulePermissions:
    return ModulePermissions(view=True)


@dataclass
class Permissions:
    """Capability flags for all four modules.

    A bare ``Permissions()`` is the default grant for a new employee:
    view everywhere, nothing else.
    """

    rooms: ModulePermissions = field(default_factory=_view_only)
    tenants: ModulePermissions = field(default_factory=_view_only)
    payments: ModulePermissions = field(default_factory=_view_only)
    expenses: ModulePermissions = field(default_factory=_view_only)

    @classmethod
    def default(cls) -> "Permissions":
        return cls()

    @classmethod
    def none(cls) -> "Permissions":
        return cls(
            rooms=ModulePermissions(),
            tenants=ModulePermissions(),
            payments=ModulePermissions(),
            expenses=ModulePermissions(),
        )

    def for_module(self, module: Module) -> ModulePermissions:
        return getattr(self, module.value)

    def allows(self, module: Module, action: Action) -> bool:
        return self.for_module(module).allows(action)


@dataclass(frozen=True)
class AdminActor:
    """Acting user with unconditional access to every module."""

    username: str


@dataclass(frozen=True)
class EmployeeActor:
    """Acting user constrained by module permissions and assigned rooms."""

    username: str
    permissions: Permissions
    assigned_room_ids: tuple[str, ...] = ()


Actor = AdminActor | EmployeeActor
