"""Permission model — who may see or change what.

Admins bypass every check. Employees are limited by their per-module
flags and, for actions on a specific room, by their assigned room list.
These predicates are consulted by call sites; the domain store itself
does not enforce them.
"""

from prms.domain.entities import (
    Action,
    Actor,
    AdminActor,
    Employee,
    EmployeeActor,
    Module,
    Permissions,
    UserRole,
)
from prms.domain.exceptions import NotAuthenticatedError, PermissionDeniedError


def resolve_actor(
    role: UserRole | None,
    username: str | None,
    employees: tuple[Employee, ...] | list[Employee],
) -> Actor | None:
    """Build the acting user for a session, or None when signed out.

    An employee session with no matching employee record gets no
    permissions at all.
    """
    if role is None or username is None:
        return None
    if role is UserRole.ADMIN:
        return AdminActor(username=username)

    record = next((e for e in employees if e.username == username), None)
    if record is None:
        return EmployeeActor(username=username, permissions=Permissions.none())
    return EmployeeActor(
        username=username,
        permissions=record.permissions,
        assigned_room_ids=tuple(record.assigned_room_ids),
    )


def can_perform(actor: Actor | None, module: Module, action: Action) -> bool:
    if actor is None:
        return False
    if isinstance(actor, AdminActor):
        return True
    return actor.permissions.allows(module, action)


def is_room_accessible(actor: Actor | None, room_id: str) -> bool:
    if actor is None:
        return False
    if isinstance(actor, AdminActor):
        return True
    return room_id in actor.assigned_room_ids


def can_act_on_room(actor: Actor | None, room_id: str, action: Action) -> bool:
    """Module permission AND room assignment, for edit/delete of one room."""
    return can_perform(actor, Module.ROOMS, action) and is_room_accessible(actor, room_id)


def require_actor(actor: Actor | None) -> Actor:
    if actor is None:
        raise NotAuthenticatedError()
    return actor


def require_permission(actor: Actor | None, module: Module, action: Action) -> Actor:
    actor = require_actor(actor)
    if not can_perform(actor, module, action):
        raise PermissionDeniedError(module.value, action.value)
    return actor


def require_room_action(actor: Actor | None, room_id: str, action: Action) -> Actor:
    actor = require_actor(actor)
    if not can_act_on_room(actor, room_id, action):
        raise PermissionDeniedError(Module.ROOMS.value, action.value, room_id)
    return actor


def require_admin(actor: Actor | None) -> AdminActor:
    actor = require_actor(actor)
    if not isinstance(actor, AdminActor):
        raise PermissionDeniedError("employees", "manage")
    return actor
