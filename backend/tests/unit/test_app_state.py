"""Unit tests for ApplicationState wiring between the session and the domain store."""

from prms.application.services import ApplicationState
from prms.config import Settings
from prms.domain.entities import (
    AdminActor,
    Employee,
    EmployeeActor,
    ModulePermissions,
    Permissions,
    Room,
    UserProfile,
)
from prms.infrastructure.storage import InMemoryKeyValueStore


def _state(storage: InMemoryKeyValueStore | None = None) -> ApplicationState:
    return ApplicationState.load_from_persistence(
        storage or InMemoryKeyValueStore(), Settings(_env_file=None)
    )


def test_fresh_state_is_signed_out_and_empty():
    state = _state()

    assert state.current_actor() is None
    assert state.store.rooms == ()
    assert state.store.notifications == ()


def test_notifications_record_the_signed_in_role():
    state = _state()
    state.session.login("admin", "772012")

    state.store.add_room(Room(room_number="101"))

    assert state.current_actor() == AdminActor(username="admin")
    assert state.store.notifications[0].performer == "Admin"


def test_actions_while_signed_out_are_attributed_to_system():
    state = _state()
    state.store.add_room(Room(room_number="101"))
    assert state.store.notifications[0].performer == "System"


def test_employee_actor_comes_from_matching_record():
    state = _state()
    state.session.login("employee", "123")

    assert state.current_actor().permissions == Permissions.none()

    state.store.add_employee(
        Employee(
            username="employee",
            name="Eve",
            permissions=Permissions(rooms=ModulePermissions(view=True, edit=True)),
            assigned_room_ids=["r1"],
        )
    )
    actor = state.current_actor()

    assert isinstance(actor, EmployeeActor)
    assert actor.permissions.rooms.edit is True
    assert actor.assigned_room_ids == ("r1",)


def test_session_survives_reload_but_domain_data_does_not():
    storage = InMemoryKeyValueStore()
    first = _state(storage)
    first.session.login("admin", "772012")
    first.store.add_room(Room(room_number="101"))

    second = _state(storage)

    assert second.session.is_authenticated is True
    assert second.current_actor() == AdminActor(username="admin")
    assert second.store.rooms == ()


def test_clear_signs_out_and_empties_store():
    storage = InMemoryKeyValueStore()
    state = _state(storage)
    state.session.login("admin", "772012")
    state.store.add_room(Room(room_number="101"))

    state.clear()

    assert state.current_actor() is None
    assert state.store.rooms == ()
    assert storage.get("isAuth") is None


def test_profile_after_clear_matches_reloaded_state():
    storage = InMemoryKeyValueStore()
    state = _state(storage)
    state.session.login("admin", "772012")
    state.session.update_profile(UserProfile("Jane", "Doe", "jane@example.com", "1", ""))

    state.clear()
    reloaded = _state(storage)

    assert reloaded.session.profile == state.session.profile == UserProfile.default()
    assert reloaded.session.is_authenticated is False
