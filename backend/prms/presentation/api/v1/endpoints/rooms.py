"""Room endpoints — listing is scoped to the actor, edits need room assignment."""

from fastapi import APIRouter, Depends, HTTPException, status

from prms.application.schemas import RoomResponse, RoomWrite
from prms.application.services import ApplicationState
from prms.application.services.access_control import require_room_action
from prms.application.services.views import role_scoped_rooms
from prms.domain.entities import Action, Actor, Module
from prms.domain.exceptions import EntityNotFoundError, PermissionDeniedError
from prms.infrastructure.dependencies import (
    get_app_state,
    get_current_actor,
    permission_required,
)

router = APIRouter(prefix="/rooms", tags=["Rooms"])


def _authorize_room(state: ApplicationState, actor: Actor, room_id: str, action: Action) -> None:
    """404 for unknown rooms, 403 when the actor may not touch this one."""
    try:
        if state.store.get_room(room_id) is None:
            raise EntityNotFoundError("Room", room_id)
        require_room_action(actor, room_id, action)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))


@router.get("", response_model=list[RoomResponse])
async def list_rooms(
    actor: Actor = Depends(get_current_actor),
    state: ApplicationState = Depends(get_app_state),
) -> list[RoomResponse]:
    """Rooms visible to the signed-in user."""
    rooms = role_scoped_rooms(state.store.rooms, actor)
    return [RoomResponse.model_validate(r, from_attributes=True) for r in rooms]


@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(
    room_id: str,
    actor: Actor = Depends(get_current_actor),
    state: ApplicationState = Depends(get_app_state),
) -> RoomResponse:
    room = next((r for r in role_scoped_rooms(state.store.rooms, actor) if r.id == room_id), None)
    if room is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Room", room_id)),
        )
    return RoomResponse.model_validate(room, from_attributes=True)


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
async def create_room(
    data: RoomWrite,
    _: Actor = Depends(permission_required(Module.ROOMS, Action.ADD)),
    state: ApplicationState = Depends(get_app_state),
) -> RoomResponse:
    room = state.store.add_room(data.to_entity())
    return RoomResponse.model_validate(room, from_attributes=True)


@router.put("/{room_id}", response_model=RoomResponse)
async def update_room(
    room_id: str,
    data: RoomWrite,
    actor: Actor = Depends(get_current_actor),
    state: ApplicationState = Depends(get_app_state),
) -> RoomResponse:
    """Replace a room. Changing status drops the old status's detail block."""
    _authorize_room(state, actor, room_id, Action.EDIT)
    state.store.update_room(data.to_entity(room_id))
    return RoomResponse.model_validate(state.store.get_room(room_id), from_attributes=True)


@router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_room(
    room_id: str,
    actor: Actor = Depends(get_current_actor),
    state: ApplicationState = Depends(get_app_state),
) -> None:
    _authorize_room(state, actor, room_id, Action.DELETE)
    state.store.delete_room(room_id)
