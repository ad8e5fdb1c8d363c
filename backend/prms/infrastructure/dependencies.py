"""FastAPI dependency injection — hands the application state to the endpoints."""

from collections.abc import Callable

from fastapi import Depends, HTTPException, Request, status

from prms.application.services import ApplicationState
from prms.application.services.access_control import (
    require_actor,
    require_admin,
    require_permission,
)
from prms.domain.entities import Action, Actor, AdminActor, Module
from prms.domain.exceptions import NotAuthenticatedError, PermissionDeniedError


def get_app_state(request: Request) -> ApplicationState:
    """The ApplicationState built in the lifespan and stored on ``app.state``."""
    return request.app.state.prms


def get_current_actor(state: ApplicationState = Depends(get_app_state)) -> Actor:
    """The signed-in actor; 401 when no session is active."""
    try:
        return require_actor(state.current_actor())
    except NotAuthenticatedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


def permission_required(module: Module, action: Action) -> Callable[..., Actor]:
    """Dependency factory gating an endpoint on one module capability."""

    def _check(actor: Actor = Depends(get_current_actor)) -> Actor:
        try:
            return require_permission(actor, module, action)
        except PermissionDeniedError as e:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))

    return _check


def get_admin_actor(actor: Actor = Depends(get_current_actor)) -> AdminActor:
    try:
        return require_admin(actor)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
