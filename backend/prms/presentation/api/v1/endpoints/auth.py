"""Login, logout, session, profile and theme endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from prms.application.schemas import LoginRequest, ProfileSchema, SessionResponse, ThemeUpdate
from prms.application.services import ApplicationState
from prms.domain.entities import Actor
from prms.domain.exceptions import AuthenticationError
from prms.infrastructure.dependencies import get_app_state, get_current_actor

router = APIRouter(prefix="/auth", tags=["Auth"])


def _session_response(state: ApplicationState) -> SessionResponse:
    session = state.session
    return SessionResponse(
        is_authenticated=session.is_authenticated,
        role=session.role,
        username=session.username,
        theme=session.theme,
    )


@router.post("/login", response_model=SessionResponse)
async def login(
    data: LoginRequest,
    state: ApplicationState = Depends(get_app_state),
) -> SessionResponse:
    """Sign in with one of the configured credential pairs."""
    if not state.session.login(data.username, data.password):
        error = AuthenticationError(data.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error))
    return _session_response(state)


@router.post("/logout", response_model=SessionResponse)
async def logout(state: ApplicationState = Depends(get_app_state)) -> SessionResponse:
    """Sign out. Safe to call when already signed out."""
    state.session.logout()
    return _session_response(state)


@router.get("/session", response_model=SessionResponse)
async def get_session(state: ApplicationState = Depends(get_app_state)) -> SessionResponse:
    return _session_response(state)


@router.get("/profile", response_model=ProfileSchema)
async def get_profile(
    _: Actor = Depends(get_current_actor),
    state: ApplicationState = Depends(get_app_state),
) -> ProfileSchema:
    return ProfileSchema.model_validate(state.session.profile, from_attributes=True)


@router.put("/profile", response_model=ProfileSchema)
async def update_profile(
    data: ProfileSchema,
    _: Actor = Depends(get_current_actor),
    state: ApplicationState = Depends(get_app_state),
) -> ProfileSchema:
    state.session.update_profile(data.to_entity())
    return ProfileSchema.model_validate(state.session.profile, from_attributes=True)


@router.put("/theme", response_model=SessionResponse)
async def update_theme(
    data: ThemeUpdate,
    state: ApplicationState = Depends(get_app_state),
) -> SessionResponse:
    state.session.set_theme(data.dark)
    return _session_response(state)
