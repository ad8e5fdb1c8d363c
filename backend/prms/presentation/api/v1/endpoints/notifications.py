"""Activity log endpoints — list and dismiss."""

from fastapi import APIRouter, Depends, HTTPException, status

from prms.application.schemas import BulkResult, NotificationResponse
from prms.application.services import ApplicationState
from prms.domain.entities import Actor
from prms.domain.exceptions import EntityNotFoundError
from prms.infrastructure.dependencies import get_app_state, get_current_actor

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    _: Actor = Depends(get_current_actor),
    state: ApplicationState = Depends(get_app_state),
) -> list[NotificationResponse]:
    """Newest first."""
    return [
        NotificationResponse.model_validate(n, from_attributes=True)
        for n in state.store.notifications
    ]


@router.delete("", response_model=BulkResult)
async def clear_all_notifications(
    _: Actor = Depends(get_current_actor),
    state: ApplicationState = Depends(get_app_state),
) -> BulkResult:
    return BulkResult(affected=state.store.clear_all_notifications())


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def clear_notification(
    notification_id: str,
    _: Actor = Depends(get_current_actor),
    state: ApplicationState = Depends(get_app_state),
) -> None:
    if not state.store.clear_notification(notification_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Notification", notification_id)),
        )
