"""Payment endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from prms.application.schemas import PaymentResponse, PaymentWrite
from prms.application.services import ApplicationState
from prms.domain.entities import Action, Actor, Module
from prms.domain.exceptions import EntityNotFoundError
from prms.infrastructure.dependencies import get_app_state, permission_required

router = APIRouter(prefix="/payments", tags=["Payments"])


def _room_for(state: ApplicationState, data: PaymentWrite) -> str:
    """Explicit room label, else the named tenant's room, else "N/A"."""
    if data.room:
        return data.room
    tenant = next((t for t in state.store.tenants if t.name == data.tenant), None)
    return tenant.room if tenant else "N/A"


@router.get("", response_model=list[PaymentResponse])
async def list_payments(
    _: Actor = Depends(permission_required(Module.PAYMENTS, Action.VIEW)),
    state: ApplicationState = Depends(get_app_state),
) -> list[PaymentResponse]:
    return [PaymentResponse.model_validate(p, from_attributes=True) for p in state.store.payments]


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
async def create_payment(
    data: PaymentWrite,
    _: Actor = Depends(permission_required(Module.PAYMENTS, Action.ADD)),
    state: ApplicationState = Depends(get_app_state),
) -> PaymentResponse:
    payment = state.store.add_payment(data.to_entity(_room_for(state, data)))
    return PaymentResponse.model_validate(payment, from_attributes=True)


@router.put("/{payment_id}", response_model=PaymentResponse)
async def update_payment(
    payment_id: str,
    data: PaymentWrite,
    _: Actor = Depends(permission_required(Module.PAYMENTS, Action.EDIT)),
    state: ApplicationState = Depends(get_app_state),
) -> PaymentResponse:
    payment = data.to_entity(_room_for(state, data), payment_id)
    if not state.store.update_payment(payment):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Payment", payment_id)),
        )
    return PaymentResponse.model_validate(state.store.get_payment(payment_id), from_attributes=True)


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_payment(
    payment_id: str,
    _: Actor = Depends(permission_required(Module.PAYMENTS, Action.DELETE)),
    state: ApplicationState = Depends(get_app_state),
) -> None:
    if not state.store.delete_payment(payment_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Payment", payment_id)),
        )
