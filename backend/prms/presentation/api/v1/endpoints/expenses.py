"""Expense endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from prms.application.schemas import ExpenseGroupResponse, ExpenseResponse, ExpenseWrite
from prms.application.services import ApplicationState
from prms.application.services.views import group_expenses_by_month
from prms.domain.entities import Action, Actor, Module
from prms.domain.exceptions import EntityNotFoundError
from prms.infrastructure.dependencies import get_app_state, permission_required

router = APIRouter(prefix="/expenses", tags=["Expenses"])


@router.get("", response_model=list[ExpenseResponse])
async def list_expenses(
    _: Actor = Depends(permission_required(Module.EXPENSES, Action.VIEW)),
    state: ApplicationState = Depends(get_app_state),
) -> list[ExpenseResponse]:
    return [ExpenseResponse.model_validate(e, from_attributes=True) for e in state.store.expenses]


@router.get("/grouped", response_model=list[ExpenseGroupResponse])
async def list_expenses_by_month(
    _: Actor = Depends(permission_required(Module.EXPENSES, Action.VIEW)),
    state: ApplicationState = Depends(get_app_state),
) -> list[ExpenseGroupResponse]:
    """Expenses grouped by month, newest month first."""
    groups = group_expenses_by_month(state.store.expenses)
    return [ExpenseGroupResponse.model_validate(g, from_attributes=True) for g in groups]


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    data: ExpenseWrite,
    _: Actor = Depends(permission_required(Module.EXPENSES, Action.ADD)),
    state: ApplicationState = Depends(get_app_state),
) -> ExpenseResponse:
    expense = state.store.add_expense(data.to_entity())
    return ExpenseResponse.model_validate(expense, from_attributes=True)


@router.put("/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    expense_id: str,
    data: ExpenseWrite,
    _: Actor = Depends(permission_required(Module.EXPENSES, Action.EDIT)),
    state: ApplicationState = Depends(get_app_state),
) -> ExpenseResponse:
    if not state.store.update_expense(data.to_entity(expense_id)):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Expense", expense_id)),
        )
    return ExpenseResponse.model_validate(state.store.get_expense(expense_id), from_attributes=True)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(
    expense_id: str,
    _: Actor = Depends(permission_required(Module.EXPENSES, Action.DELETE)),
    state: ApplicationState = Depends(get_app_state),
) -> None:
    if not state.store.delete_expense(expense_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("Expense", expense_id)),
        )
