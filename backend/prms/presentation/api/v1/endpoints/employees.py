"""Employee account management — Admin only, except ``/me``."""

from fastapi import APIRouter, Depends, HTTPException, status

from prms.application.schemas import (
    BulkIds,
    BulkResult,
    EmployeeBulkStatus,
    EmployeeResponse,
    EmployeeWrite,
)
from prms.application.services import ApplicationState
from prms.application.services.views import resolve_room_labels
from prms.domain.entities import Actor, AdminActor, Employee
from prms.domain.exceptions import EntityNotFoundError
from prms.infrastructure.dependencies import get_admin_actor, get_app_state, get_current_actor

router = APIRouter(prefix="/employees", tags=["Employees"])


def _to_response(employee: Employee, state: ApplicationState) -> EmployeeResponse:
    response = EmployeeResponse.model_validate(employee, from_attributes=True)
    labels = resolve_room_labels(employee.assigned_room_ids, state.store.rooms)
    return response.model_copy(update={"assigned_room_labels": labels})


def _not_found(employee_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=str(EntityNotFoundError("Employee", employee_id)),
    )


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    _: AdminActor = Depends(get_admin_actor),
    state: ApplicationState = Depends(get_app_state),
) -> list[EmployeeResponse]:
    return [_to_response(e, state) for e in state.store.employees]


@router.get("/me", response_model=EmployeeResponse)
async def get_current_employee(
    actor: Actor = Depends(get_current_actor),
    state: ApplicationState = Depends(get_app_state),
) -> EmployeeResponse:
    """The employee record matching the signed-in username."""
    employee = state.store.current_employee(actor.username)
    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No employee record for '{actor.username}'",
        )
    return _to_response(employee, state)


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    data: EmployeeWrite,
    _: AdminActor = Depends(get_admin_actor),
    state: ApplicationState = Depends(get_app_state),
) -> EmployeeResponse:
    employee = state.store.add_employee(data.to_entity())
    return _to_response(employee, state)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: str,
    data: EmployeeWrite,
    _: AdminActor = Depends(get_admin_actor),
    state: ApplicationState = Depends(get_app_state),
) -> EmployeeResponse:
    if not state.store.update_employee(data.to_entity(employee_id)):
        raise _not_found(employee_id)
    return _to_response(state.store.get_employee(employee_id), state)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str,
    _: AdminActor = Depends(get_admin_actor),
    state: ApplicationState = Depends(get_app_state),
) -> None:
    if not state.store.delete_employee(employee_id):
        raise _not_found(employee_id)


@router.post("/{employee_id}/toggle-status", response_model=EmployeeResponse)
async def toggle_employee_status(
    employee_id: str,
    _: AdminActor = Depends(get_admin_actor),
    state: ApplicationState = Depends(get_app_state),
) -> EmployeeResponse:
    if state.store.toggle_employee_status(employee_id) is None:
        raise _not_found(employee_id)
    return _to_response(state.store.get_employee(employee_id), state)


@router.post("/bulk-delete", response_model=BulkResult)
async def bulk_delete_employees(
    data: BulkIds,
    _: AdminActor = Depends(get_admin_actor),
    state: ApplicationState = Depends(get_app_state),
) -> BulkResult:
    return BulkResult(affected=state.store.bulk_delete_employees(data.ids))


@router.post("/bulk-status", response_model=BulkResult)
async def bulk_set_employee_status(
    data: EmployeeBulkStatus,
    _: AdminActor = Depends(get_admin_actor),
    state: ApplicationState = Depends(get_app_state),
) -> BulkResult:
    return BulkResult(affected=state.store.bulk_set_employee_status(data.ids, data.status))
