"""Pydantic DTOs for employee accounts and their permissions."""

from pydantic import BaseModel, Field

from prms.domain.entities import (
    Employee,
    EmployeeStatus,
    ModulePermissions,
    Permissions,
    UserRole,
)


class ModulePermissionsSchema(BaseModel):
    view: bool = False
    add: bool = False
    edit: bool = False
    delete: bool = False

    model_config = {"from_attributes": True}


def _view_only() -> ModulePermissionsSchema:
    return ModulePermissionsSchema(view=True)


class PermissionsSchema(BaseModel):
    """Defaults to view-only on every module."""

    rooms: ModulePermissionsSchema = Field(default_factory=_view_only)
    tenants: ModulePermissionsSchema = Field(default_factory=_view_only)
    payments: ModulePermissionsSchema = Field(default_factory=_view_only)
    expenses: ModulePermissionsSchema = Field(default_factory=_view_only)

    model_config = {"from_attributes": True}

    def to_entity(self) -> Permissions:
        return Permissions(
            rooms=ModulePermissions(**self.rooms.model_dump()),
            tenants=ModulePermissions(**self.tenants.model_dump()),
            payments=ModulePermissions(**self.payments.model_dump()),
            expenses=ModulePermissions(**self.expenses.model_dump()),
        )


class EmployeeWrite(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field("", max_length=255)
    password: str | None = Field(None, max_length=200)
    role: UserRole = UserRole.EMPLOYEE
    permissions: PermissionsSchema = Field(default_factory=PermissionsSchema)
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    assigned_room_ids: list[str] = Field(default_factory=list)

    def to_entity(self, employee_id: str = "") -> Employee:
        return Employee(
            id=employee_id,
            username=self.username,
            name=self.name,
            email=self.email,
            password=self.password,
            role=self.role,
            permissions=self.permissions.to_entity(),
            status=self.status,
            assigned_room_ids=list(self.assigned_room_ids),
        )


class EmployeeResponse(BaseModel):
    """Employee account as returned to the client — never includes the password."""

    id: str
    username: str
    name: str
    email: str
    role: UserRole
    permissions: PermissionsSchema
    status: EmployeeStatus
    assigned_room_ids: list[str]
    assigned_room_labels: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class EmployeeBulkStatus(BaseModel):
    ids: list[str] = Field(..., min_length=1)
    status: EmployeeStatus
