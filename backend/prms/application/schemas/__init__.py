from .auth import LoginRequest, ProfileSchema, SessionResponse, ThemeUpdate
from .rooms import (
    MaintenanceSchema,
    OccupancySchema,
    PreBookingSchema,
    RoomResponse,
    RoomWrite,
)
from .tenants import TenantBulkStatus, TenantResponse, TenantWrite
from .payments import PaymentResponse, PaymentWrite
from .expenses import ExpenseGroupResponse, ExpenseResponse, ExpenseWrite
from .employees import (
    EmployeeBulkStatus,
    EmployeeResponse,
    EmployeeWrite,
    ModulePermissionsSchema,
    PermissionsSchema,
)
from .common import (
    ActivityItemResponse,
    BreakdownSliceResponse,
    BulkIds,
    BulkResult,
    DashboardResponse,
    NotificationResponse,
    StatsResponse,
    TrendBucketResponse,
)

__all__ = [
    "LoginRequest",
    "ProfileSchema",
    "SessionResponse",
    "ThemeUpdate",
    "MaintenanceSchema",
    "OccupancySchema",
    "PreBookingSchema",
    "RoomResponse",
    "RoomWrite",
    "TenantBulkStatus",
    "TenantResponse",
    "TenantWrite",
    "PaymentResponse",
    "PaymentWrite",
    "ExpenseGroupResponse",
    "ExpenseResponse",
    "ExpenseWrite",
    "EmployeeBulkStatus",
    "EmployeeResponse",
    "EmployeeWrite",
    "ModulePermissionsSchema",
    "PermissionsSchema",
    "ActivityItemResponse",
    "BreakdownSliceResponse",
    "BulkIds",
    "BulkResult",
    "DashboardResponse",
    "NotificationResponse",
    "StatsResponse",
    "TrendBucketResponse",
]
