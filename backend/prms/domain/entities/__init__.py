from .permissions import (
    Action,
    Actor,
    AdminActor,
    EmployeeActor,
    Module,
    ModulePermissions,
    Permissions,
)
from .room import MaintenanceDetails, Occupancy, PreBooking, Room, RoomStatus
from .tenant import Tenant, TenantStatus
from .payment import Payment, PaymentStatus
from .expense import Expense, ExpenseStatus
from .employee import Employee, EmployeeStatus, UserRole
from .user_profile import UserProfile
from .notification import AppNotification, NotificationType

__all__ = [
    "Action",
    "Actor",
    "AdminActor",
    "EmployeeActor",
    "Module",
    "ModulePermissions",
    "Permissions",
    "MaintenanceDetails",
    "Occupancy",
    "PreBooking",
    "Room",
    "RoomStatus",
    "Tenant",
    "TenantStatus",
    "Payment",
    "PaymentStatus",
    "Expense",
    "ExpenseStatus",
    "Employee",
    "EmployeeStatus",
    "UserRole",
    "UserProfile",
    "AppNotification",
    "NotificationType",
]
