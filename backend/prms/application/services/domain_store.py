"""Domain store — the authoritative in-memory collections and their mutations.

Each collection is held as an immutable tuple and replaced wholesale on
every mutation, so a reader never observes a half-applied change and
aggregate caching can key on tuple identity. Every successful mutation
prepends exactly one activity notification.

No authorization happens here: callers are expected to consult
``access_control`` before invoking a mutation.

Entities handed out are the stored instances; treat them as read-only and
pass modified copies to the ``update_*`` methods.
"""

import copy
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from datetime import datetime
from typing import TypeVar

from prms.application.interfaces import IdGenerator, MonotonicIdGenerator
from prms.domain.entities import (
    AppNotification,
    Employee,
    EmployeeStatus,
    Expense,
    NotificationType,
    Payment,
    Room,
    Tenant,
    TenantStatus,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", Room, Tenant, Payment, Expense, Employee)


@dataclass(frozen=True)
class StoreStats:
    total_rooms: int
    total_tenants: int
    total_income: float
    total_expenses: float


@dataclass(frozen=True)
class StoreSnapshot:
    """Read-only view of every collection at one instant."""

    rooms: tuple[Room, ...]
    tenants: tuple[Tenant, ...]
    payments: tuple[Payment, ...]
    expenses: tuple[Expense, ...]
    employees: tuple[Employee, ...]
    notifications: tuple[AppNotification, ...]


def format_amount(amount: float) -> str:
    """Render 1500.0 as "1500" and 12.5 as "12.5"."""
    return str(int(amount)) if float(amount).is_integer() else str(amount)


def format_timestamp(moment: datetime) -> str:
    """Locale-style display string, e.g. "3/15/2024, 9:05:00 AM"."""
    clock = moment.strftime("%I:%M:%S %p").lstrip("0")
    return f"{moment.month}/{moment.day}/{moment.year}, {clock}"


def _insert(collection: tuple[T, ...], entity: T) -> tuple[T, ...]:
    """Prepend ``entity``, dropping any existing entry with the same id."""
    return (entity,) + tuple(e for e in collection if e.id != entity.id)


def _replace(collection: tuple[T, ...], entity: T) -> tuple[tuple[T, ...], bool]:
    found = False
    updated = []
    for existing in collection:
        if existing.id == entity.id:
            updated.append(entity)
            found = True
        else:
            updated.append(existing)
    return tuple(updated), found


def _remove(collection: tuple[T, ...], entity_id: str) -> tuple[tuple[T, ...], T | None]:
    target = next((e for e in collection if e.id == entity_id), None)
    if target is None:
        return collection, None
    return tuple(e for e in collection if e.id != entity_id), target


class DomainStore:
    """Owns rooms, tenants, payments, expenses, employees and the activity log."""

    def __init__(
        self,
        id_generator: IdGenerator | None = None,
        performer: Callable[[], str] = lambda: "System",
        clock: Callable[[], datetime] = datetime.now,
        max_notifications: int | None = None,
    ):
        self._ids = id_generator or MonotonicIdGenerator()
        self._performer = performer
        self._clock = clock
        self._max_notifications = max_notifications
        self._stats_key: tuple[object, ...] | None = None
        self._stats_value: StoreStats | None = None
        self.reset()

    def reset(self) -> None:
        """Drop every collection, returning to the empty startup state."""
        self._rooms: tuple[Room, ...] = ()
        self._tenants: tuple[Tenant, ...] = ()
        self._payments: tuple[Payment, ...] = ()
        self._expenses: tuple[Expense, ...] = ()
        self._employees: tuple[Employee, ...] = ()
        self._notifications: tuple[AppNotification, ...] = ()

    # ── Read access ─────────────────────────────────────────────────

    @property
    def rooms(self) -> tuple[Room, ...]:
        return self._rooms

    @property
    def tenants(self) -> tuple[Tenant, ...]:
        return self._tenants

    @property
    def payments(self) -> tuple[Payment, ...]:
        return self._payments

    @property
    def expenses(self) -> tuple[Expense, ...]:
        return self._expenses

    @property
    def employees(self) -> tuple[Employee, ...]:
        return self._employees

    @property
    def notifications(self) -> tuple[AppNotification, ...]:
        """Activity log, most recent first."""
        return self._notifications

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            rooms=self._rooms,
            tenants=self._tenants,
            payments=self._payments,
            expenses=self._expenses,
            employees=self._employees,
            notifications=self._notifications,
        )

    def get_room(self, room_id: str) -> Room | None:
        return next((r for r in self._rooms if r.id == room_id), None)

    def get_tenant(self, tenant_id: str) -> Tenant | None:
        return next((t for t in self._tenants if t.id == tenant_id), None)

    def get_payment(self, payment_id: str) -> Payment | None:
        return next((p for p in self._payments if p.id == payment_id), None)

    def get_expense(self, expense_id: str) -> Expense | None:
        return next((e for e in self._expenses if e.id == expense_id), None)

    def get_employee(self, employee_id: str) -> Employee | None:
        return next((e for e in self._employees if e.id == employee_id), None)

    def current_employee(self, username: str | None) -> Employee | None:
        """The employee record whose username matches the session, if any."""
        if username is None:
            return None
        return next((e for e in self._employees if e.username == username), None)

    @property
    def stats(self) -> StoreStats:
        """Counts and sums over the current collections.

        Recomputed whenever any underlying tuple has been replaced.
        """
        key = (self._rooms, self._tenants, self._payments, self._expenses)
        if self._stats_key is None or any(a is not b for a, b in zip(key, self._stats_key)):
            self._stats_value = StoreStats(
                total_rooms=len(self._rooms),
                total_tenants=len(self._tenants),
                total_income=sum(p.amount for p in self._payments),
                total_expenses=sum(e.amount for e in self._expenses),
            )
            self._stats_key = key
        return self._stats_value

    # ── Activity log ────────────────────────────────────────────────

    def _log(self, message: str, kind: NotificationType = NotificationType.INFO) -> AppNotification:
        entry = AppNotification(
            id=self._ids.next_id(),
            type=kind,
            message=message,
            performer=self._performer(),
            timestamp=format_timestamp(self._clock()),
        )
        notifications = (entry,) + self._notifications
        if self._max_notifications is not None:
            notifications = notifications[: self._max_notifications]
        self._notifications = notifications
        logger.info("[%s] %s", entry.performer, message)
        return entry

    def clear_notification(self, notification_id: str) -> bool:
        remaining = tuple(n for n in self._notifications if n.id != notification_id)
        removed = len(remaining) != len(self._notifications)
        self._notifications = remaining
        return removed

    def clear_all_notifications(self) -> int:
        count = len(self._notifications)
        self._notifications = ()
        return count

    def _new(self, entity: T) -> T:
        """Detached copy of a caller-supplied entity with a fresh id."""
        return replace(copy.deepcopy(entity), id=self._ids.next_id())

    # ── Rooms ───────────────────────────────────────────────────────

    def add_room(self, room: Room) -> Room:
        stored = self._new(room).normalized()
        self._rooms = _insert(self._rooms, stored)
        self._log(f"Added Room {stored.room_number}", NotificationType.SUCCESS)
        return stored

    def update_room(self, room: Room) -> bool:
        rooms, found = _replace(self._rooms, copy.deepcopy(room).normalized())
        if not found:
            logger.debug("update_room: no room with id '%s'", room.id)
            return False
        self._rooms = rooms
        self._log(f"Updated Room {room.room_number}")
        return True

    def delete_room(self, room_id: str) -> bool:
        self._rooms, target = _remove(self._rooms, room_id)
        if target is None:
            return False
        self._log(f"Deleted Room {target.room_number}", NotificationType.WARNING)
        return True

    # ── Tenants ─────────────────────────────────────────────────────

    def add_tenant(self, tenant: Tenant) -> Tenant:
        stored = self._new(tenant)
        self._tenants = _insert(self._tenants, stored)
        self._log(f"Registered Tenant {stored.name}", NotificationType.SUCCESS)
        return stored

    def update_tenant(self, tenant: Tenant) -> bool:
        tenants, found = _replace(self._tenants, copy.deepcopy(tenant))
        if not found:
            return False
        self._tenants = tenants
        self._log(f"Updated Tenant {tenant.name}")
        return True

    def delete_tenant(self, tenant_id: str) -> bool:
        self._tenants, target = _remove(self._tenants, tenant_id)
        if target is None:
            return False
        self._log(f"Removed Tenant {target.name}", NotificationType.WARNING)
        return True

    def bulk_delete_tenants(self, tenant_ids: Iterable[str]) -> int:
        ids = set(tenant_ids)
        remaining = tuple(t for t in self._tenants if t.id not in ids)
        removed = len(self._tenants) - len(remaining)
        if removed == 0:
            return 0
        self._tenants = remaining
        self._log(f"Bulk removed {removed} tenants", NotificationType.WARNING)
        return removed

    def bulk_set_tenant_status(self, tenant_ids: Iterable[str], status: TenantStatus) -> int:
        ids = set(tenant_ids)
        matched = sum(1 for t in self._tenants if t.id in ids)
        if matched == 0:
            return 0
        self._tenants = tuple(
            replace(t, status=status) if t.id in ids else t for t in self._tenants
        )
        self._log(f"Bulk updated {matched} tenants to {status.value}")
        return matched

    # ── Payments ────────────────────────────────────────────────────

    def add_payment(self, payment: Payment) -> Payment:
        stored = self._new(payment)
        self._payments = _insert(self._payments, stored)
        self._log(
            f"Recorded payment of AED {format_amount(stored.amount)} for {stored.tenant}",
            NotificationType.SUCCESS,
        )
        return stored

    def update_payment(self, payment: Payment) -> bool:
        payments, found = _replace(self._payments, copy.deepcopy(payment))
        if not found:
            return False
        self._payments = payments
        self._log(f"Updated payment for {payment.tenant}")
        return True

    def delete_payment(self, payment_id: str) -> bool:
        self._payments, target = _remove(self._payments, payment_id)
        if target is None:
            return False
        self._log(
            f"Deleted payment of AED {format_amount(target.amount)} for {target.tenant}",
            NotificationType.WARNING,
        )
        return True

    # ── Expenses ────────────────────────────────────────────────────

    def add_expense(self, expense: Expense) -> Expense:
        stored = self._new(expense)
        self._expenses = _insert(self._expenses, stored)
        self._log(f"Recorded expense: {stored.title}", NotificationType.WARNING)
        return stored

    def update_expense(self, expense: Expense) -> bool:
        expenses, found = _replace(self._expenses, copy.deepcopy(expense))
        if not found:
            return False
        self._expenses = expenses
        self._log(f"Updated expense: {expense.title}")
        return True

    def delete_expense(self, expense_id: str) -> bool:
        self._expenses, target = _remove(self._expenses, expense_id)
        if target is None:
            return False
        self._log(f"Deleted expense: {target.title}", NotificationType.WARNING)
        return True

    # ── Employees ───────────────────────────────────────────────────

    def add_employee(self, employee: Employee) -> Employee:
        stored = self._new(employee)
        self._employees = _insert(self._employees, stored)
        self._log(f"Added Employee {stored.name}")
        return stored

    def update_employee(self, employee: Employee) -> bool:
        employees, found = _replace(self._employees, copy.deepcopy(employee))
        if not found:
            return False
        self._employees = employees
        self._log(f"Updated profile for {employee.name}")
        return True

    def delete_employee(self, employee_id: str) -> bool:
        self._employees, target = _remove(self._employees, employee_id)
        if target is None:
            return False
        self._log(f"Removed Employee {target.name or 'Account'}", NotificationType.WARNING)
        return True

    def toggle_employee_status(self, employee_id: str) -> EmployeeStatus | None:
        target = self.get_employee(employee_id)
        if target is None:
            return None
        flipped = replace(target, status=target.status.toggled())
        self._employees, _ = _replace(self._employees, flipped)
        self._log(f"Set Employee {flipped.name} to {flipped.status.value}")
        return flipped.status

    def bulk_delete_employees(self, employee_ids: Iterable[str]) -> int:
        ids = set(employee_ids)
        remaining = tuple(e for e in self._employees if e.id not in ids)
        removed = len(self._employees) - len(remaining)
        if removed == 0:
            return 0
        self._employees = remaining
        self._log(f"Bulk removed {removed} employees", NotificationType.WARNING)
        return removed

    def bulk_set_employee_status(
        self, employee_ids: Iterable[str], status: EmployeeStatus
    ) -> int:
        ids = set(employee_ids)
        matched = sum(1 for e in self._employees if e.id in ids)
        if matched == 0:
            return 0
        self._employees = tuple(
            replace(e, status=status) if e.id in ids else e for e in self._employees
        )
        self._log(f"Bulk updated {matched} employees to {status.value}")
        return matched
