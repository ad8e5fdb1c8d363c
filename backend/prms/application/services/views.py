"""Derived views — pure functions over store snapshots.

Nothing here keeps state; every result is recomputed from the
collections passed in.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from prms.application.services.domain_store import StoreStats
from prms.domain.entities import (
    Actor,
    AdminActor,
    Expense,
    ExpenseStatus,
    Payment,
    PaymentStatus,
    Room,
    Tenant,
)

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@dataclass(frozen=True)
class TrendBucket:
    label: str
    month: int  # 1-12
    year: int
    income: float
    expenses: float


@dataclass(frozen=True)
class ExpenseGroup:
    label: str
    expenses: tuple[Expense, ...]

    @property
    def total(self) -> float:
        return sum(e.amount for e in self.expenses)


@dataclass(frozen=True)
class ActivityItem:
    id: str
    kind: str  # "payment" | "expense"
    label: str
    date: date
    amount: float
    status: str


@dataclass(frozen=True)
class BreakdownSlice:
    name: str
    value: float


def role_scoped_rooms(rooms: Sequence[Room], actor: Actor | None) -> list[Room]:
    """Rooms the actor may see.

    Admins see everything. Employees see their assigned rooms only when
    they hold rooms/view; otherwise nothing. No actor sees nothing.
    """
    if actor is None:
        return []
    if isinstance(actor, AdminActor):
        return list(rooms)
    if not actor.permissions.rooms.view:
        return []
    assigned = set(actor.assigned_room_ids)
    return [r for r in rooms if r.id in assigned]


def _trailing_months(today: date, count: int) -> list[tuple[int, int]]:
    months = []
    for offset in range(count - 1, -1, -1):
        year, month_index = divmod(today.year * 12 + today.month - 1 - offset, 12)
        months.append((year, month_index + 1))
    return months


def monthly_trend(
    payments: Iterable[Payment],
    expenses: Iterable[Expense],
    today: date | None = None,
    months: int = 6,
) -> list[TrendBucket]:
    """Paid income and paid expenses per calendar month.

    The window covers ``months`` months ending with the month of ``today``,
    oldest first.
    """
    today = today or date.today()
    payments = [p for p in payments if p.status is PaymentStatus.PAID]
    expenses = [e for e in expenses if e.status is ExpenseStatus.PAID]

    buckets = []
    for year, month in _trailing_months(today, months):
        income = sum(
            p.amount for p in payments if p.date.year == year and p.date.month == month
        )
        spent = sum(
            e.amount for e in expenses if e.date.year == year and e.date.month == month
        )
        buckets.append(
            TrendBucket(
                label=_MONTH_ABBR[month - 1],
                month=month,
                year=year,
                income=income,
                expenses=spent,
            )
        )
    return buckets


def group_expenses_by_month(expenses: Iterable[Expense]) -> list[ExpenseGroup]:
    """Expenses grouped under "Month YYYY" labels, newest group and entry first."""
    ordered = sorted(expenses, key=lambda e: e.date, reverse=True)
    groups: dict[str, list[Expense]] = {}
    for expense in ordered:
        label = f"{_MONTH_NAMES[expense.date.month - 1]} {expense.date.year}"
        groups.setdefault(label, []).append(expense)
    return [ExpenseGroup(label=label, expenses=tuple(items)) for label, items in groups.items()]


def _id_order(entity_id: str) -> tuple[int, str]:
    # Creation-time ids are decimal strings; shorter means older.
    return (len(entity_id), entity_id)


def recent_activity(
    payments: Iterable[Payment],
    expenses: Iterable[Expense],
    limit: int = 5,
) -> list[ActivityItem]:
    """The newest payments and expenses combined, by descending id."""
    items = [
        ActivityItem(
            id=p.id,
            kind="payment",
            label=p.tenant,
            date=p.date,
            amount=p.amount,
            status=p.status.value,
        )
        for p in payments
    ] + [
        ActivityItem(
            id=e.id,
            kind="expense",
            label=e.title,
            date=e.date,
            amount=e.amount,
            status=e.status.value,
        )
        for e in expenses
    ]
    items.sort(key=lambda item: _id_order(item.id), reverse=True)
    return items[:limit]


def search_tenants(tenants: Iterable[Tenant], term: str) -> list[Tenant]:
    """Case-insensitive match on tenant name or room label."""
    needle = term.strip().lower()
    if not needle:
        return list(tenants)
    return [t for t in tenants if needle in t.name.lower() or needle in t.room.lower()]


def resolve_room_labels(room_ids: Iterable[str], rooms: Iterable[Room]) -> list[str]:
    """Room numbers for an assignment list; unknown ids are returned unchanged."""
    numbers = {r.id: r.room_number for r in rooms}
    return [numbers.get(room_id, room_id) for room_id in room_ids]


def financial_breakdown(stats: StoreStats) -> list[BreakdownSlice]:
    """Income vs expenses, omitting empty slices."""
    slices = [
        BreakdownSlice(name="Income", value=stats.total_income),
        BreakdownSlice(name="Expenses", value=stats.total_expenses),
    ]
    return [s for s in slices if s.value > 0]
