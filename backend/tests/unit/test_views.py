"""Unit tests for the derived views: scoping, trends, grouping and feeds."""

from datetime import date

from prms.application.services.domain_store import StoreStats
from prms.application.services.views import (
    financial_breakdown,
    group_expenses_by_month,
    monthly_trend,
    recent_activity,
    resolve_room_labels,
    role_scoped_rooms,
    search_tenants,
)
from prms.domain.entities import (
    AdminActor,
    EmployeeActor,
    Expense,
    ExpenseStatus,
    ModulePermissions,
    Occupancy,
    Payment,
    PaymentStatus,
    Permissions,
    Room,
    RoomStatus,
    Tenant,
)

ROOMS = [
    Room(room_number="101", id="r1"),
    Room(room_number="102", id="r2", status=RoomStatus.OCCUPIED,
         occupancy=Occupancy(start_date=date(2024, 1, 1), end_date=date(2024, 6, 1))),
    Room(room_number="103", id="r3"),
]


def _expense(id: str, amount: float, when: date, status=ExpenseStatus.PAID) -> Expense:
    return Expense(property="Tower", unit="K6", title=f"E{id}", amount=amount, date=when,
                   status=status, id=id)


def _payment(id: str, amount: float, when: date, status=PaymentStatus.PAID) -> Payment:
    return Payment(tenant=f"T{id}", room="102", amount=amount, date=when, status=status, id=id)


# ── Role-scoped rooms ────────────────────────────────────────────────


def test_admin_sees_every_room():
    assert role_scoped_rooms(ROOMS, AdminActor(username="admin")) == ROOMS


def test_signed_out_sees_nothing():
    assert role_scoped_rooms(ROOMS, None) == []


def test_employee_without_view_sees_nothing_even_when_assigned():
    permissions = Permissions(rooms=ModulePermissions(view=False, edit=True))
    actor = EmployeeActor("employee", permissions, assigned_room_ids=("r1", "r2", "r3"))
    assert role_scoped_rooms(ROOMS, actor) == []


def test_employee_with_view_but_no_assignment_sees_nothing():
    actor = EmployeeActor("employee", Permissions.default(), assigned_room_ids=())
    assert role_scoped_rooms(ROOMS, actor) == []


def test_employee_sees_only_assigned_rooms():
    actor = EmployeeActor("employee", Permissions.default(), assigned_room_ids=("r3", "r1", "gone"))
    assert [r.id for r in role_scoped_rooms(ROOMS, actor)] == ["r1", "r3"]


# ── Monthly trend ────────────────────────────────────────────────────


def test_march_bucket_sums_paid_income_and_expenses():
    payments = [_payment("1", 1500, date(2024, 3, 15))]
    expenses = [_expense("2", 300, date(2024, 3, 10))]

    trend = monthly_trend(payments, expenses, today=date(2024, 3, 31))

    assert [b.label for b in trend] == ["Oct", "Nov", "Dec", "Jan", "Feb", "Mar"]
    march = trend[-1]
    assert (march.month, march.year) == (3, 2024)
    assert march.income == 1500
    assert march.expenses == 300
    assert all(b.income == 0 and b.expenses == 0 for b in trend[:-1])


def test_trend_excludes_unpaid_and_other_years():
    payments = [
        _payment("1", 100, date(2024, 2, 1), PaymentStatus.PENDING),
        _payment("2", 200, date(2023, 2, 1)),
        _payment("3", 50, date(2024, 2, 29)),
    ]
    expenses = [_expense("4", 70, date(2024, 2, 3), ExpenseStatus.UNPAID)]

    feb = monthly_trend(payments, expenses, today=date(2024, 2, 10))[-1]
    assert feb.income == 50
    assert feb.expenses == 0


def test_trend_window_crosses_year_boundary():
    trend = monthly_trend([], [], today=date(2024, 2, 10))
    assert [(b.year, b.month) for b in trend] == [
        (2023, 9), (2023, 10), (2023, 11), (2023, 12), (2024, 1), (2024, 2),
    ]


# ── Grouping & activity ──────────────────────────────────────────────


def test_expenses_grouped_newest_month_first():
    expenses = [
        _expense("1", 10, date(2024, 1, 5)),
        _expense("2", 20, date(2024, 3, 1)),
        _expense("3", 30, date(2024, 3, 20)),
        _expense("4", 40, date(2023, 12, 31)),
    ]

    groups = group_expenses_by_month(expenses)

    assert [g.label for g in groups] == ["March 2024", "January 2024", "December 2023"]
    assert [e.id for e in groups[0].expenses] == ["3", "2"]
    assert groups[0].total == 50


def test_recent_activity_takes_five_newest_by_id():
    payments = [_payment(str(i), 100, date(2024, 1, i)) for i in (1, 3, 5, 7)]
    expenses = [_expense(str(i), 10, date(2024, 1, i)) for i in (2, 4, 6, 10)]

    feed = recent_activity(payments, expenses)

    assert [item.id for item in feed] == ["10", "7", "6", "5", "4"]
    assert feed[0].kind == "expense"
    assert feed[0].label == "E10"
    assert feed[1].kind == "payment"
    assert feed[1].label == "T7"


def test_recent_activity_on_empty_store():
    assert recent_activity([], []) == []


# ── Small helpers ────────────────────────────────────────────────────


def test_search_tenants_matches_name_or_room():
    tenants = [Tenant(name="Jane Doe", room="102"), Tenant(name="Ali", room="A-7")]
    assert [t.name for t in search_tenants(tenants, "jane")] == ["Jane Doe"]
    assert [t.name for t in search_tenants(tenants, "a-7")] == ["Ali"]
    assert len(search_tenants(tenants, "  ")) == 2


def test_resolve_room_labels_keeps_dangling_ids():
    assert resolve_room_labels(["r2", "deleted"], ROOMS) == ["102", "deleted"]


def test_financial_breakdown_drops_empty_slices():
    stats = StoreStats(total_rooms=0, total_tenants=0, total_income=1500, total_expenses=0)
    assert [(s.name, s.value) for s in financial_breakdown(stats)] == [("Income", 1500)]


def test_room_projection():
    assert Room(room_number="1", rent=1500, monthly_expenses=200).projected_profit == 1300
