"""Domain entity for property expenses."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ExpenseStatus(str, Enum):
    PAID = "Paid"
    UNPAID = "Unpaid"


@dataclass
class Expense:
    property: str
    unit: str
    title: str
    amount: float
    date: date
    paid_by: str = "System"
    status: ExpenseStatus = ExpenseStatus.PAID
    id: str = ""
