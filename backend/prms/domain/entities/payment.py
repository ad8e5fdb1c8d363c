"""Domain entity for rent payments."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class PaymentStatus(str, Enum):
    PAID = "Paid"
    PENDING = "Pending"


@dataclass
class Payment:
    """Money received from a tenant. ``tenant`` and ``room`` are labels."""

    tenant: str
    room: str
    amount: float
    date: date
    status: PaymentStatus = PaymentStatus.PAID
    id: str = ""
