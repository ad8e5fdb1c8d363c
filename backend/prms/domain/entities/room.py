"""Domain entity for rentable rooms and their status-specific detail blocks."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum


class RoomStatus(str, Enum):
    """Mutually exclusive room states. Any state may move to any other."""

    AVAILABLE = "Available"
    OCCUPIED = "Occupied"
    MAINTENANCE = "Maintenance"
    RESERVED = "Reserved"


@dataclass
class Occupancy:
    start_date: date | None = None
    end_date: date | None = None
    is_open_ended: bool = False


@dataclass
class MaintenanceDetails:
    cost: float = 0
    date: date | None = None


@dataclass
class PreBooking:
    start_date: date | None = None
    end_date: date | None = None
    tenant_name: str | None = None
    tenant_phone: str | None = None
    is_open_ended: bool = False


@dataclass
class Room:
    """A rentable unit.

    At most one of ``occupancy``, ``maintenance`` and ``pre_booking`` is
    populated, selected by ``status``. Use :meth:`normalized` to obtain a
    copy that satisfies this.
    """

    room_number: str
    rent: float = 0
    monthly_expenses: float = 0
    status: RoomStatus = RoomStatus.AVAILABLE
    id: str = ""
    type: str = "N/A"
    building: str | None = None
    floor: str | None = None
    images: list[str] = field(default_factory=list)
    occupancy: Occupancy | None = None
    maintenance: MaintenanceDetails | None = None
    pre_booking: PreBooking | None = None

    def normalized(self) -> "Room":
        """Return a copy keeping only the detail block for the current status."""
        occupancy = self.occupancy if self.status is RoomStatus.OCCUPIED else None
        maintenance = self.maintenance if self.status is RoomStatus.MAINTENANCE else None
        pre_booking = self.pre_booking if self.status is RoomStatus.RESERVED else None

        if occupancy is not None and occupancy.is_open_ended:
            occupancy = replace(occupancy, end_date=None)
        if pre_booking is not None and pre_booking.is_open_ended:
            pre_booking = replace(pre_booking, end_date=None)

        return replace(
            self,
            images=list(self.images),
            occupancy=occupancy,
            maintenance=maintenance,
            pre_booking=pre_booking,
        )

    @property
    def projected_profit(self) -> float:
        """Monthly rent minus the monthly expense estimate."""
        return self.rent - self.monthly_expenses
