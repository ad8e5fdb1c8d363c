"""Pydantic DTOs for the Payment feature."""

import datetime as dt

from pydantic import BaseModel, Field

from prms.domain.entities import Payment, PaymentStatus


class PaymentWrite(BaseModel):
    """New or replacement payment. Recorded as Paid unless stated otherwise."""

    tenant: str = Field(..., min_length=1, max_length=200)
    room: str | None = Field(
        None, max_length=50, description="Room label; looked up from the tenant when omitted"
    )
    amount: float = Field(..., gt=0)
    date: dt.date = Field(default_factory=dt.date.today)
    status: PaymentStatus = PaymentStatus.PAID

    def to_entity(self, room: str, payment_id: str = "") -> Payment:
        return Payment(
            id=payment_id,
            tenant=self.tenant,
            room=room,
            amount=self.amount,
            date=self.date,
            status=self.status,
        )


class PaymentResponse(BaseModel):
    id: str
    tenant: str
    room: str
    amount: float
    date: dt.date
    status: PaymentStatus

    model_config = {"from_attributes": True}
