"""Pydantic DTOs for the Expense feature."""

import datetime as dt

from pydantic import BaseModel, Field

from prms.domain.entities import Expense, ExpenseStatus


class ExpenseWrite(BaseModel):
    property: str = Field(..., min_length=1, max_length=200)
    unit: str = Field(..., min_length=1, max_length=50, examples=["K6"])
    title: str = Field(..., min_length=1, max_length=200)
    amount: float = Field(..., gt=0)
    paid_by: str = Field("System", max_length=100)
    status: ExpenseStatus = ExpenseStatus.PAID
    date: dt.date = Field(default_factory=dt.date.today)

    def to_entity(self, expense_id: str = "") -> Expense:
        return Expense(
            id=expense_id,
            property=self.property,
            unit=self.unit,
            title=self.title,
            amount=self.amount,
            paid_by=self.paid_by,
            status=self.status,
            date=self.date,
        )


class ExpenseResponse(BaseModel):
    id: str
    property: str
    unit: str
    title: str
    amount: float
    paid_by: str
    status: ExpenseStatus
    date: dt.date

    model_config = {"from_attributes": True}


class ExpenseGroupResponse(BaseModel):
    label: str
    total: float
    expenses: list[ExpenseResponse]

    model_config = {"from_attributes": True}
