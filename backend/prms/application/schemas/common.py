"""Shared DTOs: bulk id lists, notifications and report payloads."""

import datetime as dt

from pydantic import BaseModel, Field

from prms.domain.entities import NotificationType


class BulkIds(BaseModel):
    ids: list[str] = Field(..., min_length=1)


class BulkResult(BaseModel):
    affected: int


class NotificationResponse(BaseModel):
    id: str
    type: NotificationType
    message: str
    performer: str
    timestamp: str

    model_config = {"from_attributes": True}


class StatsResponse(BaseModel):
    total_rooms: int
    total_tenants: int
    total_income: float
    total_expenses: float

    model_config = {"from_attributes": True}


class TrendBucketResponse(BaseModel):
    label: str
    month: int
    year: int
    income: float
    expenses: float

    model_config = {"from_attributes": True}


class ActivityItemResponse(BaseModel):
    id: str
    kind: str
    label: str
    date: dt.date
    amount: float
    status: str

    model_config = {"from_attributes": True}


class BreakdownSliceResponse(BaseModel):
    name: str
    value: float

    model_config = {"from_attributes": True}


class DashboardResponse(BaseModel):
    stats: StatsResponse
    recent_activity: list[ActivityItemResponse]
