"""Dashboard and report endpoints — computed on every request."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from prms.application.schemas import (
    ActivityItemResponse,
    BreakdownSliceResponse,
    DashboardResponse,
    StatsResponse,
    TrendBucketResponse,
)
from prms.application.services import ApplicationState
from prms.application.services.views import financial_breakdown, monthly_trend, recent_activity
from prms.domain.entities import Actor
from prms.infrastructure.dependencies import get_app_state, get_current_actor

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    _: Actor = Depends(get_current_actor),
    state: ApplicationState = Depends(get_app_state),
) -> StatsResponse:
    return StatsResponse.model_validate(state.store.stats, from_attributes=True)


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    _: Actor = Depends(get_current_actor),
    state: ApplicationState = Depends(get_app_state),
) -> DashboardResponse:
    """Summary cards plus the five most recent payments/expenses."""
    snapshot = state.store.snapshot()
    return DashboardResponse(
        stats=StatsResponse.model_validate(state.store.stats, from_attributes=True),
        recent_activity=[
            ActivityItemResponse.model_validate(item, from_attributes=True)
            for item in recent_activity(snapshot.payments, snapshot.expenses)
        ],
    )


@router.get("/trend", response_model=list[TrendBucketResponse])
async def get_monthly_trend(
    as_of: date | None = Query(None, description="Last month of the window; defaults to today"),
    months: int = Query(6, ge=1, le=24),
    _: Actor = Depends(get_current_actor),
    state: ApplicationState = Depends(get_app_state),
) -> list[TrendBucketResponse]:
    snapshot = state.store.snapshot()
    buckets = monthly_trend(snapshot.payments, snapshot.expenses, today=as_of, months=months)
    return [TrendBucketResponse.model_validate(b, from_attributes=True) for b in buckets]


@router.get("/breakdown", response_model=list[BreakdownSliceResponse])
async def get_financial_breakdown(
    _: Actor = Depends(get_current_actor),
    state: ApplicationState = Depends(get_app_state),
) -> list[BreakdownSliceResponse]:
    return [
        BreakdownSliceResponse.model_validate(s, from_attributes=True)
        for s in financial_breakdown(state.store.stats)
    ]
