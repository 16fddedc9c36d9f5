"""
Travel History API Endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from app.api.deps import get_ledger
from app.schemas.travel_history import TravelHistoryResponse
from app.services.ledger import TravelFundLedger
from app.services.trip_history import compute_stats, filter_trips, export_csv, export_filename

router = APIRouter()

STATUS_FILTER = "^(all|planned|confirmed|completed|cancelled)$"
PERIOD_FILTER = "^(all|last-month|last-3-months|last-year)$"

@router.get("/", response_model=TravelHistoryResponse)
async def get_travel_history(
    user_id: int = Query(..., description="User ID"),
    status: str = Query("all", pattern=STATUS_FILTER),
    time_period: str = Query("all", pattern=PERIOD_FILTER, alias="timePeriod"),
    destination: str = Query("all"),
    ledger: TravelFundLedger = Depends(get_ledger)
):
    """
    Get trips (excluding bucket list) with stats
    """
    trips = await ledger.list(user_id, is_bucket_list=False)
    try:
        filtered = filter_trips(trips, status=status, time_period=time_period, destination=destination)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "trips": filtered,
        "stats": compute_stats(trips),
        "filtered_count": len(filtered)
    }

@router.get("/export")
async def export_travel_history(
    user_id: int = Query(..., description="User ID"),
    status: str = Query("all", pattern=STATUS_FILTER),
    time_period: str = Query("all", pattern=PERIOD_FILTER, alias="timePeriod"),
    destination: str = Query("all"),
    ledger: TravelFundLedger = Depends(get_ledger)
):
    """
    Export filtered trips as CSV
    """
    trips = await ledger.list(user_id, is_bucket_list=False)
    try:
        filtered = filter_trips(trips, status=status, time_period=time_period, destination=destination)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return Response(
        content=export_csv(filtered),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'}
    )
