"""
API v1 Router
"""

from fastapi import APIRouter
from app.api.v1.endpoints import (
    money_map,
    travel_fund,
    travel_history,
    travel_hub,
    places_to_stay,
    travel_map,
    dashboard
)

api_router = APIRouter()

api_router.include_router(
    money_map.router,
    prefix="/money-map",
    tags=["money-map"]
)

api_router.include_router(
    travel_fund.router,
    prefix="/travel-fund",
    tags=["travel-fund"]
)

api_router.include_router(
    travel_history.router,
    prefix="/travel-history",
    tags=["travel-history"]
)

api_router.include_router(
    travel_hub.router,
    prefix="/travel-hub",
    tags=["travel-hub"]
)

api_router.include_router(
    places_to_stay.router,
    prefix="/places-to-stay",
    tags=["places-to-stay"]
)

api_router.include_router(
    travel_map.router,
    prefix="/travel-map",
    tags=["travel-map"]
)

api_router.include_router(
    dashboard.router,
    prefix="/dashboard",
    tags=["dashboard"]
)
