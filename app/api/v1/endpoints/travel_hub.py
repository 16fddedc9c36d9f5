"""
Travel Hub API Endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from app.api.deps import get_catalog
from app.schemas.catalog import DestinationResponse, NearbyDestination
from app.services.catalog import DestinationCatalog

router = APIRouter()

@router.get("/", response_model=List[DestinationResponse])
async def get_destinations(
    search: Optional[str] = Query(None, description="Name or city contains"),
    category: Optional[str] = Query(None),
    catalog: DestinationCatalog = Depends(get_catalog)
):
    """
    List destinations
    """
    return await catalog.list_destinations(search=search, category=category)

@router.get("/category/{category}", response_model=List[DestinationResponse])
async def get_destinations_by_category(
    category: str,
    catalog: DestinationCatalog = Depends(get_catalog)
):
    return await catalog.list_destinations(category=category)

@router.get("/{destination_id}", response_model=DestinationResponse)
async def get_destination(
    destination_id: int,
    catalog: DestinationCatalog = Depends(get_catalog)
):
    destination = await catalog.get_destination(destination_id)
    if not destination:
        raise HTTPException(status_code=404, detail="Destination not found")
    return destination

@router.get("/{destination_id}/nearby", response_model=List[NearbyDestination])
async def get_nearby_destinations(
    destination_id: int,
    radius_km: float = Query(300, gt=0, alias="radiusKm"),
    catalog: DestinationCatalog = Depends(get_catalog)
):
    """
    Destinations within radius_km of this one, nearest first
    """
    destination = await catalog.get_destination(destination_id)
    if not destination:
        raise HTTPException(status_code=404, detail="Destination not found")

    try:
        nearby = await catalog.nearby_destinations(destination, radius_km)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return [
        NearbyDestination(
            **DestinationResponse.model_validate(item['destination']).dict(),
            distance_km=item['distance_km']
        )
        for item in nearby
    ]
