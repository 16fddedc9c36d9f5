"""
Travel Map API Endpoints
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.api.deps import get_catalog
from app.core.geo import haversine_km
from app.schemas.catalog import DistanceResponse, MapData, MapMarker
from app.services.catalog import DestinationCatalog

router = APIRouter()

def to_marker(place, marker_type: str) -> MapMarker:
    coordinates = None
    if place.latitude is not None and place.longitude is not None:
        coordinates = {'lat': place.latitude, 'lng': place.longitude}

    address = getattr(place, 'address', None)
    if marker_type == 'destination':
        address = ", ".join(part for part in (place.city, place.country) if part) or None

    return MapMarker(
        id=place.id,
        name=place.name,
        coordinates=coordinates,
        type=marker_type,
        address=address,
        rating=place.rating
    )

@router.get("/data", response_model=MapData)
async def get_map_data(
    destination_id: Optional[int] = Query(None, alias="destinationId"),
    catalog: DestinationCatalog = Depends(get_catalog)
):
    """
    Destination, hotel and restaurant markers for the map
    """
    data = await catalog.map_data(destination_id)
    return MapData(
        destinations=[to_marker(item, 'destination') for item in data['destinations']],
        hotels=[to_marker(item, 'hotel') for item in data['hotels']],
        restaurants=[to_marker(item, 'restaurant') for item in data['restaurants']]
    )

@router.get("/distance", response_model=DistanceResponse)
async def get_distance(
    origin_lat: float = Query(..., ge=-90, le=90, alias="originLat"),
    origin_lng: float = Query(..., ge=-180, le=180, alias="originLng"),
    dest_lat: float = Query(..., ge=-90, le=90, alias="destLat"),
    dest_lng: float = Query(..., ge=-180, le=180, alias="destLng")
):
    """
    Great-circle distance between origin and destination markers
    """
    distance = haversine_km(origin_lat, origin_lng, dest_lat, dest_lng)
    return DistanceResponse(distance_km=round(distance, 1))
