"""
Destination catalog queries (Travel Hub, Places to Stay, Travel Map)
"""

from typing import Dict, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_, or_, func

from app.core.geo import distances_km
from app.models.destination import Destination, Accommodation

LIKE_ESCAPE = "\\"

POPULAR_LIMIT = 6
SEARCH_LIMIT = 10
MAP_DESTINATION_LIMIT = 20
MAP_PLACE_LIMIT = 50

def contains_pattern(text: str) -> str:
    """Case-insensitive LIKE pattern matching text literally"""
    text = text.strip().lower()
    for char in (LIKE_ESCAPE, "%", "_"):
        text = text.replace(char, LIKE_ESCAPE + char)
    return f"%{text}%"

class DestinationCatalog:
    """
    Read-only access to destinations and their accommodations
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_destinations(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None
    ) -> List[Destination]:
        query = select(Destination)

        if search:
            pattern = contains_pattern(search)
            query = query.where(
                or_(
                    func.lower(Destination.name).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(Destination.city).like(pattern, escape=LIKE_ESCAPE)
                )
            )

        if category:
            query = query.where(func.lower(Destination.category) == category.lower())

        query = query.order_by(Destination.is_popular.desc(), Destination.name.asc())

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def search(self, text: Optional[str], limit: int = SEARCH_LIMIT) -> List[Destination]:
        """
        Dashboard search over name, city and country
        """
        if not text or not text.strip():
            return []

        pattern = contains_pattern(text)
        query = (
            select(Destination)
            .where(
                or_(
                    func.lower(Destination.name).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(Destination.city).like(pattern, escape=LIKE_ESCAPE),
                    func.lower(Destination.country).like(pattern, escape=LIKE_ESCAPE)
                )
            )
            .order_by(Destination.name.asc())
            .limit(limit)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_destination(self, destination_id: int) -> Optional[Destination]:
        result = await self.db.execute(select(Destination).where(Destination.id == destination_id))
        return result.scalar_one_or_none()

    async def find_by_name(self, name: str) -> Optional[Destination]:
        """First destination whose name contains the given text"""
        matches = await self.list_destinations(search=name)
        name_lower = name.strip().lower()
        for destination in matches:
            if name_lower in (destination.name or '').lower():
                return destination
        return matches[0] if matches else None

    async def popular_destinations(self, limit: int = POPULAR_LIMIT) -> List[Destination]:
        """
        Popular destinations, or the newest ones when none is marked popular
        """
        query = (
            select(Destination)
            .where(Destination.is_popular == True)
            .order_by(Destination.rating.desc(), Destination.name.asc())
            .limit(limit)
        )
        result = await self.db.execute(query)
        destinations = list(result.scalars().all())
        if destinations:
            return destinations

        query = (
            select(Destination)
            .order_by(Destination.created_at.desc(), Destination.id.desc())
            .limit(limit)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def map_data(self, destination_id: Optional[int] = None) -> Dict[str, List]:
        """
        Map markers. With a destination id: that destination and its places;
        otherwise popular destinations plus places that have coordinates.
        """
        if destination_id is not None:
            destination = await self.get_destination(destination_id)
            if not destination:
                return {'destinations': [], 'hotels': [], 'restaurants': []}
            return {
                'destinations': [destination],
                'hotels': await self.list_accommodations('hotel', destination_id=destination_id),
                'restaurants': await self.list_accommodations('restaurant', destination_id=destination_id)
            }

        result = await self.db.execute(
            select(Destination)
            .where(Destination.is_popular == True)
            .order_by(Destination.name.asc())
            .limit(MAP_DESTINATION_LIMIT)
        )
        destinations = list(result.scalars().all())

        places = {}
        for kind in ('hotel', 'restaurant'):
            result = await self.db.execute(
                select(Accommodation)
                .where(
                    and_(
                        Accommodation.kind == kind,
                        Accommodation.latitude.isnot(None),
                        Accommodation.longitude.isnot(None)
                    )
                )
                .order_by(Accommodation.name.asc())
                .limit(MAP_PLACE_LIMIT)
            )
            places[kind] = list(result.scalars().all())

        return {
            'destinations': destinations,
            'hotels': places['hotel'],
            'restaurants': places['restaurant']
        }

    async def nearby_destinations(self, destination: Destination, radius_km: float) -> List[Dict]:
        """
        Other catalog destinations within radius_km, nearest first
        """
        if destination.latitude is None or destination.longitude is None:
            raise ValueError(f"Destination '{destination.name}' has no coordinates")

        stmt = select(Destination).where(
            and_(
                Destination.id != destination.id,
                Destination.latitude.isnot(None),
                Destination.longitude.isnot(None)
            )
        )
        result = await self.db.execute(stmt)
        candidates = list(result.scalars().all())
        if not candidates:
            return []

        distances = distances_km(
            destination.latitude,
            destination.longitude,
            [candidate.latitude for candidate in candidates],
            [candidate.longitude for candidate in candidates]
        )

        nearby = [
            (candidate, round(float(distance), 1))
            for candidate, distance in zip(candidates, distances)
            if distance <= radius_km
        ]
        nearby.sort(key=lambda item: item[1])
        return [{'destination': candidate, 'distance_km': distance} for candidate, distance in nearby]

    async def list_accommodations(self, kind: str, destination_id: Optional[int] = None) -> List[Accommodation]:
        query = select(Accommodation).where(Accommodation.kind == kind)

        if destination_id is not None:
            query = query.where(Accommodation.destination_id == destination_id)

        query = query.order_by(Accommodation.rating.desc(), Accommodation.name.asc())

        result = await self.db.execute(query)
        return list(result.scalars().all())
