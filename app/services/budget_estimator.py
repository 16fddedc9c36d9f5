"""
Money Map Budget Estimator
Estimates trip costs across the five budget categories
"""

import logging
from typing import Dict, Mapping, Optional, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from app.config import settings
from app.models.budget_record import BREAKDOWN_CATEGORIES
from app.models.destination import Destination

logger = logging.getLogger(__name__)

SEASON_MULTIPLIERS = {
    'peak': 1.3,
    'shoulder': 1.0,
    'off-peak': 0.8
}

# Base cost per person per day (PKR) by destination type
NORTHERN_AREAS = ['hunza', 'skardu', 'swat', 'naran', 'kaghan', 'fairy meadows', 'neelum',
                  'chitral', 'gilgit', 'kalash', 'deosai', 'khunjerab', 'shogran']
MAJOR_CITIES = ['lahore', 'karachi', 'islamabad', 'rawalpindi', 'peshawar', 'multan', 'faisalabad']
NORTHERN_DAILY_COST = 6000
CITY_DAILY_COST = 5000
DEFAULT_DAILY_COST = 4500

# Round-trip intercity fare per traveller
NORTHERN_FARE = 12000
DEFAULT_FARE = 6000

CATEGORY_SHARES = {
    'accommodation': 0.40,
    'food': 0.30,
    'activities': 0.15,
    'transportation': 0.15
}
MISCELLANEOUS_RATE = 0.10

def to_amount(value: Any) -> float:
    """
    Parse a manual form entry. Missing, blank and non-numeric entries are 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(',', '')
        if not value:
            return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if amount != amount:  # NaN
        return 0.0
    if amount < 0:
        raise ValueError("Budget amounts cannot be negative")
    return amount

def manual_breakdown(values: Mapping[str, Any]) -> Dict[str, float]:
    """
    Build a manual breakdown; total is the exact sum of the five categories
    """
    breakdown = {category: to_amount(values.get(category)) for category in BREAKDOWN_CATEGORIES}
    breakdown['total'] = sum(breakdown[category] for category in BREAKDOWN_CATEGORIES)
    return breakdown

def to_manual_fields(breakdown: Mapping[str, Any]) -> Dict[str, float]:
    """
    Copy a smart breakdown into editable manual fields (one-way)
    """
    return {category: breakdown.get(category) or 0.0 for category in BREAKDOWN_CATEGORIES}

def breakdown_total(breakdown: Mapping[str, Any]) -> float:
    return sum(float(breakdown.get(category) or 0.0) for category in BREAKDOWN_CATEGORIES)

def base_daily_cost(destination: str) -> float:
    destination_lower = destination.lower()
    if any(place in destination_lower for place in NORTHERN_AREAS):
        return NORTHERN_DAILY_COST
    if any(city in destination_lower for city in MAJOR_CITIES):
        return CITY_DAILY_COST
    return DEFAULT_DAILY_COST

def intercity_fare(destination: str) -> float:
    destination_lower = destination.lower()
    if any(place in destination_lower for place in NORTHERN_AREAS):
        return NORTHERN_FARE
    return DEFAULT_FARE

def validate_trip(destination: str, number_of_members: int, days: int, season: str):
    if not destination or not destination.strip():
        raise ValueError("Destination is required")
    if number_of_members < 1:
        raise ValueError("Number of members must be at least 1")
    if days < 1:
        raise ValueError("Trip must last at least 1 day")
    if season not in SEASON_MULTIPLIERS:
        raise ValueError(f"Unknown season '{season}'")

def estimate_breakdown(
    destination: str,
    number_of_members: int,
    days: int,
    season: str,
    daily_cost: Optional[float] = None
) -> Dict[str, float]:
    """
    Estimate trip costs

    Season Multipliers:
    - peak: 1.3x
    - shoulder: 1.0x
    - off-peak: 0.8x
    """
    validate_trip(destination, number_of_members, days, season)

    multiplier = SEASON_MULTIPLIERS[season]
    if daily_cost is None:
        daily_cost = base_daily_cost(destination)

    cost_per_day = daily_cost * multiplier
    person_days = days * number_of_members

    accommodation = cost_per_day * CATEGORY_SHARES['accommodation'] * person_days
    food = cost_per_day * CATEGORY_SHARES['food'] * person_days
    activities = cost_per_day * CATEGORY_SHARES['activities'] * person_days

    local_transport = cost_per_day * CATEGORY_SHARES['transportation'] * person_days
    travel_to_destination = intercity_fare(destination) * multiplier * number_of_members
    transportation = local_transport + travel_to_destination

    subtotal = accommodation + food + activities + transportation
    miscellaneous = subtotal * MISCELLANEOUS_RATE

    breakdown = {
        'accommodation': round(accommodation, 2),
        'transportation': round(transportation, 2),
        'food': round(food, 2),
        'activities': round(activities, 2),
        'miscellaneous': round(miscellaneous, 2)
    }
    breakdown['total'] = round(breakdown_total(breakdown), 2)
    return breakdown

def build_insights(destination: str, number_of_members: int, days: int, season: str, breakdown: Dict[str, float]) -> str:
    per_person = breakdown['total'] / number_of_members
    largest = max(BREAKDOWN_CATEGORIES, key=lambda category: breakdown[category])

    parts = [
        f"A {days}-day trip to {destination} for {number_of_members} "
        f"{'traveler' if number_of_members == 1 else 'travelers'} comes to about "
        f"PKR {breakdown['total']:,.0f} (PKR {per_person:,.0f} per person).",
        f"{largest.capitalize()} is the largest share of the budget."
    ]
    if season == 'peak':
        parts.append("Peak season pushes prices up by around 30%; book stays early or travel in the shoulder season to save.")
    elif season == 'off-peak':
        parts.append("Off-peak rates are about 20% lower, but check road and weather conditions before you go.")
    else:
        parts.append("Shoulder season offers a good balance of prices and weather.")
    if number_of_members >= 4:
        parts.append("Sharing rooms and a hired vehicle can cut accommodation and transport costs for a group this size.")
    return " ".join(parts)

class BudgetEstimator:
    """
    Smart budget estimates, preferring catalog costs for known destinations
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_catalog_daily_cost(self, destination: str) -> Optional[float]:
        stmt = select(Destination.average_daily_cost).where(
            func.lower(Destination.name) == destination.strip().lower()
        )
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def estimate(
        self,
        destination: str,
        number_of_members: int,
        days: int,
        season: str = 'peak'
    ) -> Dict:
        validate_trip(destination, number_of_members, days, season)

        daily_cost = await self.get_catalog_daily_cost(destination)
        breakdown = estimate_breakdown(destination, number_of_members, days, season, daily_cost)

        logger.info(
            "Estimated %s for %s travelers, %s days (%s): %.2f",
            destination, number_of_members, days, season, breakdown['total']
        )

        return {
            'destination': destination,
            'number_of_members': number_of_members,
            'days': days,
            'season': season,
            'breakdown': breakdown,
            'total': breakdown['total'],
            'per_person': round(breakdown['total'] / number_of_members, 2),
            'per_day': round(breakdown['total'] / days, 2),
            'currency': settings.CURRENCY,
            'insights': build_insights(destination, number_of_members, days, season, breakdown),
            'calculation_method': 'Smart'
        }
