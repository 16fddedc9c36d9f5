"""
Travel History
Stats, filters and CSV export over a user's (non bucket list) trips
"""

from datetime import date
from typing import Dict, Iterable, List, Optional

import pandas as pd

from app.core.datetime_utils import days_since, derive_end_date

TIME_PERIODS = {
    'last-month': 30,
    'last-3-months': 90,
    'last-year': 365
}

CSV_COLUMNS = ['Destination', 'Start Date', 'Total Cost', 'Status']

def compute_stats(trips: Iterable) -> Dict:
    total_trips = 0
    destinations = set()
    days_traveled = 0
    total_spent = 0.0

    for trip in trips:
        total_trips += 1
        destinations.add(trip.destination)
        days_traveled += trip.days or 0
        total_spent += trip.total or 0.0

    return {
        'total_trips': total_trips,
        'destinations_visited': len(destinations),
        'days_traveled': days_traveled,
        'total_spent': total_spent
    }

def filter_trips(
    trips: Iterable,
    status: str = 'all',
    time_period: str = 'all',
    destination: str = 'all',
    today: Optional[date] = None
) -> List:
    """
    Filter trips in memory. Time windows are measured from the start date;
    trips without one only pass the 'all' window.
    """
    if time_period != 'all' and time_period not in TIME_PERIODS:
        raise ValueError(f"Unknown time period '{time_period}'")

    filtered = list(trips)

    if status != 'all':
        filtered = [trip for trip in filtered if trip.status == status]

    if destination != 'all':
        filtered = [trip for trip in filtered if trip.destination == destination]

    if time_period != 'all':
        window = TIME_PERIODS[time_period]
        filtered = [
            trip for trip in filtered
            if trip.start_date and days_since(trip.start_date, today) <= window
        ]

    return filtered

def format_amount(value) -> str:
    """Whole amounts without a trailing .0"""
    value = float(value or 0)
    return str(int(value)) if value.is_integer() else str(value)

def export_csv(trips: Iterable) -> str:
    rows = [
        [
            trip.destination,
            trip.start_date.isoformat() if trip.start_date else 'N/A',
            format_amount(trip.total),
            trip.status or 'planned'
        ]
        for trip in trips
    ]
    df = pd.DataFrame(rows, columns=CSV_COLUMNS)
    return df.to_csv(index=False, lineterminator='\n')

def export_filename(today: Optional[date] = None) -> str:
    if today is None:
        today = date.today()
    return f"travel-history-{today.isoformat()}.csv"

def edit_form(trip) -> Dict:
    """Prefill for the trip edit modal"""
    end_date = trip.end_date or derive_end_date(trip.start_date, trip.days)
    return {
        'status': trip.status or 'planned',
        'start_date': trip.start_date,
        'end_date': end_date,
        'accommodation': trip.accommodation or '',
        'rating': trip.rating,
        'notes': trip.notes or ''
    }

def share_text(trip) -> Dict:
    return {
        'title': f"Trip to {trip.destination}",
        'text': (
            f"I'm planning a trip to {trip.destination}! {trip.days} days, "
            f"Budget: {trip.currency or 'PKR'} {trip.total or 0:,.0f}"
        )
    }
