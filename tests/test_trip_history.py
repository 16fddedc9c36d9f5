import csv
import io
from datetime import date
from types import SimpleNamespace

import pytest
from app.services.trip_history import (
    compute_stats,
    filter_trips,
    export_csv,
    export_filename,
    edit_form,
    share_text
)

TODAY = date(2026, 10, 19)

def make_trip(destination, status="planned", start_date=None, days=3, total=10000.0, **kwargs):
    fields = dict(
        destination=destination,
        status=status,
        start_date=start_date,
        end_date=None,
        days=days,
        total=total,
        currency="PKR",
        accommodation=None,
        rating=None,
        notes=None
    )
    fields.update(kwargs)
    return SimpleNamespace(**fields)

@pytest.fixture
def trips():
    return [
        make_trip("Hunza Valley", "completed", date(2026, 10, 1), days=5, total=45000),
        make_trip("Lahore", "planned", date(2026, 8, 1), days=2, total=12000),
        make_trip("Hunza Valley", "cancelled", date(2025, 12, 1), days=4, total=30000),
        make_trip("Skardu", "confirmed", None, days=6, total=52000.5),
    ]

def test_compute_stats(trips):
    stats = compute_stats(trips)

    assert stats == {
        "total_trips": 4,
        "destinations_visited": 3,
        "days_traveled": 17,
        "total_spent": 139000.5
    }

def test_compute_stats_empty():
    assert compute_stats([]) == {
        "total_trips": 0,
        "destinations_visited": 0,
        "days_traveled": 0,
        "total_spent": 0.0
    }

def test_filter_by_status_is_exact(trips):
    filtered = filter_trips(trips, status="completed", today=TODAY)

    assert len(filtered) == 1
    assert all(trip.status == "completed" for trip in filtered)

def test_filter_by_destination_is_exact(trips):
    filtered = filter_trips(trips, destination="Hunza Valley", today=TODAY)
    assert [trip.status for trip in filtered] == ["completed", "cancelled"]

    assert filter_trips(trips, destination="hunza valley", today=TODAY) == []

def test_filter_by_time_period(trips):
    last_month = filter_trips(trips, time_period="last-month", today=TODAY)
    last_quarter = filter_trips(trips, time_period="last-3-months", today=TODAY)
    last_year = filter_trips(trips, time_period="last-year", today=TODAY)

    assert [trip.destination for trip in last_month] == ["Hunza Valley"]
    assert [trip.destination for trip in last_quarter] == ["Hunza Valley", "Lahore"]
    # Trips without a start date never match a time window
    assert len(last_year) == 3

def test_filter_includes_future_start_dates(trips):
    upcoming = make_trip("Swat Valley", start_date=date(2026, 12, 25))
    assert filter_trips([upcoming], time_period="last-month", today=TODAY) == [upcoming]

def test_filter_rejects_unknown_period(trips):
    with pytest.raises(ValueError):
        filter_trips(trips, time_period="last-decade")

def test_export_csv_rows(trips):
    filtered = filter_trips(trips, status="completed", today=TODAY)
    content = export_csv(filtered)
    rows = list(csv.reader(io.StringIO(content)))

    assert len(rows) == len(filtered) + 1
    assert rows[0] == ["Destination", "Start Date", "Total Cost", "Status"]
    assert rows[1][0] == "Hunza Valley"
    assert rows[1][1] == "2026-10-01"

def test_export_csv_quotes_commas_and_defaults():
    trip = make_trip("Murree, Galyat", status=None, start_date=None, total=None)
    rows = list(csv.reader(io.StringIO(export_csv([trip]))))

    assert len(rows) == 2
    assert rows[1] == ["Murree, Galyat", "N/A", "0", "planned"]

def test_export_csv_header_only_when_empty():
    rows = list(csv.reader(io.StringIO(export_csv([]))))
    assert rows == [["Destination", "Start Date", "Total Cost", "Status"]]

def test_export_filename():
    assert export_filename(TODAY) == "travel-history-2026-10-19.csv"

def test_edit_form_derives_end_date():
    trip = make_trip("Lahore", status=None, start_date=date(2026, 11, 1), days=5)
    form = edit_form(trip)

    assert form["status"] == "planned"
    assert form["end_date"] == date(2026, 11, 6)
    assert form["notes"] == ""

def test_edit_form_keeps_existing_end_date():
    trip = make_trip("Lahore", start_date=date(2026, 11, 1), end_date=date(2026, 11, 3))
    assert edit_form(trip)["end_date"] == date(2026, 11, 3)

def test_share_text():
    trip = make_trip("Hunza Valley", days=5, total=45000)
    share = share_text(trip)

    assert share["title"] == "Trip to Hunza Valley"
    assert share["text"] == "I'm planning a trip to Hunza Valley! 5 days, Budget: PKR 45,000"

def test_export_csv_amounts_keep_whole_numbers_whole():
    trips = [
        make_trip("Hunza Valley", total=45000.0),
        make_trip("Skardu", total=52000.5)
    ]
    rows = list(csv.reader(io.StringIO(export_csv(trips))))

    assert [row[2] for row in rows[1:]] == ["45000", "52000.5"]
