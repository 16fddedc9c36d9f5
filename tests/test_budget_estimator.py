import pytest
from app.services.budget_estimator import (
    estimate_breakdown,
    manual_breakdown,
    to_manual_fields,
    to_amount,
    SEASON_MULTIPLIERS
)

CATEGORIES = ["accommodation", "transportation", "food", "activities", "miscellaneous"]

def test_manual_total_example():
    breakdown = manual_breakdown({
        "accommodation": 20000,
        "transportation": 10000,
        "food": 8000,
        "activities": 5000,
        "miscellaneous": 2000
    })

    assert breakdown["total"] == 45000
    assert breakdown["food"] == 8000

@pytest.mark.parametrize("values", [
    {"accommodation": 0.1, "transportation": 0.2, "food": 0.3, "activities": 0.4, "miscellaneous": 0.5},
    {"accommodation": 1e9, "transportation": 0, "food": 3.25, "activities": 7, "miscellaneous": 0},
])
def test_manual_total_is_exact_sum(values):
    breakdown = manual_breakdown(values)
    assert breakdown["total"] == sum(values[c] for c in CATEGORIES)

def test_manual_defaults_missing_and_non_numeric_to_zero():
    breakdown = manual_breakdown({"accommodation": "15000", "food": "", "activities": "abc"})

    assert breakdown == {
        "accommodation": 15000.0,
        "transportation": 0.0,
        "food": 0.0,
        "activities": 0.0,
        "miscellaneous": 0.0,
        "total": 15000.0
    }

def test_manual_rejects_negative_amounts():
    with pytest.raises(ValueError):
        manual_breakdown({"food": -100})

def test_to_amount_accepts_thousands_separator():
    assert to_amount("12,500") == 12500.0
    assert to_amount(None) == 0.0

def test_adjust_copies_exact_smart_values():
    smart = estimate_breakdown("Hunza Valley", 2, 5, "peak")
    fields = to_manual_fields(smart)

    assert set(fields) == set(CATEGORIES)
    for category in CATEGORIES:
        assert fields[category] == smart[category]

def test_smart_breakdown_total_matches_categories():
    breakdown = estimate_breakdown("Lahore", 3, 4, "shoulder")
    assert breakdown["total"] == pytest.approx(sum(breakdown[c] for c in CATEGORIES), abs=0.01)
    assert all(breakdown[c] >= 0 for c in CATEGORIES)

def test_smart_breakdown_uses_season_multiplier():
    peak = estimate_breakdown("Skardu", 2, 5, "peak")
    off_peak = estimate_breakdown("Skardu", 2, 5, "off-peak")

    ratio = SEASON_MULTIPLIERS["peak"] / SEASON_MULTIPLIERS["off-peak"]
    assert peak["total"] == pytest.approx(off_peak["total"] * ratio, rel=1e-4)

def test_smart_breakdown_prefers_catalog_cost():
    default = estimate_breakdown("Somewhere", 1, 1, "shoulder")
    catalog = estimate_breakdown("Somewhere", 1, 1, "shoulder", daily_cost=10000)

    # 40% of the daily cost goes to accommodation
    assert catalog["accommodation"] == 4000
    assert default["accommodation"] == 1800

@pytest.mark.parametrize("members,days,season", [
    (0, 5, "peak"),
    (2, 0, "peak"),
    (2, 5, "winter"),
])
def test_smart_breakdown_rejects_invalid_trip(members, days, season):
    with pytest.raises(ValueError):
        estimate_breakdown("Lahore", members, days, season)
