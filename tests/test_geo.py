import pytest
from app.core.geo import haversine_km, distances_km

LAHORE = (31.5204, 74.3587)
HUNZA = (36.3167, 74.6500)
ISLAMABAD = (33.6844, 73.0479)

def test_distance_to_self_is_zero():
    assert haversine_km(*LAHORE, *LAHORE) == 0

def test_distance_is_symmetric():
    assert haversine_km(*LAHORE, *HUNZA) == pytest.approx(haversine_km(*HUNZA, *LAHORE))

def test_lahore_to_hunza():
    # Roughly 534 km great-circle distance
    assert round(haversine_km(*LAHORE, *HUNZA)) == pytest.approx(534, abs=2)

def test_vectorised_matches_scalar():
    distances = distances_km(*LAHORE, [HUNZA[0], ISLAMABAD[0], LAHORE[0]], [HUNZA[1], ISLAMABAD[1], LAHORE[1]])

    assert distances[0] == pytest.approx(haversine_km(*LAHORE, *HUNZA))
    assert distances[1] == pytest.approx(haversine_km(*LAHORE, *ISLAMABAD))
    assert distances[2] == pytest.approx(0)
