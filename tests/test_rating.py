"""
Unit tests for the rating formula and ship field validation.
"""
from datetime import date

import pytest

from ship_registry.schemas.ship import ShipCreate
from ship_registry.services.rating import compute_rating, is_valid_ship, rate_ship


def make_ship(**overrides) -> ShipCreate:
    data = {
        "name": "Orion",
        "planet": "Mars",
        "ship_type": "MILITARY",
        "prod_date": date(3000, 6, 1),
        "is_used": False,
        "speed": 0.5,
        "crew_size": 100,
    }
    data.update(overrides)
    return ShipCreate(**data)


class TestComputeRating:

    def test_new_ship_built_this_year(self):
        assert compute_rating(0.5, False, 3019) == 40.0

    def test_used_ship_is_halved_and_rounded(self):
        # 80 * 0.5 * 0.5 / 6 = 3.333...
        assert compute_rating(0.5, True, 3014) == 3.33

    def test_older_ships_rate_lower(self):
        assert compute_rating(0.9, False, 2900) < compute_rating(0.9, False, 3000)

    def test_rate_ship_uses_production_year(self):
        ship = make_ship(speed=0.5, is_used=True, prod_date=date(3014, 12, 31))
        assert rate_ship(ship) == 3.33


class TestIsValidShip:

    def test_valid_ship(self):
        assert is_valid_ship(make_ship())

    @pytest.mark.parametrize("speed", [0.1, 0.99])
    def test_speed_bounds_accepted(self, speed):
        assert is_valid_ship(make_ship(speed=speed))

    @pytest.mark.parametrize("speed", [0.099, 1.0, None])
    def test_speed_out_of_bounds_rejected(self, speed):
        assert not is_valid_ship(make_ship(speed=speed))

    @pytest.mark.parametrize("crew_size", [1, 9999])
    def test_crew_size_bounds_accepted(self, crew_size):
        assert is_valid_ship(make_ship(crew_size=crew_size))

    @pytest.mark.parametrize("crew_size", [0, 10000, None])
    def test_crew_size_out_of_bounds_rejected(self, crew_size):
        assert not is_valid_ship(make_ship(crew_size=crew_size))

    @pytest.mark.parametrize("year", [2800, 3019])
    def test_production_year_bounds_accepted(self, year):
        assert is_valid_ship(make_ship(prod_date=date(year, 1, 1)))

    @pytest.mark.parametrize("year", [2799, 3020])
    def test_production_year_out_of_bounds_rejected(self, year):
        assert not is_valid_ship(make_ship(prod_date=date(year, 1, 1)))

    def test_missing_production_date_rejected(self):
        assert not is_valid_ship(make_ship(prod_date=None))

    @pytest.mark.parametrize("field", ["name", "planet"])
    def test_text_length_limits(self, field):
        assert is_valid_ship(make_ship(**{field: "x" * 50}))
        assert not is_valid_ship(make_ship(**{field: "x" * 51}))
        assert not is_valid_ship(make_ship(**{field: ""}))
        assert not is_valid_ship(make_ship(**{field: None}))
