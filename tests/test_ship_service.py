"""
Unit tests for the pure parts of the ship service: paging and update merging.
"""
from datetime import date

import pytest

import seed
from ship_registry.models.enums import ShipType
from ship_registry.models.ship import Ship
from ship_registry.schemas.ship import ShipCreate, ShipUpdate
from ship_registry.services.rating import is_valid_ship
from ship_registry.services.ship_service import merge_ship, paginate


class TestPaginate:

    ITEMS = list(range(10))

    @pytest.mark.parametrize("page_number, page_size, expected", [
        (0, 3, [0, 1, 2]),
        (1, 3, [3, 4, 5]),
        (3, 3, [9]),
        (0, 10, list(range(10))),
        (0, 25, list(range(10))),
    ])
    def test_pages(self, page_number, page_size, expected):
        assert paginate(self.ITEMS, page_number, page_size) == expected

    def test_page_past_the_end_is_empty(self):
        assert paginate(self.ITEMS, 4, 3) == []
        assert paginate(self.ITEMS, 100, 50) == []

    def test_empty_inputs(self):
        assert paginate([], 0, 3) == []
        assert paginate(self.ITEMS, 0, 0) == []


class TestMergeShip:

    def make_stored_ship(self) -> Ship:
        return Ship(
            id=7,
            name="Nostromo",
            planet="Saturn",
            ship_type=ShipType.MERCHANT,
            prod_date=date(3017, 5, 9),
            is_used=True,
            speed=0.22,
            crew_size=7,
            rating=1.47,
        )

    def test_only_non_null_fields_override(self):
        ship = self.make_stored_ship()
        merged = merge_ship(ship, ShipUpdate(speed=0.9, name=None))

        assert merged.speed == 0.9
        assert merged.name == "Nostromo"
        assert merged.planet == "Saturn"
        assert merged.ship_type == ShipType.MERCHANT
        assert merged.prod_date == date(3017, 5, 9)
        assert merged.is_used is True
        assert merged.crew_size == 7

    def test_stored_ship_is_not_touched(self):
        ship = self.make_stored_ship()
        merge_ship(ship, ShipUpdate(crew_size=0, planet="Pluto"))

        assert ship.crew_size == 7
        assert ship.planet == "Saturn"

    def test_false_is_an_override(self):
        merged = merge_ship(self.make_stored_ship(), ShipUpdate(is_used=False))
        assert merged.is_used is False

    def test_empty_update_keeps_everything(self):
        merged = merge_ship(self.make_stored_ship(), ShipUpdate())
        assert is_valid_ship(merged)
        assert merged.speed == 0.22


def test_demo_fleet_is_valid():
    for data in seed.DEMO_SHIPS:
        assert is_valid_ship(ShipCreate(**data)), data["name"]
