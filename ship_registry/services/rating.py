"""
Ship rating and field validation.

Pure functions: nothing here touches the database. ``is_valid_ship`` accepts
anything exposing the Ship attribute names, so it works on ORM rows and on
pydantic payloads alike.
"""
from typing import Any

# The registry's "current" year. A constant of the domain, not the wall clock.
CURRENT_YEAR = 3019

MIN_PROD_YEAR = 2800
MAX_PROD_YEAR = 3019
MAX_TEXT_LENGTH = 50
MIN_SPEED = 0.1
MAX_SPEED = 0.99
MIN_CREW_SIZE = 1
MAX_CREW_SIZE = 9999

USED_COEFFICIENT = 0.5
NEW_COEFFICIENT = 1.0


def compute_rating(speed: float, is_used: bool, prod_year: int) -> float:
    """
    rating = 80 * speed * k / (CURRENT_YEAR - prod_year + 1), rounded to 2 places,
    where k is 0.5 for used ships and 1 otherwise.
    """
    coefficient = USED_COEFFICIENT if is_used else NEW_COEFFICIENT
    return round((80 * speed * coefficient) / (CURRENT_YEAR - prod_year + 1), 2)


def rate_ship(ship: Any) -> float:
    """Rating of a validated ship (needs speed, is_used and prod_date)."""
    return compute_rating(ship.speed, bool(ship.is_used), ship.prod_date.year)


def _valid_text(value) -> bool:
    return value is not None and 0 < len(value) <= MAX_TEXT_LENGTH


def is_valid_ship(ship: Any) -> bool:
    """True when every field constraint holds. Call it on a fully merged ship."""
    if not _valid_text(ship.name) or not _valid_text(ship.planet):
        return False
    if ship.speed is None or not MIN_SPEED <= ship.speed <= MAX_SPEED:
        return False
    if ship.crew_size is None or not MIN_CREW_SIZE <= ship.crew_size <= MAX_CREW_SIZE:
        return False
    if ship.prod_date is None:
        return False
    return MIN_PROD_YEAR <= ship.prod_date.year <= MAX_PROD_YEAR
