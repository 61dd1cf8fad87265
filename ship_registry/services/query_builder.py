"""
Filter/sort query construction for ship listing and counting.

Each filter that is set adds one predicate; predicates are AND-ed together.
Unset filters don't constrain the result.
"""
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import Select, func, select

from ship_registry.core.dates import date_from_millis
from ship_registry.models.enums import ShipOrder, ShipType
from ship_registry.models.ship import Ship


@dataclass(frozen=True)
class ShipFilter:
    """Optional filters of a list/count request. ``after``/``before`` are epoch millis."""
    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = None
    after: Optional[int] = None
    before: Optional[int] = None
    is_used: Optional[bool] = None
    min_speed: Optional[float] = None
    max_speed: Optional[float] = None
    min_crew_size: Optional[int] = None
    max_crew_size: Optional[int] = None
    min_rating: Optional[float] = None
    max_rating: Optional[float] = None


def _conditions(filters: ShipFilter) -> list:
    conditions = []

    # Substring matches; '%' and '_' in the filter value match literally
    if filters.name is not None:
        conditions.append(Ship.name.contains(filters.name, autoescape=True))
    if filters.planet is not None:
        conditions.append(Ship.planet.contains(filters.planet, autoescape=True))

    if filters.ship_type is not None:
        conditions.append(Ship.ship_type == filters.ship_type)
    if filters.is_used is not None:
        conditions.append(Ship.is_used == filters.is_used)

    if filters.after is not None:
        conditions.append(Ship.prod_date >= date_from_millis(filters.after))
    if filters.before is not None:
        conditions.append(Ship.prod_date <= date_from_millis(filters.before))

    if filters.min_speed is not None:
        conditions.append(Ship.speed >= filters.min_speed)
    if filters.max_speed is not None:
        conditions.append(Ship.speed <= filters.max_speed)

    if filters.min_crew_size is not None:
        conditions.append(Ship.crew_size >= filters.min_crew_size)
    if filters.max_crew_size is not None:
        conditions.append(Ship.crew_size <= filters.max_crew_size)

    if filters.min_rating is not None:
        conditions.append(Ship.rating >= filters.min_rating)
    if filters.max_rating is not None:
        conditions.append(Ship.rating <= filters.max_rating)

    return conditions


def build_ship_query(filters: ShipFilter, order: Optional[ShipOrder] = None) -> Select:
    """SELECT of the matching ships, ascending by ``order`` when given."""
    query = select(Ship)
    conditions = _conditions(filters)
    if conditions:
        query = query.where(*conditions)
    if order is not None:
        query = query.order_by(getattr(Ship, order.field_name).asc())
    return query


def count_ship_query(filters: ShipFilter) -> Select:
    """SELECT COUNT(*) over the same predicates as build_ship_query."""
    return select(func.count()).select_from(build_ship_query(filters).subquery())
