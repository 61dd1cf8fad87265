from typing import Optional

from fastapi import Query

from ship_registry.models.enums import ShipType
from ship_registry.services.query_builder import ShipFilter

# Crew size filters are 32-bit integers on the wire
INT_MIN = -2**31
INT_MAX = 2**31 - 1


def get_ship_filters(
    name: Optional[str] = None,
    planet: Optional[str] = None,
    ship_type: Optional[ShipType] = Query(None, alias="shipType"),
    after: Optional[int] = Query(None, description="Earliest production date, epoch millis"),
    before: Optional[int] = Query(None, description="Latest production date, epoch millis"),
    is_used: Optional[bool] = Query(None, alias="isUsed"),
    min_speed: Optional[float] = Query(None, alias="minSpeed"),
    max_speed: Optional[float] = Query(None, alias="maxSpeed"),
    min_crew_size: Optional[int] = Query(None, alias="minCrewSize", ge=INT_MIN, le=INT_MAX),
    max_crew_size: Optional[int] = Query(None, alias="maxCrewSize", ge=INT_MIN, le=INT_MAX),
    min_rating: Optional[float] = Query(None, alias="minRating"),
    max_rating: Optional[float] = Query(None, alias="maxRating"),
) -> ShipFilter:
    """
    Collects the filter query parameters shared by the list and count endpoints.
    """
    return ShipFilter(
        name=name,
        planet=planet,
        ship_type=ship_type,
        after=after,
        before=before,
        is_used=is_used,
        min_speed=min_speed,
        max_speed=max_speed,
        min_crew_size=min_crew_size,
        max_crew_size=max_crew_size,
        min_rating=min_rating,
        max_rating=max_rating,
    )
