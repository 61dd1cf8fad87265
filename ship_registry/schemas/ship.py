from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from ship_registry.core.dates import date_from_millis, millis_from_date
from ship_registry.models.enums import ShipType

# Every field is optional at the schema level: completeness and bounds are
# checked by the rating/validation engine so that bad ships answer 400.

class ShipBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    name: Optional[str] = None
    planet: Optional[str] = None
    ship_type: Optional[ShipType] = None
    prod_date: Optional[date] = None     # epoch millis or "YYYY-MM-DD" on the wire
    is_used: Optional[bool] = None
    speed: Optional[float] = None
    crew_size: Optional[int] = None

    @field_validator("prod_date", mode="before")
    @classmethod
    def parse_epoch_millis(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return date_from_millis(value)
        return value

# Input Schema: full ship payload (id and rating are never taken from clients)
class ShipCreate(ShipBase):
    pass

# Input Schema: partial payload, null/missing fields keep their stored value
class ShipUpdate(ShipBase):
    pass

# Output Schema
class ShipResponse(ShipBase):
    id: int
    name: str
    planet: str
    ship_type: ShipType
    prod_date: date
    is_used: bool
    speed: float
    crew_size: int
    rating: float

    @field_serializer("prod_date")
    def serialize_prod_date(self, value: date) -> int:
        return millis_from_date(value)
