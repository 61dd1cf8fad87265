from sqlalchemy import Column, Integer, String, Boolean, Date, Float, Enum as SQLEnum

from ship_registry.core.database import Base
from ship_registry.models.enums import ShipType

class Ship(Base):
    __tablename__ = "ships"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)

    name = Column(String(50), nullable=False)       # e.g., "Orion III"
    planet = Column(String(50), nullable=False)     # e.g., "Mars"
    ship_type = Column(SQLEnum(ShipType, name="shiptype"), nullable=False)
    prod_date = Column(Date, nullable=False)        # only the year matters

    is_used = Column(Boolean, nullable=False, default=False)
    speed = Column(Float, nullable=False)
    crew_size = Column(Integer, nullable=False)

    # Derived from speed, is_used and prod_date on every write
    rating = Column(Float, nullable=False)

    def __repr__(self):
        return f"<Ship id={self.id} name={self.name!r} rating={self.rating}>"
