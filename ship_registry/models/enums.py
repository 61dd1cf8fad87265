import enum

# --- SHIP TYPES ---
class ShipType(str, enum.Enum):
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"

# --- SORT KEYS ---
# Clients send the member name (?order=SPEED); field_name is the Ship attribute.
class ShipOrder(str, enum.Enum):
    ID = "ID"
    SPEED = "SPEED"
    DATE = "DATE"
    RATING = "RATING"

    @property
    def field_name(self) -> str:
        return _ORDER_FIELDS[self]


_ORDER_FIELDS = {
    ShipOrder.ID: "id",
    ShipOrder.SPEED: "speed",
    ShipOrder.DATE: "prod_date",
    ShipOrder.RATING: "rating",
}
