import logging
from typing import List, Optional, Sequence, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from ship_registry.core.errors import InvalidShipError, ShipNotFoundError, ShipServiceError
from ship_registry.models.enums import ShipOrder
from ship_registry.models.ship import Ship
from ship_registry.schemas.ship import ShipBase, ShipCreate, ShipUpdate
from ship_registry.services.query_builder import ShipFilter, build_ship_query, count_ship_query
from ship_registry.services.rating import is_valid_ship, rate_ship

logger = logging.getLogger(__name__)

DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 3

T = TypeVar("T")


# --- PURE HELPERS ---

def paginate(items: Sequence[T], page_number: int, page_size: int) -> List[T]:
    """Items [page_number * page_size, min(start + page_size, total)); empty past the end."""
    start = page_number * page_size
    stop = min(start + page_size, len(items))
    if start >= len(items) or start > stop:
        return []
    return list(items[start:stop])


def merge_ship(ship: Ship, ship_in: ShipUpdate) -> ShipBase:
    """Detached copy of ``ship`` with every non-null field of ``ship_in`` applied."""
    current = ShipBase.model_validate(ship)
    return current.model_copy(update=ship_in.model_dump(exclude_none=True))


def _check_id(ship_id: int) -> None:
    if ship_id <= 0:
        raise InvalidShipError(f"Invalid ship id: {ship_id}")


# --- LISTING ---

async def list_ships(
    db: AsyncSession,
    filters: ShipFilter,
    order: Optional[ShipOrder] = None,
    page_number: int = DEFAULT_PAGE_NUMBER,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> List[Ship]:
    result = await db.execute(build_ship_query(filters, order))
    return paginate(result.scalars().all(), page_number, page_size)


async def count_ships(db: AsyncSession, filters: ShipFilter) -> int:
    result = await db.execute(count_ship_query(filters))
    return result.scalar_one()


# --- SINGLE SHIP OPERATIONS ---
# Anything unexpected here is reported as InvalidShipError (400), same as bad input.

async def get_ship(db: AsyncSession, ship_id: int) -> Ship:
    _check_id(ship_id)
    try:
        ship = await db.get(Ship, ship_id)
    except Exception as e:
        logger.error(f"❌ Error fetching ship {ship_id}: {str(e)}", exc_info=True)
        raise InvalidShipError(f"Could not fetch ship {ship_id}") from e

    if ship is None:
        raise ShipNotFoundError(ship_id)
    return ship


async def create_ship(db: AsyncSession, ship_in: ShipCreate) -> Ship:
    if ship_in.is_used is None:
        ship_in = ship_in.model_copy(update={"is_used": False})

    if not is_valid_ship(ship_in):
        logger.warning(f"⚠️ Rejected invalid ship: {ship_in.model_dump()}")
        raise InvalidShipError("Ship fields are missing or out of range")

    try:
        new_ship = Ship(**ship_in.model_dump(), rating=rate_ship(ship_in))
        db.add(new_ship)
        await db.commit()
        await db.refresh(new_ship)
    except Exception as e:
        logger.error(f"❌ Error creating ship: {str(e)}", exc_info=True)
        await db.rollback()
        raise InvalidShipError("Could not save ship") from e

    logger.info(f"🚀 Ship {new_ship.id} created: {new_ship.name} (rating {new_ship.rating})")
    return new_ship


async def update_ship(db: AsyncSession, ship_id: int, ship_in: ShipUpdate) -> Ship:
    _check_id(ship_id)
    try:
        ship = await db.get(Ship, ship_id)
        if ship is None:
            raise ShipNotFoundError(ship_id)

        merged = merge_ship(ship, ship_in)
        if not is_valid_ship(merged):
            logger.warning(f"⚠️ Rejected update of ship {ship_id}: {ship_in.model_dump(exclude_none=True)}")
            raise InvalidShipError("Ship fields are missing or out of range")

        for field, value in merged.model_dump().items():
            setattr(ship, field, value)
        ship.rating = rate_ship(merged)

        await db.commit()
        await db.refresh(ship)

        logger.info(f"✏️ Ship {ship_id} updated (rating {ship.rating})")
        return ship

    except ShipServiceError:
        raise
    except Exception as e:
        logger.error(f"❌ Error updating ship {ship_id}: {str(e)}", exc_info=True)
        await db.rollback()
        raise InvalidShipError(f"Could not update ship {ship_id}") from e


async def delete_ship(db: AsyncSession, ship_id: int) -> None:
    _check_id(ship_id)
    try:
        ship = await db.get(Ship, ship_id)
        if ship is None:
            raise ShipNotFoundError(ship_id)

        await db.delete(ship)
        await db.commit()

        logger.info(f"🗑️ Ship {ship_id} deleted")

    except ShipServiceError:
        raise
    except Exception as e:
        logger.error(f"❌ Error deleting ship {ship_id}: {str(e)}", exc_info=True)
        await db.rollback()
        raise InvalidShipError(f"Could not delete ship {ship_id}") from e
