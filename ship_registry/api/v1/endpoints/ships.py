from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ship_registry.api.deps import get_ship_filters
from ship_registry.core.database import get_db
from ship_registry.core.errors import ShipServiceError
from ship_registry.models.enums import ShipOrder
from ship_registry.schemas.ship import ShipCreate, ShipResponse, ShipUpdate
from ship_registry.services import ship_service
from ship_registry.services.query_builder import ShipFilter

router = APIRouter()

# 1. LIST SHIPS (filtered, sorted, paged)
@router.get("", response_model=List[ShipResponse])
async def read_ships(
    filters: ShipFilter = Depends(get_ship_filters),
    order: Optional[ShipOrder] = None,
    page_number: int = Query(ship_service.DEFAULT_PAGE_NUMBER, alias="pageNumber", ge=0),
    page_size: int = Query(ship_service.DEFAULT_PAGE_SIZE, alias="pageSize", ge=0),
    db: AsyncSession = Depends(get_db)
):
    return await ship_service.list_ships(db, filters, order, page_number, page_size)

# 2. COUNT SHIPS (declared before /{ship_id} so "count" isn't read as an id)
@router.get("/count", response_model=int)
async def count_ships(
    filters: ShipFilter = Depends(get_ship_filters),
    db: AsyncSession = Depends(get_db)
):
    return await ship_service.count_ships(db, filters)

# 3. CREATE SHIP
@router.post("", response_model=ShipResponse)
async def create_ship(
    ship_in: ShipCreate,
    db: AsyncSession = Depends(get_db)
):
    try:
        return await ship_service.create_ship(db, ship_in)
    except ShipServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

# 4. GET SHIP
@router.get("/{ship_id}", response_model=ShipResponse)
async def read_ship(
    ship_id: int,
    db: AsyncSession = Depends(get_db)
):
    try:
        return await ship_service.get_ship(db, ship_id)
    except ShipServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

# 5. UPDATE SHIP (partial)
@router.post("/{ship_id}", response_model=ShipResponse)
async def update_ship(
    ship_id: int,
    ship_in: ShipUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Only fields present and non-null in the body are changed."""
    try:
        return await ship_service.update_ship(db, ship_id, ship_in)
    except ShipServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

# 6. DELETE SHIP
@router.delete("/{ship_id}")
async def delete_ship(
    ship_id: int,
    db: AsyncSession = Depends(get_db)
):
    try:
        await ship_service.delete_ship(db, ship_id)
    except ShipServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return Response(status_code=status.HTTP_200_OK)
