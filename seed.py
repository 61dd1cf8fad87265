import asyncio
from datetime import date

from sqlalchemy import func, select
from ship_registry.core.database import SessionLocal, engine, init_models
from ship_registry.core.errors import ShipServiceError
from ship_registry.models.enums import ShipType
from ship_registry.models.ship import Ship
from ship_registry.schemas.ship import ShipCreate
from ship_registry.services import ship_service

DEMO_SHIPS = [
    {"name": "Orion III", "planet": "Mars", "ship_type": ShipType.MERCHANT,
     "prod_date": date(2995, 3, 14), "is_used": True, "speed": 0.82, "crew_size": 617},
    {"name": "Daedalus", "planet": "Jupiter", "ship_type": ShipType.TRANSPORT,
     "prod_date": date(2981, 7, 2), "is_used": False, "speed": 0.94, "crew_size": 1720},
    {"name": "Eagle Transporter", "planet": "Earth", "ship_type": ShipType.TRANSPORT,
     "prod_date": date(2989, 11, 20), "is_used": True, "speed": 0.79, "crew_size": 2508},
    {"name": "Nostromo", "planet": "Saturn", "ship_type": ShipType.MERCHANT,
     "prod_date": date(3017, 5, 9), "is_used": True, "speed": 0.22, "crew_size": 7},
    {"name": "Serenity", "planet": "Pluto", "ship_type": ShipType.TRANSPORT,
     "prod_date": date(3019, 1, 30), "is_used": False, "speed": 0.5, "crew_size": 9},
    {"name": "Rocinante", "planet": "Mercury", "ship_type": ShipType.MILITARY,
     "prod_date": date(3012, 8, 21), "is_used": True, "speed": 0.67, "crew_size": 4},
    {"name": "Executor", "planet": "Neptune", "ship_type": ShipType.MILITARY,
     "prod_date": date(2840, 2, 1), "is_used": False, "speed": 0.31, "crew_size": 9999},
    {"name": "Millennium Falcon", "planet": "Venus", "ship_type": ShipType.MERCHANT,
     "prod_date": date(3014, 6, 15), "is_used": True, "speed": 0.5, "crew_size": 4},
]

async def seed_database():
    print("🌱 Starting Ship Registry Seeding...")

    async with SessionLocal() as db:
        result = await db.execute(select(func.count()).select_from(Ship))
        existing = result.scalar_one()
        if existing:
            print(f"⚠️ Registry already holds {existing} ships. Skipping.")
            return

        for data in DEMO_SHIPS:
            try:
                ship = await ship_service.create_ship(db, ShipCreate(**data))
                print(f"   🚀 Created Ship #{ship.id}: {ship.name} (rating {ship.rating})")
            except ShipServiceError as e:
                print(f"   ❌ Skipped {data['name']}: {e.message}")

    print("\n✅ Seeding Complete!")

async def main():
    await init_models()
    try:
        await seed_database()
    finally:
        await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
