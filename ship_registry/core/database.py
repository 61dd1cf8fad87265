# ship_registry/core/database.py
import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base
from ship_registry.core.config import settings

logger = logging.getLogger(__name__)

# 1. Create the Async Engine
engine = create_async_engine(
    settings.SQLALCHEMY_DATABASE_URI,
    echo=settings.DB_ECHO,
    future=True
)

# SQLite's LIKE ignores ASCII case by default; PostgreSQL's doesn't.
if engine.dialect.name == "sqlite":
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_case_sensitive_like(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA case_sensitive_like = ON")
        cursor.close()

# 2. Create the Session Factory
SessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False
)

# 3. Base Class for Models
Base = declarative_base()

# 4. Dependency for API Routes
async def get_db():
    async with SessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

# 5. Table Initialization
async def init_models():
    """
    Creates tables in the database if they don't exist.
    """
    async with engine.begin() as conn:
        from ship_registry.models.ship import Ship

        await conn.run_sync(Base.metadata.create_all)
    logger.info("✅ Ship registry tables ready")
