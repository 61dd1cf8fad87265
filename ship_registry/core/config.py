import os
from typing import List, Optional
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict
from urllib.parse import quote_plus

# Load environment variables from .env file
load_dotenv()

class Settings(BaseSettings):
    # --- APP INFO ---
    PROJECT_NAME: str = "Ship Registry"
    API_PREFIX: str = "/rest"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # --- CORS ---
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:8080",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8080",
    ]

    # --- DATABASE ---
    # Full async URL, e.g. "sqlite+aiosqlite:///./ships.db". Wins over the POSTGRES_* parts.
    DATABASE_URL: Optional[str] = None
    DB_ECHO: bool = False

    POSTGRES_USER: str = os.getenv("DB_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("DB_PASSWORD", "postgres")
    POSTGRES_SERVER: str = os.getenv("DB_HOST", "localhost")
    POSTGRES_PORT: str = os.getenv("DB_PORT", "5432")
    POSTGRES_DB: str = os.getenv("DB_NAME", "ships")

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        Returns DATABASE_URL when set, otherwise builds the async PostgreSQL
        connection string. The password is encoded so characters like '@'
        don't break the URL.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL

        encoded_password = quote_plus(self.POSTGRES_PASSWORD)

        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{encoded_password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    model_config = SettingsConfigDict(case_sensitive=True)

settings = Settings()
