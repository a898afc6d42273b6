"""Application settings"""
from pydantic_settings import BaseSettings
from typing import Optional, List


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Todo API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 3000

    # API
    API_PREFIX: str = ""
    CORS_ORIGINS: List[str] = ["http://127.0.0.1:3001", "http://localhost:3001"]

    # Storage: "memory" or "database"
    REPOSITORY_TYPE: str = "memory"

    # Database
    DATABASE_URL: Optional[str] = None
    DATABASE_TYPE: str = "postgresql"  # sqlite, postgresql
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "todos"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    class Config:
        env_file = ".env"
        case_sensitive = True

    def get_database_url(self) -> str:
        """Get database URL from settings or environment"""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        if self.DATABASE_TYPE == "postgresql":
            return f"postgresql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        elif self.DATABASE_TYPE == "sqlite":
            return "sqlite:///./todos.db"
        else:
            raise ValueError(f"Unsupported database type: {self.DATABASE_TYPE}")


settings = Settings()
