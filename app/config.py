from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the posts API, read from environment variables or .env.

    DATABASE_URL and SECRET_KEY have no defaults and must be provided.
    """

    # Database (pool sizing is ignored for SQLite)
    DATABASE_URL: str
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # Bearer tokens are verified with this key; 'sub' becomes the post author
    SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"

    # Application
    APP_NAME: str = "Bloggit Posts API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server (used by `bloggit-posts` / app.main:run)
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # CORS
    CORS_ORIGINS: str = ""
    CORS_ALLOW_CREDENTIALS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def require_hmac_algorithm(cls, value: str) -> str:
        # Tokens are verified with the shared SECRET_KEY only
        if value not in ("HS256", "HS384", "HS512"):
            raise ValueError(f"Unsupported JWT algorithm: {value}")
        return value

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS from comma-separated string"""
        if not self.CORS_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def engine_options(self) -> dict:
        """Keyword arguments for create_engine that depend on the database backend"""
        if self.is_sqlite:
            return {"connect_args": {"check_same_thread": False}}
        return {"pool_size": self.DB_POOL_SIZE, "max_overflow": self.DB_MAX_OVERFLOW}


# Global settings instance
settings = Settings()
