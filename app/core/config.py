from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional


class Settings(BaseSettings):
    # Database
    DB_HOST: str = Field("localhost")
    DB_PORT: int = Field(5432)
    DB_USER: str = Field("postgres")
    DB_PASSWORD: str = Field("postgres")
    DB_NAME: str = Field("stores")
    # full URL wins over the parts above (e.g. sqlite:// for local runs)
    DATABASE_URL: Optional[str] = Field(None)

    # App
    APP_HOST: str = Field("0.0.0.0")
    APP_PORT: int = Field(8000)
    LOG_LEVEL: str = Field("INFO")

    # Event sink
    EVENT_SINK_URL: str = Field("")
    EVENT_SINK_TIMEOUT: float = Field(5.0)
    OWNER_ROLE_TOPIC: str = Field("user-role-updates")

    # Nearby search
    NEARBY_RADIUS_MILES: float = Field(10.0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow"
    )


settings = Settings()
