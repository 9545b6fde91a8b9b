from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict
from pydantic import Field
from typing import List

class Settings(BaseSettings):
    """Application settings loaded from environment variables (.env)."""
    environment: str = Field(default="development", alias="ENVIRONMENT")
    database_url: str = Field(default="sqlite:///./orderdesk.db", alias="DATABASE_URL")
    app_port: int = Field(default=8000, alias="APP_PORT")

    # Autenticação
    jwt_secret: str = Field(default="devsecret", alias="JWT_SECRET")
    bcrypt_rounds: int = Field(default=10, ge=4, le=31, alias="BCRYPT_ROUNDS")

    cors_origins: List[str] = Field(default=["*"], alias="CORS_ORIGINS")
    sql_echo: bool = Field(default=False, alias="SQL_ECHO")

    # pydantic-settings v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

def get_settings() -> "Settings":
    return Settings()  # type: ignore[call-arg]
