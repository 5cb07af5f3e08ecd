"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./account.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class TransactionSettings(BaseModel):
    cancel_window_years: int = Field(default=1, ge=1)


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    debug: bool = False
    log_level: str = "INFO"
    project_name: str = "Account Transaction Server"
    api_prefix: str = ""

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    transactions: TransactionSettings = TransactionSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def cancel_window_years(self) -> int:
        return self.transactions.cancel_window_years


@lru_cache()
def get_settings() -> Settings:
    return Settings()
