"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8000


class StorageSettings(BaseModel):
    url: str = Field(default="sqlite:///./portal.db", alias="url")
    echo: bool = False
    storage_key: str = "ipt_demo_v1"
    token_key: str = "auth_token"
    pending_key: str = "unverified_email"
    on_corrupt: Literal["reseed", "abort"] = "reseed"


class AdminSettings(BaseModel):
    email: str = "admin@example.com"
    password: str = Field(default="Password123!", min_length=6)
    first_name: str = "Admin"
    last_name: str = "Admin"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "HR Portal"
    api_prefix: str = "/api"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    server: ServerSettings = ServerSettings()
    storage: StorageSettings = StorageSettings()
    admin: AdminSettings = AdminSettings()

    @property
    def database_url(self) -> str:
        return self.storage.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port


@lru_cache()
def get_settings() -> Settings:
    return Settings()
