"""Configuration management for gqlcache."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_utils import configure_logging


class Settings(BaseSettings):
    """Deconstruction settings."""

    model_config = SettingsConfigDict(
        env_prefix="GQLCACHE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shape probing
    wrapper_attribute: str = Field(default="object", description="Inner-value accessor on domain wrappers")
    nodes_attribute: str = Field(default="nodes", description="Ordered nodes accessor on connections")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")

    @field_validator("wrapper_attribute", "nodes_attribute")
    @classmethod
    def check_accessor_name(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"Invalid accessor name: {value!r}")
        return value


def get_settings() -> Settings:
    """Get application settings.

    Returns:
        Settings instance
    """
    # pydantic-settings loads GQLCACHE_* variables and the .env file
    settings = Settings()

    configure_logging(settings.log_level)

    return settings
