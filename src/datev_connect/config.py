"""Configuration and settings management using pydantic-settings."""
from typing import Any, Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the DATEVconnect client and nodes."""

    model_config = SettingsConfigDict(
        env_prefix="DATEV_CONNECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    env: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Log level")
    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Log output format",
    )

    # HTTP transport
    request_timeout_s: float = Field(
        default=30.0,
        description="Timeout in seconds for a single DATEVconnect request",
    )
    user_agent: str = Field(
        default="datev-connect-nodes",
        description="User-Agent header sent with every request",
    )

    # Credentials for CLI runs; nodes get theirs from the host
    host: str | None = Field(default=None, description="DATEVconnect host")
    email: str | None = Field(default=None, description="Login email")
    password: SecretStr | None = Field(default=None, description="Login password")
    client_instance_id: str | None = Field(default=None, description="Client instance id")

    def credentials(self) -> dict[str, Any]:
        """Credential values in the shape nodes expect."""
        return {
            "host": self.host,
            "email": self.email,
            "password": self.password.get_secret_value() if self.password else None,
            "clientInstanceId": self.client_instance_id,
        }

    @field_validator("request_timeout_s")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate that the request timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout_s must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and validate the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get or create the global settings instance.

    Returns:
        Settings instance loaded from environment
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset global settings (useful for testing)."""
    global _settings
    _settings = None
