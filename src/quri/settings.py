"""Settings for the QURI builder."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class QuriSettings(BaseSettings):
    """QURI configuration settings."""

    LOG_LEVEL: str = "INFO"

    # Raise InvalidOperatorError on unknown operator tokens; when False the
    # token is kept as None and renders as `null`
    QURI_STRICT_OPERATORS: bool = True

    # Escape non-ASCII characters in field names and values as \uXXXX
    QURI_ENSURE_ASCII: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = QuriSettings()
