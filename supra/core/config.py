"""Application configuration using Pydantic Settings.

Environment variables are loaded with the SUPRA_ prefix. Values passed
directly to ``render_document`` take precedence over these defaults.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from supra.core.constants import DEFAULT_CASE_LOOKBACK, SMALLCAPS_STYLE


class Settings(BaseSettings):
    """Preprocessor settings loaded from environment variables.

    Pattern: Pydantic Settings with Environment Variables
    """

    # Service configuration
    service_name: str = "supra"
    environment: str = Field(default="development", description="Runtime environment")
    log_level: str = Field(default="WARNING", description="Logging level")

    # Citation style
    case_lookback_footnotes: int = Field(
        default=DEFAULT_CASE_LOOKBACK,
        ge=0,
        description="Footnotes a case stays 'recent' for short-form citation",
    )
    smallcaps_style: str = Field(
        default=SMALLCAPS_STYLE,
        description="Custom character style applied by the small caps option",
    )

    # Rendering defaults
    footnote_offset: int = Field(
        default=0,
        ge=0,
        description="Number of footnotes preceding this document",
    )
    smallcaps: bool = Field(
        default=False,
        description="Rewrite bold spans into the small caps style",
    )

    model_config = SettingsConfigDict(
        env_prefix="SUPRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings singleton
    """
    return Settings()
