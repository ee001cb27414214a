"""
Configuration settings for the Field Scenario Simulator.

This module provides type-safe configuration management using Pydantic.
Settings are loaded from environment variables and .env file. Grid and
physical constants are plain module constants; they are fixed and are
not read from the environment.

Usage:
    from config.settings import get_settings

    settings = get_settings()
    print(settings.output_dir)
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Get the project root directory (parent of config/)
PROJECT_ROOT = Path(__file__).parent.parent


# =============================================================================
# Grid Constants
# =============================================================================
GRID_ROWS = 20        # Number of rows in the grid
GRID_COLS = 20        # Number of columns in the grid
GRID_CELL_SIZE = 25   # Size of each cell in pixels

# =============================================================================
# Field Constants
# =============================================================================
MIN_TEMP = 0.0        # °C
MAX_TEMP = 40.0       # °C
MAX_WIND_SPEED = 20.0  # m/s
ARROW_HEAD_SIZE = 6   # pixels

FIELD_TYPES = ("scalar", "vector")

MIN_DPI = 72
MAX_DPI = 600


class Settings(BaseSettings):
    """
    Application settings with validation.

    Settings are loaded from environment variables (prefixed FIELDSIM_),
    with fallback to .env file. Relative paths resolve against the project root.
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELDSIM_",
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Output Settings
    # ==========================================================================
    output_dir: Path = Field(
        default=PROJECT_ROOT / "output",
        description="Directory for rendered scenario images"
    )

    image_dpi: int = Field(
        default=100,
        ge=MIN_DPI,
        le=MAX_DPI,
        description="DPI for exported images"
    )

    # ==========================================================================
    # Generation
    # ==========================================================================
    random_seed: Optional[int] = Field(
        default=None,
        ge=0,
        description="Seed for the scenario generator (None = fresh entropy)"
    )

    default_field_type: str = Field(
        default="scalar",
        description="Field type shown on startup: 'scalar' or 'vector'"
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = Field(
        default="INFO",
        description="Root log level for the CLI"
    )

    # ==========================================================================
    # Validators
    # ==========================================================================
    @field_validator("default_field_type")
    @classmethod
    def validate_field_type(cls, v: str) -> str:
        """Validate the startup field type."""
        v_lower = v.lower()
        if v_lower not in FIELD_TYPES:
            raise ValueError(f"Field type must be one of: {set(FIELD_TYPES)}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v_upper

    @field_validator("output_dir", mode="before")
    @classmethod
    def resolve_path(cls, v) -> Path:
        """Convert string paths to Path objects and resolve relative paths."""
        if isinstance(v, str):
            v = Path(v)
        if not v.is_absolute():
            v = PROJECT_ROOT / v
        return v

    # ==========================================================================
    # Methods
    # ==========================================================================
    def ensure_directories(self) -> None:
        """Create the output directory if it doesn't exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance (cached for performance)

    Note:
        Uses lru_cache to avoid re-reading .env file on every call.
        Call get_settings.cache_clear() to reload settings if needed.
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Force reload settings from environment.

    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings()
