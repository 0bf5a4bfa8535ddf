"""
Centralized settings and path configuration for the lift pass service.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


def get_data_dir() -> Path:
    """Directory holding the packaged seed data."""
    return Path(__file__).resolve().parent.parent / 'data'


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('true', '1', 'yes', 'on')


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Seed data
    base_prices_csv: Path
    holidays_csv: Path

    # Write base price changes back to base_prices_csv
    persist_prices: bool = False

    log_level: str = 'INFO'

    # HTTP server
    api_host: str = '0.0.0.0'
    api_port: int = 4567

    @classmethod
    def load(cls, data_dir: Optional[Path] = None) -> 'Settings':
        """Load settings from the environment, falling back to packaged data."""
        root = data_dir or get_data_dir()

        return cls(
            base_prices_csv=Path(os.getenv('LIFT_PASS_BASE_PRICES', root / 'base_prices.csv')),
            holidays_csv=Path(os.getenv('LIFT_PASS_HOLIDAYS', root / 'holidays.csv')),
            persist_prices=_env_flag('LIFT_PASS_PERSIST'),
            log_level=os.getenv('LIFT_PASS_LOG_LEVEL', 'INFO').upper(),
            api_host=os.getenv('LIFT_PASS_HOST', '0.0.0.0'),
            api_port=int(os.getenv('LIFT_PASS_PORT', '4567')),
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
