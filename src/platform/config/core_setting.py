from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_FILE = _PROJECT_ROOT / '.env'


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    DEBUG: bool = True  # Set to False in production
    SERVICE_NAME: str = 'seat-hold'

    # Venue layout (seats are numbered row-major, 0..rows*cols-1)
    VENUE_ROWS: int = 30
    VENUE_COLS: int = 50

    # How long a seat hold stays valid before its seats can be claimed again
    SEAT_HOLD_TIMEOUT_MS: int = 2_000

    @field_validator('VENUE_ROWS', 'VENUE_COLS', 'SEAT_HOLD_TIMEOUT_MS')
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('must be a positive integer')
        return v


settings = Settings()  # type: ignore
