from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Coach Seating'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Coach layout: 11 full rows of 7 seats + 1 short last row of 3 seats
    COACH_FULL_ROWS: int = 11
    COACH_SEATS_PER_ROW: int = 7
    COACH_LAST_ROW_SEATS: int = 3

    # Booking policy
    MAX_PARTY_SIZE: int = 7

    @field_validator(
        'COACH_FULL_ROWS', 'COACH_SEATS_PER_ROW', 'MAX_PARTY_SIZE', mode='after'
    )
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError('must be a positive integer')
        return v

    @field_validator('COACH_LAST_ROW_SEATS', mode='after')
    @classmethod
    def must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError('must not be negative')
        return v


settings = Settings()  # type: ignore
