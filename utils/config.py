"""Settings for the API and the Streamlit page. The scoring core takes none."""
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""  # empty -> console only

    # Request limits
    MAX_CANDIDATES: int = 1000
    MAX_TEXT_LENGTH: int = 20_000

    # Output
    SCORE_DIGITS: int = 6

    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
