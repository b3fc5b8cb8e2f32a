"""Application settings and environment variables."""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    # Local calendar used for expiry checks and purchase timestamps
    TIMEZONE: str = os.getenv("TIMEZONE", "Europe/Madrid")

    WALLET_API_BASE_URL: str = os.getenv("WALLET_API_BASE_URL", "http://localhost:8080/api")
    WALLET_API_TOKEN: Optional[str] = os.getenv("WALLET_API_TOKEN")
    WALLET_API_TIMEOUT: int = int(os.getenv("WALLET_API_TIMEOUT", "10"))  # seconds

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
