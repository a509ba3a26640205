"""
Configuration management for pokesearch.
"""

import os
from pathlib import Path
from urllib.parse import urlparse

from dotenv import load_dotenv

from core.logging_config import setup_logger

from . import __version__

logger = setup_logger(__name__)

# Load environment variables
load_dotenv()


class Config:
    """Configuration class for pokesearch."""

    # API Configuration
    API_BASE_URL: str = os.getenv("POKESEARCH_API_BASE_URL", "https://pokeapi.co/api/v2")
    API_TIMEOUT: float = float(os.getenv("POKESEARCH_API_TIMEOUT", "10"))
    MAX_RETRIES: int = int(os.getenv("POKESEARCH_MAX_RETRIES", "2"))
    BACKOFF_FACTOR: float = float(os.getenv("POKESEARCH_BACKOFF_FACTOR", "0.5"))
    USER_AGENT: str = f"pokesearch/{__version__}"

    # Cache Configuration
    CACHE_DIR: Path = Path(os.getenv("POKESEARCH_CACHE_DIR", ".cache"))

    @classmethod
    def validate(cls) -> bool:
        """
        Validate configuration.

        Returns:
            bool: True if configuration is valid
        """
        parsed = urlparse(cls.API_BASE_URL or "")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            logger.error(f"API base URL must be an http(s) URL, got {cls.API_BASE_URL!r}")
            return False

        if cls.API_TIMEOUT <= 0:
            logger.error(f"API timeout must be positive, got {cls.API_TIMEOUT}")
            return False

        # At most three attempts in total
        if not 0 <= cls.MAX_RETRIES <= 2:
            logger.error(f"Max retries must be between 0 and 2, got {cls.MAX_RETRIES}")
            return False

        if cls.BACKOFF_FACTOR < 0:
            logger.error(f"Backoff factor must not be negative, got {cls.BACKOFF_FACTOR}")
            return False

        return True

    @classmethod
    def get_headers(cls) -> dict:
        """
        Get API request headers.

        Returns:
            dict: Headers for API requests
        """
        return {
            "Accept": "application/json",
            "User-Agent": cls.USER_AGENT,
        }
