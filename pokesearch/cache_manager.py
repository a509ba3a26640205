"""
File cache for raw PokéAPI responses.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from core.logging_config import setup_logger

from .config import Config
from .errors import CacheError
from .models import CacheKey

logger = setup_logger(__name__)

KeyLike = Union[CacheKey, str]


class CacheManager:
    """One file per cache key; a file that exists is a valid entry."""

    def __init__(self, cache_dir: Optional[Path] = None):
        """
        Initialize cache manager.

        Args:
            cache_dir: Directory for cache files (created if absent)
        """
        self.cache_dir = Path(cache_dir) if cache_dir is not None else Config.CACHE_DIR
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            # Reads will miss and writes will fail; both are reported where they happen
            logger.warning(f"Could not create cache directory {self.cache_dir}: {e}")

        logger.debug(f"Cache manager initialized with directory: {self.cache_dir}")

    def _get_file_path(self, key: KeyLike, extension: str = "json") -> Path:
        """
        Get file path for a cache key.

        Args:
            key: Cache key
            extension: File extension

        Returns:
            Path: File path
        """
        return self.cache_dir / f"{key}.{extension}"

    def contains(self, key: KeyLike) -> bool:
        """Whether an entry exists for the key."""
        return self._get_file_path(key).is_file()

    def get(self, key: KeyLike) -> Optional[bytes]:
        """
        Read a cached entry.

        Args:
            key: Cache key

        Returns:
            Raw bytes, or None on a miss or read failure
        """
        file_path = self._get_file_path(key)
        try:
            data = file_path.read_bytes()
        except FileNotFoundError:
            logger.debug(f"Cache miss: {key}")
            return None
        except OSError as e:
            logger.warning(f"Failed to read cache file {file_path}, treating as miss: {e}")
            return None

        logger.debug(f"Cache hit: {key} ({len(data)} bytes)")
        return data

    def put(self, key: KeyLike, data: bytes) -> None:
        """
        Write an entry atomically.

        The bytes go to a temporary file in the cache directory which is then
        renamed over the final path, so readers see the old file or the new one.

        Args:
            key: Cache key
            data: Raw bytes to store

        Raises:
            CacheError: If the entry could not be written
        """
        file_path = self._get_file_path(key)
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                "wb", dir=self.cache_dir, prefix=f".{key}.", suffix=".tmp", delete=False
            ) as tmp:
                tmp_path = tmp.name
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_path, file_path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError as cleanup_error:
                    logger.debug(f"Could not remove temp file {tmp_path}: {cleanup_error}")
            raise CacheError(f"failed to write cache file {file_path}: {e}") from e

        logger.debug(f"Cached {key} (size: {len(data) / 1024:.1f} KB)")
