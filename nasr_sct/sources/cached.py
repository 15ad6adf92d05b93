from abc import ABC
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Tuple

import pandas as pd

logger = logging.getLogger(__name__)


class CachedSource(ABC):
    """
    Base class for sources that cache what they fetch on disk.

    Data is identified by a key of the form ``{base_key}_{parameter}``; the
    base key must correspond to a ``fetch_{base_key}`` method of the
    implementing class. For example ``subscription_2025-10-02`` is produced by
    ``fetch_subscription('2025-10-02')``.

    Supported formats are ``csv`` (pandas DataFrame) and ``zip`` (raw bytes).
    """

    BINARY_EXTENSIONS = ('zip',)

    def __init__(self, cache_dir: str):
        """
        Initialize the cached source.

        Args:
            cache_dir: Base directory for caching
        """
        self.cache_dir = Path(cache_dir)
        self.source_name = self.__class__.__name__.lower()
        self.cache_path = self.cache_dir / self.source_name
        self.cache_path.mkdir(parents=True, exist_ok=True)
        self._force_refresh = False

    def set_force_refresh(self, force_refresh: bool = True) -> None:
        """Always fetch, ignoring any cached copy."""
        self._force_refresh = force_refresh

    def _get_cache_file(self, key: str, ext: str) -> Path:
        return self.cache_path / f"{key}.{ext}"

    def _is_cache_valid(self, cache_file: Path, max_age_days: Optional[int] = None) -> Tuple[bool, Optional[str]]:
        """
        Check if the cache file exists and is not too old.

        Returns:
            Tuple[bool, Optional[str]]: (is_valid, reason if invalid)
        """
        if self._force_refresh:
            return False, "force refresh"
        if not cache_file.exists():
            return False, "missing"
        if max_age_days is None:
            return True, None
        file_age = datetime.now() - datetime.fromtimestamp(cache_file.stat().st_mtime)
        if file_age.days <= max_age_days:
            return True, None
        return False, "expired"

    def _save_to_cache(self, data: Any, key: str, ext: str) -> None:
        cache_file = self._get_cache_file(key, ext)
        if ext == 'csv':
            data.to_csv(cache_file, index=False)
        elif ext in self.BINARY_EXTENSIONS:
            with open(cache_file, 'wb') as f:
                f.write(data)
        else:
            raise ValueError(f"Unsupported file extension: {ext}")

    def _load_from_cache(self, key: str, ext: str) -> Any:
        cache_file = self._get_cache_file(key, ext)
        if ext == 'csv':
            return pd.read_csv(cache_file, dtype=str, keep_default_na=False)
        elif ext in self.BINARY_EXTENSIONS:
            with open(cache_file, 'rb') as f:
                return f.read()
        else:
            raise ValueError(f"Unsupported file extension: {ext}")

    def get_data(self, key: str, ext: str, param: str, max_age_days: Optional[int] = None, **kwargs) -> Any:
        """
        Get data from cache or fetch it if not available.

        Args:
            key: Base key for the data type (e.g. 'subscription')
            ext: File extension (csv or zip)
            param: Parameter passed to the fetch method and used in the cache key
            max_age_days: Maximum age of cache in days (None for no limit)
            **kwargs: Additional arguments to pass to the fetch method

        Raises:
            NotImplementedError: If the fetch method doesn't exist
            ValueError: If the file extension is not supported
        """
        cache_key = f"{key}_{param}"
        cache_file = self._get_cache_file(cache_key, ext)

        is_valid, reason = self._is_cache_valid(cache_file, max_age_days)
        if is_valid:
            logger.info(f"{cache_file.name} retrieved from cache {self.source_name}")
            return self._load_from_cache(cache_key, ext)

        fetch_method = getattr(self, f"fetch_{key}", None)
        if fetch_method is None:
            raise NotImplementedError(
                f"No fetch method found for key '{key}'. "
                f"Class {self.__class__.__name__} must implement a method named 'fetch_{key}'."
            )

        data = fetch_method(param, **kwargs)

        self._save_to_cache(data, cache_key, ext)
        logger.info(f"{cache_file.name} [{reason}] fetched using {fetch_method.__name__}")
        return data
