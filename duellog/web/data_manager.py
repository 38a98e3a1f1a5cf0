"""
Data manager for caching match data fetched from the API.
"""
import time
from typing import Optional, Dict, List, Tuple

from ..client.api import DuelLogClient
from ..client.models import Match

ALL_SEASONS = "*"


class DataManager:
    _instance = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super(DataManager, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, client: Optional[DuelLogClient] = None):
        if self._initialized:
            return

        self.client = client or DuelLogClient()
        self._cache_ttl = 300  # 5 minutes

        # season code (or ALL_SEASONS) -> (loaded_at, matches)
        self._matches: Dict[str, Tuple[float, List[Match]]] = {}
        self._theme_map: Optional[Dict[str, str]] = None
        self._themes_loaded: float = 0

        self._initialized = True

    def _expired(self, loaded_at: float) -> bool:
        return time.time() - loaded_at > self._cache_ttl

    def get_matches(self, season_code: Optional[str] = None, force_refresh: bool = False) -> List[Match]:
        """Get cached matches of one season (or all history), reloading if necessary."""
        key = season_code or ALL_SEASONS
        cached = self._matches.get(key)

        if cached is None or force_refresh or self._expired(cached[0]):
            print(f"Loading matches for {key} from API... (Force: {force_refresh})")
            matches = self.client.get_matches(season_code=season_code)
            self._matches[key] = (time.time(), matches)
            return matches

        return cached[1]

    def get_deck_theme_map(self, force_refresh: bool = False) -> Dict[str, str]:
        if self._theme_map is None or force_refresh or self._expired(self._themes_loaded):
            print("Loading deck templates from API...")
            self._theme_map = self.client.get_deck_theme_map()
            self._themes_loaded = time.time()
        return self._theme_map

    def clear(self) -> None:
        self._matches = {}
        self._theme_map = None
        self._themes_loaded = 0
        print("Data cache cleared.")
