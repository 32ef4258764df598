"""
In-memory cache of rendered per-user views.

Writes that change what a view shows call ``invalidate(path)`` so the next
read rebuilds it.
"""
import logging
import threading
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DASHBOARD_PATH = "/dashboard"
RESUME_ANALYSIS_PATH = "/resume-analysis"


class ViewCache:
    def __init__(self):
        self._entries: Dict[Tuple[str, str], Any] = {}
        self._lock = threading.Lock()

    def get(self, path: str, user_id: str) -> Optional[Any]:
        with self._lock:
            return self._entries.get((path, user_id))

    def set(self, path: str, user_id: str, value: Any) -> None:
        with self._lock:
            self._entries[(path, user_id)] = value

    def invalidate(self, path: str) -> int:
        """Drop every cached entry for a path. Returns the number dropped."""
        with self._lock:
            stale = [key for key in self._entries if key[0] == path]
            for key in stale:
                del self._entries[key]
        logger.debug(f"View cache invalidated: path={path}, entries={len(stale)}")
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


view_cache = ViewCache()


def get_view_cache() -> ViewCache:
    """View cache dependency."""
    return view_cache
