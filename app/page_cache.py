from __future__ import annotations

import logging
from typing import Any, Callable, Hashable

from cachetools import TTLCache

_CACHE_TTL_SECONDS = 300
_CACHE_MAXSIZE = 256
_CACHE_KEY_TYPE = tuple[str, Hashable]

logger = logging.getLogger(__name__)

_page_cache: TTLCache = TTLCache(maxsize=_CACHE_MAXSIZE, ttl=_CACHE_TTL_SECONDS)


def _normalize_path(path: str) -> str:
    return "/" + (path or "").strip().strip("/")


def cached(path: str, key: Hashable, loader: Callable[[], Any]) -> Any:
    """Return the data cached for ``(path, key)``, loading it on a miss."""
    cache_key: _CACHE_KEY_TYPE = (_normalize_path(path), key)
    if cache_key in _page_cache:
        return _page_cache[cache_key]
    value = loader()
    _page_cache[cache_key] = value
    return value


def revalidate_path(path: str) -> int:
    """Drop every cached entry for ``path`` so the next render re-fetches."""
    normalized = _normalize_path(path)
    stale = [cache_key for cache_key in list(_page_cache.keys()) if cache_key[0] == normalized]
    for cache_key in stale:
        _page_cache.pop(cache_key, None)
    logger.debug("page_cache.revalidate", extra={"path": normalized, "evicted": len(stale)})
    return len(stale)


def clear() -> None:
    _page_cache.clear()
