"""
Client-side query cache.

GET results are kept per request key (resource path plus query string). A
mutation invalidates the whole family the path belongs to, keyed by its first
segment: changing ``budget/categories/<id>`` also drops ``budget/items`` and
``budget/summary``.
"""
from typing import Any, Dict, Optional


def cache_key(path: str, params: Optional[Dict] = None) -> str:
    path = path.strip('/')
    if not params:
        return path
    query = '&'.join(f'{key}={params[key]}' for key in sorted(params))
    return f'{path}?{query}'


def family_of(path: str) -> str:
    return path.strip('/').split('/', 1)[0].split('?', 1)[0]


class QueryCache:
    """In-memory map of request keys to decoded JSON responses"""

    def __init__(self):
        self._entries: Dict[str, Any] = {}

    def __contains__(self, key):
        return key in self._entries

    def get(self, key):
        return self._entries.get(key)

    def set(self, key, value):
        self._entries[key] = value

    def invalidate(self, path):
        family = family_of(path)
        stale = [key for key in self._entries if family_of(key) == family]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def clear(self):
        self._entries.clear()
