"""
HTTP adapter for the planner API.

Wraps a ``requests.Session`` so the session cookie set by login/register is
carried on every call. Django rotates the CSRF token on login; it is read back
from the ``csrftoken`` cookie and sent as ``X-CSRFToken`` on unsafe methods.
"""
import logging
from typing import Any, Dict, List, Optional

import requests

from .cache import QueryCache, cache_key
from .errors import APIError, NotAuthenticated

logger = logging.getLogger('planner_client')

SAFE_METHODS = ('GET', 'HEAD', 'OPTIONS')


class PlannerAPIClient:
    """Planner data access over HTTP with a per-path query cache"""

    def __init__(self, base_url: str, timeout: int = 10, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.cache = QueryCache()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/{path.strip('/')}"

    def _request(self, method: str, path: str, payload: Any = None, params: Optional[Dict] = None) -> Any:
        headers = {}
        if method not in SAFE_METHODS:
            token = self.session.cookies.get('csrftoken')
            if token:
                headers['X-CSRFToken'] = token

        response = self.session.request(
            method,
            self._url(path),
            json=payload,
            params=params,
            headers=headers,
            timeout=self.timeout,
        )
        logger.debug(f"{method} {path} -> {response.status_code}")

        if response.ok:
            return response.json() if response.content else None

        try:
            body = response.json()
        except ValueError:
            body = {}
        message = body.get('message') if isinstance(body, dict) else None
        if response.status_code == 401:
            raise NotAuthenticated(message or 'Unauthorized')
        raise APIError(response.status_code, message or response.reason, body.get('field') if isinstance(body, dict) else None)

    def _query(self, path: str, params: Optional[Dict] = None) -> Any:
        key = cache_key(path, params)
        if key in self.cache:
            return self.cache.get(key)
        data = self._request('GET', path, params=params)
        self.cache.set(key, data)
        return data

    def _mutate(self, method: str, path: str, payload: Any = None) -> Any:
        data = self._request(method, path, payload=payload)
        self.cache.invalidate(path)
        return data

    # Session

    def register(self, username: str, password: str) -> Dict:
        self.cache.clear()
        return self._request('POST', 'register', {'username': username, 'password': password})

    def login(self, username: str, password: str) -> Dict:
        self.cache.clear()
        return self._request('POST', 'login', {'username': username, 'password': password})

    def logout(self) -> None:
        self._request('POST', 'logout')
        self.cache.clear()

    def current_user(self) -> Dict:
        return self._request('GET', 'user')

    # Generic resources, e.g. ``guests`` or ``budget/items``

    def list(self, resource: str, **filters) -> List[Dict]:
        return self._query(resource, filters or None)

    def get(self, resource: str, pk: str) -> Dict:
        return self._query(f'{resource}/{pk}')

    def create(self, resource: str, payload):
        """Create one record from a dict, or several at once from a list"""
        return self._mutate('POST', resource, payload)

    def update(self, resource: str, pk: str, changes: Dict) -> Dict:
        return self._mutate('PATCH', f'{resource}/{pk}', changes)

    def delete(self, resource: str, pk: str) -> Dict:
        return self._mutate('DELETE', f'{resource}/{pk}')

    # Budget and guest helpers

    def get_budget(self) -> Dict:
        return self._query('budget')

    def set_budget(self, total_budget: int) -> Dict:
        return self._mutate('PUT', 'budget', {'totalBudget': total_budget})

    def budget_summary(self) -> Dict:
        return self._query('budget/summary')

    def guest_summary(self) -> Dict:
        return self._query('guests/summary')

    def import_guests(self, text: str) -> List[Dict]:
        return self._mutate('POST', 'guests/import', {'text': text})
