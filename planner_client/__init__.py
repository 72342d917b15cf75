"""
Data access for the wedding planner.

``open_planner`` returns either the HTTP client for a running backend or the
in-memory demo planner; both expose the same calls.
"""
from .errors import APIError, NotAuthenticated
from .local import LocalPlanner
from .remote import PlannerAPIClient


def open_planner(base_url=None, demo=False):
    if demo or not base_url:
        return LocalPlanner()
    return PlannerAPIClient(base_url)


__all__ = ['APIError', 'NotAuthenticated', 'LocalPlanner', 'PlannerAPIClient', 'open_planner']
