"""Tests for how create_app wires routes"""

import inspect

import pytest
from fastapi.routing import APIRoute

from tedx_ndu.auth.dependencies import get_current_user

# Handlers that query the database or hash passwords; FastAPI runs plain
# functions in its threadpool, keeping the event loop free
BLOCKING_ROUTES = [
    ("POST", "/api/login"),
    ("POST", "/api/logout"),
    ("POST", "/api/auth/register"),
    ("POST", "/api/register"),
    ("POST", "/api/registration"),
    ("POST", "/api/contact"),
    ("GET", "/api/admin/registrations"),
    ("DELETE", "/api/admin/registrations/{registration_id}"),
    ("GET", "/api/admin/contacts"),
    ("DELETE", "/api/admin/contacts/{contact_id}"),
    ("PATCH", "/api/admin/contacts/{contact_id}/read"),
    ("GET", "/api/admin/stats"),
    ("GET", "/health/detailed"),
]


def find_route(app, method, path) -> APIRoute:
    for route in app.routes:
        if isinstance(route, APIRoute) and route.path == path and method in route.methods:
            return route
    raise AssertionError(f"no route for {method} {path}")


class TestBlockingHandlers:
    @pytest.mark.parametrize("method,path", BLOCKING_ROUTES)
    def test_runs_in_threadpool(self, app, method, path):
        route = find_route(app, method, path)
        assert not inspect.iscoroutinefunction(route.endpoint)

    def test_session_lookup_runs_in_threadpool(self):
        assert not inspect.iscoroutinefunction(get_current_user)
