# tests/test_navigation.py
from __future__ import annotations

import pytest

from quantumscribe.models.types import Route
from quantumscribe.services.navigation import Navigator


def test_go_to_emits_route_change():
    nav = Navigator()
    routes = []
    nav.routeChanged.connect(routes.append)

    assert nav.go_to(Route.LOGIN) is True
    assert nav.go_to(Route.DASHBOARD) is True

    assert routes == [Route.LOGIN, Route.DASHBOARD]
    assert nav.current_route == Route.DASHBOARD


def test_go_to_current_route_is_a_noop():
    nav = Navigator(Route.DASHBOARD)
    routes = []
    nav.routeChanged.connect(routes.append)

    assert nav.go_to(Route.DASHBOARD) is False
    assert routes == []


def test_accepts_route_values():
    nav = Navigator()
    nav.go_to("login")
    assert nav.current_route is Route.LOGIN


def test_unknown_route_rejected():
    with pytest.raises(ValueError):
        Navigator().go_to("settings")
