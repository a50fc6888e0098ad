"""Tests for perch.routing.route — TemplateSegment, Endpoint, RouteInfo."""

import pytest

from perch.routing.route import Endpoint, RouteInfo, TemplateSegment


class TestTemplateSegment:
    def test_literal(self) -> None:
        seg = TemplateSegment(value="/users/")
        assert seg.is_param is False
        assert seg.param_name is None

    def test_placeholder(self) -> None:
        seg = TemplateSegment(value="{user}", is_param=True, param_name="user")
        assert seg.is_param is True
        assert seg.param_name == "user"

    def test_frozen(self) -> None:
        seg = TemplateSegment(value="/users/")
        with pytest.raises(AttributeError):
            seg.value = "other"  # type: ignore[misc]


class TestEndpoint:
    def test_str(self) -> None:
        assert str(Endpoint(method="PUT", url="/photos/1")) == "PUT /photos/1"

    def test_frozen(self) -> None:
        endpoint = Endpoint(method="GET", url="/")
        with pytest.raises(AttributeError):
            endpoint.url = "/other"  # type: ignore[misc]


class TestRouteInfo:
    def test_creation(self) -> None:
        info = RouteInfo(name="photos.show", method="GET", path="/photos/{photo}")
        assert info.name == "photos.show"
        assert info.method == "GET"
        assert info.path == "/photos/{photo}"
        assert info.params == ()
