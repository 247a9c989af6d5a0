"""HTTP tests for the minimal app service: / and /blue only."""

import pytest


class TestMinimalApp:
    def test_home_is_static_html(self, app_client):
        first = app_client.get("/")
        assert first.status_code == 200
        assert first.headers["content-type"].startswith("text/html")
        assert 'href="/blue"' in first.text
        assert app_client.get("/").content == first.content

    def test_blue_is_solid_blue_png(self, app_client, png):
        r = app_client.get("/blue")
        assert r.status_code == 200
        assert r.headers["content-type"] == "image/png"
        img = png(r.content)
        assert img.size == (100, 100)
        assert img.getcolors() == [(100 * 100, (0, 0, 255, 255))]

    @pytest.mark.parametrize("path", ["/health", "/metrics", "/scan", "/badge", "/nonexistent"])
    def test_dashboard_routes_absent(self, app_client, path):
        assert app_client.get(path).status_code == 404
