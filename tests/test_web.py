"""Tests for the HTML pages and favicon routes."""

import pytest
from httpx import AsyncClient


class TestIndexPage:
    """Tests for the home page."""

    @pytest.mark.asyncio
    async def test_index_anonymous(self, client: AsyncClient):
        """Test that anonymous visitors get a login link."""
        response = await client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Welcome to MiniPress" in response.text
        assert 'href="/login"' in response.text

    @pytest.mark.asyncio
    async def test_index_logged_in(self, authenticated_client: AsyncClient):
        """Test that logged-in users see themselves and a logout link."""
        response = await authenticated_client.get("/")

        assert response.status_code == 200
        assert "testuser" in response.text
        assert "(author)" in response.text
        assert 'href="/logout"' in response.text
        assert "gho_secret_token" not in response.text


class TestFavicons:
    """Tests for root-level favicon files."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("filename", ["site.webmanifest", "browserconfig.xml", "safari-pinned-tab.svg"])
    async def test_favicon_served_inline(self, client: AsyncClient, filename: str):
        """Test that known favicon files are served for display."""
        response = await client.get(f"/{filename}")

        assert response.status_code == 200
        assert response.headers["content-disposition"].startswith("inline")

    @pytest.mark.asyncio
    async def test_favicon_file_missing(self, client: AsyncClient):
        """Test that an allowed name with no file behind it is a 404."""
        response = await client.get("/favicon-64x64.png")
        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("filename", ["robots.txt", "favicon.png", "config.py"])
    async def test_unknown_file_not_found(self, client: AsyncClient, filename: str):
        """Test that names outside the favicon set are a 404."""
        response = await client.get(f"/{filename}")
        assert response.status_code == 404


class TestStaticFiles:
    """Tests for /static."""

    @pytest.mark.asyncio
    async def test_stylesheet(self, client: AsyncClient):
        """Test that the stylesheet is served."""
        response = await client.get("/static/css/style.css")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")
