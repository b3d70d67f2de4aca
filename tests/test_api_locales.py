"""Tests for locales API endpoint."""

import pytest


class TestGetLocales:
    """Tests for GET /api/locales."""

    @pytest.mark.asyncio
    async def test__returns_locale_configuration(self, client) -> None:
        test_client = await client
        response = await test_client.get("/api/locales")

        assert response.status == 200
        assert await response.json() == {
            "default_locale": "en",
            "locales": ["en", "es"],
            "labels": {"en": "English", "es": "Español"},
            "html_lang": {"en": "en", "es": "es"},
        }
