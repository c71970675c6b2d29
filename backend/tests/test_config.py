"""Tests for settings and provider credential checks."""

import pytest

from howto.common.config import ProviderCredentials, ProviderName, Settings
from howto.common.exceptions import (
    ConfigurationError,
    MissingOpenAIKeyError,
    MissingSearchCredentialsError,
    MissingYouTubeKeyError,
)


class TestSettings:
    """Test Settings loading."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("YOUTUBE_API_KEY", "yt")
        monkeypatch.setenv("OPENAI_MODEL", "gpt-4o-mini")
        s = Settings(_env_file=None)
        assert s.youtube_api_key == "yt"
        assert s.openai_model == "gpt-4o-mini"

    def test_defaults(self, monkeypatch):
        for name in ("YOUTUBE_API_KEY", "GOOGLE_SEARCH_API_KEY", "GOOGLE_SEARCH_ENGINE_ID", "OPENAI_API_KEY"):
            monkeypatch.delenv(name, raising=False)
        s = Settings(_env_file=None)
        assert s.openai_base_url == "https://api.openai.com/v1"
        assert s.youtube_api_key is None


class TestProviderCredentials:
    """Test ProviderCredentials checks."""

    def test_from_settings_treats_blank_as_missing(self):
        creds = ProviderCredentials.from_settings(Settings(_env_file=None, youtube_api_key="", openai_api_key="sk"))
        assert not creds.has_youtube
        assert creds.has_openai

    def test_require_youtube(self):
        with pytest.raises(MissingYouTubeKeyError):
            ProviderCredentials().require_youtube()
        assert ProviderCredentials(youtube_api_key="k").require_youtube() == "k"

    def test_require_search_needs_both(self):
        with pytest.raises(MissingSearchCredentialsError):
            ProviderCredentials(google_search_api_key="k").require_search()
        creds = ProviderCredentials(google_search_api_key="k", google_search_engine_id="cx")
        assert creds.require_search() == ("k", "cx")

    def test_require_openai(self):
        with pytest.raises(MissingOpenAIKeyError) as exc_info:
            ProviderCredentials().require_openai()
        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.status_code == 500

    def test_status(self, full_credentials):
        assert full_credentials.status() == {"youtube": True, "google_search": True, "openai": True}
        assert ProviderCredentials().status() == {"youtube": False, "google_search": False, "openai": False}

    def test_status_keyed_by_provider_name(self, full_credentials):
        assert set(full_credentials.status()) == {name.value for name in ProviderName}
