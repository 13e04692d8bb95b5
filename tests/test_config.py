"""
tests/test_config.py — Environment configuration
"""

import os

import pytest

from challonge_client.config import DEFAULT_API_URL, load_challonge_config
from challonge_client.services.gateway import ChallongeGateway
from challonge_client.services.tournament_service import TournamentService

_VARS = (
    "CHALLONGE_USERNAME",
    "CHALLONGE_API_KEY",
    "CHALLONGE_API_URL",
    "CHALLONGE_DEBUG",
    "CHALLONGE_TIMEOUT",
    "CHALLONGE_STRICT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    """load_challonge_config()"""

    def test_defaults(self):
        config = load_challonge_config(use_dotenv=False)
        assert config.username == ""
        assert config.api_url == DEFAULT_API_URL
        assert config.debug is False
        assert config.strict is False
        assert config.timeout == 15.0
        assert config.is_configured is False

    def test_values_from_env(self, monkeypatch):
        monkeypatch.setenv("CHALLONGE_USERNAME", "  organizer ")
        monkeypatch.setenv("CHALLONGE_API_KEY", "secret")
        monkeypatch.setenv("CHALLONGE_API_URL", "http://localhost:9000/v1")
        monkeypatch.setenv("CHALLONGE_DEBUG", "yes")
        monkeypatch.setenv("CHALLONGE_TIMEOUT", "2.5")
        monkeypatch.setenv("CHALLONGE_STRICT", "1")

        config = load_challonge_config(use_dotenv=False)

        assert config.username == "organizer"
        assert config.is_configured is True
        assert config.api_url == "http://localhost:9000/v1"
        assert config.debug is True
        assert config.timeout == 2.5
        assert config.strict is True

    def test_invalid_timeout_falls_back(self, monkeypatch):
        monkeypatch.setenv("CHALLONGE_TIMEOUT", "soon")
        assert load_challonge_config(use_dotenv=False).timeout == 15.0

    def test_dotenv_file_is_read(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("CHALLONGE_USERNAME=from_file\n")
        monkeypatch.chdir(tmp_path)
        try:
            assert load_challonge_config().username == "from_file"
        finally:
            # load_dotenv writes os.environ directly, outside monkeypatch
            os.environ.pop("CHALLONGE_USERNAME", None)


class TestFromConfig:
    """Building the client handle from configuration."""

    @pytest.mark.asyncio
    async def test_service_from_config(self, monkeypatch):
        monkeypatch.setenv("CHALLONGE_USERNAME", "organizer")
        monkeypatch.setenv("CHALLONGE_API_KEY", "secret")
        monkeypatch.setenv("CHALLONGE_DEBUG", "1")
        monkeypatch.setenv("CHALLONGE_STRICT", "1")

        service = TournamentService.from_config(load_challonge_config(use_dotenv=False))

        assert isinstance(service.gateway, ChallongeGateway)
        assert service.gateway.username == "organizer"
        assert service.gateway.debug is True
        assert service.strict is True
        await service.gateway.close()


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
