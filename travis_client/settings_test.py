"""Unit tests for settings loading."""

import pytest

from .models import API_COM_URL, API_ORG_URL
from .settings import Settings


def describe_Settings():
    @pytest.fixture(autouse=True)
    def clean_env(monkeypatch):
        for name in ("TRAVIS_TOKEN", "TRAVIS_API_URL", "TRAVIS_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

    def it_uses_defaults_without_environment():
        settings = Settings(_env_file=None)
        assert settings.travis_token is None
        assert settings.travis_api_url == API_COM_URL
        assert settings.travis_timeout == 30.0

    def it_reads_environment_variables(monkeypatch):
        monkeypatch.setenv("TRAVIS_TOKEN", "env-token")
        monkeypatch.setenv("TRAVIS_API_URL", API_ORG_URL)
        monkeypatch.setenv("TRAVIS_TIMEOUT", "5")

        settings = Settings(_env_file=None)

        assert settings.travis_token == "env-token"
        assert settings.travis_api_url == API_ORG_URL
        assert settings.travis_timeout == 5.0

    def it_reads_a_dotenv_file(tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("TRAVIS_TOKEN=file-token\nUNRELATED=ignored\n")

        settings = Settings(_env_file=env_file)

        assert settings.travis_token == "file-token"
