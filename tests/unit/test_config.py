"""
Unit tests for settings and credential loading.
"""

import json

import pytest
from pydantic import ValidationError

from bandwagon.config import Settings
from bandwagon.types import Credentials
from bandwagon.vps import BandwagonClient


@pytest.fixture
def clean_env(monkeypatch):
    """Drop any BANDWAGON_* variables inherited from the shell."""
    for name in list(Settings.model_fields):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.unit
class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.BANDWAGON_BASE_URL == "https://api.64clouds.com"
        assert settings.BANDWAGON_FANOUT == 20
        assert settings.BANDWAGON_DEADLINE_MS == 3000
        assert settings.deadline == 3.0
        assert settings.BANDWAGON_FAIL_FAST is False
        assert settings.BANDWAGON_ATTEMPT_TIMEOUT == 5.0

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("BANDWAGON_VEID", "42")
        clean_env.setenv("BANDWAGON_FANOUT", "5")
        clean_env.setenv("BANDWAGON_DEADLINE_MS", "1500")
        clean_env.setenv("BANDWAGON_FAIL_FAST", "true")
        clean_env.setenv("BANDWAGON_BASE_URL", "https://mirror.test/")

        settings = Settings(_env_file=None)

        assert settings.BANDWAGON_VEID == "42"
        assert settings.BANDWAGON_FANOUT == 5
        assert settings.deadline == 1.5
        assert settings.BANDWAGON_FAIL_FAST is True
        assert settings.BANDWAGON_BASE_URL == "https://mirror.test"

    @pytest.mark.parametrize(
        "name,value",
        [("BANDWAGON_FANOUT", "0"), ("BANDWAGON_DEADLINE_MS", "0"), ("BANDWAGON_DEADLINE_MS", "-10")],
    )
    def test_invalid_race_settings(self, clean_env, name, value):
        clean_env.setenv(name, value)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("BANDWAGON_VEID=777\nBANDWAGON_API_KEY=from-dotenv\n")

        settings = Settings(_env_file=env_file)

        assert settings.BANDWAGON_VEID == "777"
        assert settings.BANDWAGON_API_KEY == "from-dotenv"


@pytest.mark.unit
class TestCredentials:
    """Tests for Credentials loading."""

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "credentials.yaml"
        path.write_text("veid: 123456\napi_key: private_abc\n")

        credentials = Credentials.from_file(path)

        assert credentials == Credentials(veid="123456", api_key="private_abc")

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "credentials.json"
        path.write_text(json.dumps({"veid": "99", "api_key": "private_json"}))

        credentials = Credentials.from_file(path)

        assert credentials.veid == "99"
        assert credentials.api_key == "private_json"

    def test_missing_key(self, tmp_path):
        path = tmp_path / "credentials.yaml"
        path.write_text("veid: 1\n")

        with pytest.raises(ValueError, match="api_key"):
            Credentials.from_file(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "credentials.yaml"
        path.write_text("- veid\n- api_key\n")

        with pytest.raises(ValueError, match="mapping"):
            Credentials.from_file(path)

    def test_repr_hides_api_key(self):
        credentials = Credentials(veid="1", api_key="private_secret")

        assert "private_secret" not in repr(credentials)

    def test_as_params(self):
        credentials = Credentials(veid="1", api_key="k")

        assert credentials.as_params() == (("veid", "1"), ("api_key", "k"))


@pytest.mark.unit
class TestBandwagonClientFromSettings:
    """Credential resolution for BandwagonClient."""

    def test_from_environment(self, clean_env):
        clean_env.setenv("BANDWAGON_VEID", "1")
        clean_env.setenv("BANDWAGON_API_KEY", "key")
        clean_env.setenv("BANDWAGON_FANOUT", "7")
        clean_env.setenv("BANDWAGON_DEADLINE_MS", "250")
        clean_env.setenv("BANDWAGON_RAISE_ON_API_ERROR", "1")

        client = BandwagonClient.from_env(Settings(_env_file=None))

        assert client.credentials == Credentials(veid="1", api_key="key")
        assert client.client.fanout == 7
        assert client.client.deadline == 0.25
        assert client.client.raise_on_api_error is True

    def test_from_credentials_file(self, clean_env, tmp_path):
        path = tmp_path / "credentials.yaml"
        path.write_text("veid: 55\napi_key: from-file\n")
        clean_env.setenv("BANDWAGON_CREDENTIALS_FILE", str(path))

        client = BandwagonClient.from_env(Settings(_env_file=None))

        assert client.credentials == Credentials(veid="55", api_key="from-file")

    def test_environment_beats_credentials_file(self, clean_env, tmp_path):
        path = tmp_path / "credentials.yaml"
        path.write_text("veid: 55\napi_key: from-file\n")
        clean_env.setenv("BANDWAGON_CREDENTIALS_FILE", str(path))
        clean_env.setenv("BANDWAGON_VEID", "66")
        clean_env.setenv("BANDWAGON_API_KEY", "from-env")

        client = BandwagonClient.from_env(Settings(_env_file=None))

        assert client.credentials == Credentials(veid="66", api_key="from-env")

    def test_environment_and_partial_credentials_file_are_merged(self, clean_env, tmp_path):
        path = tmp_path / "credentials.yaml"
        path.write_text("api_key: from-file\n")
        clean_env.setenv("BANDWAGON_CREDENTIALS_FILE", str(path))
        clean_env.setenv("BANDWAGON_VEID", "42")

        client = BandwagonClient.from_env(Settings(_env_file=None))

        assert client.credentials == Credentials(veid="42", api_key="from-file")

    def test_partial_credentials_file_without_environment(self, clean_env, tmp_path):
        path = tmp_path / "credentials.yaml"
        path.write_text("api_key: from-file\n")
        clean_env.setenv("BANDWAGON_CREDENTIALS_FILE", str(path))

        with pytest.raises(ValueError, match="No credentials found"):
            BandwagonClient.from_env(Settings(_env_file=None))

    def test_missing_credentials(self, clean_env):
        with pytest.raises(ValueError, match="No credentials found"):
            BandwagonClient.from_env(Settings(_env_file=None))
