"""
Unit tests for environment based settings
"""

import os

import pytest

from ProxerPy.clients.exceptions import InvalidParametersError
from ProxerPy.clients.options import ProxerOptions, TEST_MODE
from ProxerPy.utils.env_settings import ProxerSettings, load_settings, read_env_values


class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings(environ={})

        assert settings.api_key is None
        assert settings.test_mode is False
        assert settings.to_options() == ProxerOptions()

    def test_all_values(self):
        settings = load_settings(environ={
            "PROXER_API_KEY": "abc",
            "PROXER_HOST": "localhost",
            "PROXER_PORT": "8080",
            "PROXER_PATH": "/proxy",
            "PROXER_USE_SSL": "false",
            "PROXER_DEVICE": "script/2",
            "PROXER_TIMEOUT": "2.5",
        })
        options = settings.to_options()

        assert settings.get_api_key() == "abc"
        assert settings.timeout == 2.5
        assert options == ProxerOptions(host="localhost", path="/proxy", port=8080, use_ssl=False, device="script/2")

    def test_test_mode_wins_over_key(self):
        settings = load_settings(environ={"PROXER_API_KEY": "abc", "PROXER_TEST_MODE": "1"})
        assert settings.get_api_key() is TEST_MODE

    def test_missing_key(self):
        with pytest.raises(InvalidParametersError):
            load_settings(environ={}).get_api_key()

    @pytest.mark.parametrize("name, value", [
        ("PROXER_PORT", "http"),
        ("PROXER_USE_SSL", "maybe"),
        ("PROXER_TIMEOUT", "0"),
    ])
    def test_invalid_values(self, name, value):
        with pytest.raises(InvalidParametersError) as exc_info:
            load_settings(environ={name: value})

        field_name = name[len("PROXER_"):].lower()
        assert field_name in exc_info.value.details["fields"]

    def test_env_file(self, tmp_path, monkeypatch):
        for name in ("PROXER_API_KEY", "PROXER_HOST"):
            monkeypatch.delenv(name, raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("PROXER_API_KEY=from-file\nPROXER_HOST=example.org\n")

        try:
            settings = load_settings(env_file=str(env_file))
        finally:
            # load_dotenv writes into os.environ
            for name in ("PROXER_API_KEY", "PROXER_HOST"):
                os.environ.pop(name, None)

        assert settings.api_key == "from-file"
        assert settings.host == "example.org"

    def test_empty_values_ignored(self):
        assert read_env_values({"PROXER_API_KEY": "", "OTHER": "x"}) == {}

    def test_settings_model_fields(self):
        assert set(ProxerSettings.model_fields) == {
            "api_key", "test_mode", "host", "path", "port", "use_ssl", "device", "timeout"
        }
