# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import pytest
import requests

from utho import UthoClient
from utho.core.config import BASE_URL, UthoConfig
from utho.core.errors import InvalidConfigurationError
from utho.core.options import (
    _ClientSettings,
    with_base_url,
    with_session,
    with_telemetry,
    with_timeout,
)
from utho.core.telemetry import TelemetryConfig


class TestUthoConfig:
    def test_defaults(self):
        config = UthoConfig()
        assert config.base_url == BASE_URL == "https://api.utho.com/v2/"
        assert config.http_timeout is None
        assert config.telemetry is None

    def test_immutability(self):
        config = UthoConfig()
        with pytest.raises(AttributeError):
            config.base_url = "https://other.example/"

    def test_from_env_defaults(self):
        assert UthoConfig.from_env() == UthoConfig()

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("UTHO_BASE_URL", "https://staging.example/v2")
        monkeypatch.setenv("UTHO_HTTP_TIMEOUT", "45")
        config = UthoConfig.from_env()
        assert config.base_url == "https://staging.example/v2"
        assert config.http_timeout == 45.0

    def test_from_env_rejects_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("UTHO_HTTP_TIMEOUT", "soon")
        with pytest.raises(InvalidConfigurationError) as ei:
            UthoConfig.from_env()
        assert ei.value.subcode == "config_invalid_timeout"


class TestOptions:
    def _settings(self):
        return _ClientSettings.from_config(UthoConfig())

    def test_with_base_url_normalizes(self):
        settings = self._settings()
        with_base_url("https://api.example.com/v2")(settings)
        assert settings.base_url == "https://api.example.com/v2/"

    def test_with_base_url_rejects_malformed(self):
        with pytest.raises(InvalidConfigurationError):
            with_base_url("::nope::")(self._settings())

    def test_with_timeout(self):
        settings = self._settings()
        with_timeout(30)(settings)
        assert settings.timeout == 30.0

    @pytest.mark.parametrize("value", [0, -1, "10", None, True, float("nan"), float("inf")])
    def test_with_timeout_rejects(self, value):
        with pytest.raises(InvalidConfigurationError) as ei:
            with_timeout(value)(self._settings())
        assert ei.value.subcode == "config_invalid_timeout"

    def test_with_session(self):
        session = requests.Session()
        settings = self._settings()
        with_session(session)(settings)
        assert settings.session is session

    def test_with_session_rejects_other_objects(self):
        with pytest.raises(InvalidConfigurationError) as ei:
            with_session(object())(self._settings())
        assert ei.value.subcode == "config_invalid_session"

    def test_with_telemetry(self):
        telemetry = TelemetryConfig(enable_logging=True)
        settings = self._settings()
        with_telemetry(telemetry)(settings)
        assert settings.to_config().telemetry is telemetry

    def test_to_config_normalizes_base_url(self):
        settings = _ClientSettings(base_url="https://h.example/v3", timeout=5.0)
        config = settings.to_config()
        assert config == UthoConfig(base_url="https://h.example/v3/", http_timeout=5.0)

    @pytest.mark.parametrize("value", [0, -1.5, float("nan"), True, "30"])
    def test_to_config_rejects_bad_timeout(self, value):
        settings = _ClientSettings(base_url="https://h.example/v3", timeout=value)
        with pytest.raises(InvalidConfigurationError) as ei:
            settings.to_config()
        assert ei.value.subcode == "config_invalid_timeout"


class TestTimeoutAtConstruction:
    @pytest.mark.parametrize("raw", ["0", "-3", "nan", "inf"])
    def test_env_timeout_rejected_by_client(self, monkeypatch, raw):
        monkeypatch.setenv("UTHO_HTTP_TIMEOUT", raw)
        with pytest.raises(InvalidConfigurationError) as ei:
            UthoClient("tok")
        assert ei.value.subcode == "config_invalid_timeout"

    def test_config_timeout_rejected_by_client(self):
        with pytest.raises(InvalidConfigurationError) as ei:
            UthoClient("tok", config=UthoConfig(http_timeout=-1))
        assert ei.value.subcode == "config_invalid_timeout"

    def test_option_can_replace_bad_config_timeout(self):
        client = UthoClient("tok", with_timeout(20), config=UthoConfig(http_timeout=0))
        assert client.config.http_timeout == 20.0
