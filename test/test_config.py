"""Tests for configuration module."""

import pytest
import tempfile
from pathlib import Path

from dnsoverhttps import constants
from dnsoverhttps.core.config import ClientConfig, load_config
from dnsoverhttps.exceptions import ConfigError


class TestClientConfig:
    """Test cases for ClientConfig class."""

    def test_create_default_config(self):
        """Test creating a default client configuration."""
        config = ClientConfig()

        assert config.base_url == "https://1.1.1.1/dns-query"
        assert config.user_agent == constants.USER_AGENT
        assert config.accept == "application/dns-json"
        assert config.http2 is True
        assert config.timeout == 10.0
        assert config.verify is True
        assert config.preview_max_length == 500

    def test_headers(self):
        config = ClientConfig(user_agent="tests/1.0")

        assert config.headers == {"User-Agent": "tests/1.0", "Accept": "application/dns-json"}

    def test_config_is_frozen(self):
        """Test that a configuration cannot change after creation."""
        config = ClientConfig()
        with pytest.raises(Exception):
            config.http2 = False

    def test_unknown_field_rejected(self):
        with pytest.raises(Exception):
            ClientConfig(retries=3)

    @pytest.mark.parametrize("url", [
        "ftp://1.1.1.1/dns-query",
        "1.1.1.1/dns-query",
        "https://1.1.1.1/dns-query?name=x",
    ])
    def test_invalid_base_url(self, url):
        with pytest.raises(Exception):
            ClientConfig(base_url=url)

    def test_timeout_may_be_disabled(self):
        assert ClientConfig(timeout=None).timeout is None

    def test_from_dict(self):
        config = ClientConfig.from_dict({"http2": False, "timeout": 2.5})

        assert config.http2 is False
        assert config.timeout == 2.5

    def test_from_dict_invalid(self):
        with pytest.raises(ConfigError):
            ClientConfig.from_dict({"timeout": -1})
        with pytest.raises(ConfigError):
            ClientConfig.from_dict(["not", "a", "dict"])


class TestConfigFiles:
    """Test cases for YAML configuration files."""

    def test_save_and_load(self):
        """Test saving a configuration and loading it back."""
        config = ClientConfig(base_url="https://resolver.test/dns-query", timeout=3.0)

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "client.yaml"
            config.save_to_file(str(path))

            assert path.exists()
            loaded = ClientConfig.from_file(str(path))

        assert loaded == config

    def test_empty_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "empty.yaml"
            path.write_text("", encoding="utf-8")

            assert ClientConfig.from_file(str(path)) == ClientConfig()

    def test_invalid_yaml(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "broken.yaml"
            path.write_text("timeout: [1, 2\n", encoding="utf-8")

            with pytest.raises(ConfigError, match="Invalid YAML"):
                ClientConfig.from_file(str(path))

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            ClientConfig.from_file("/nonexistent/dnsoverhttps.yaml")

    def test_load_config_from_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "client.yaml"
            path.write_text("http2: false\npreview_max_length: 80\n", encoding="utf-8")

            config = load_config(str(path))

        assert config.http2 is False
        assert config.preview_max_length == 80

    def test_load_config_defaults(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setattr(Path, "exists", lambda self: False)

        assert load_config() == ClientConfig()
