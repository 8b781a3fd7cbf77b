"""
Unit tests for websms.config module.

Tests URL normalization, hostname and credential validation, and loading
the connection config from environment variables.
"""

import pytest
from unittest.mock import patch
import sys
import os

# Add the parent directory to the path so we can import the module
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from websms.config import AuthenticationMode, ConnectionConfig, normalize_url
from websms.exceptions import ParameterValidationException


class TestUrlNormalization:
    """Test URL normalization and parsing."""

    def test_prepends_https_when_scheme_missing(self):
        assert normalize_url("api.websms.com") == "https://api.websms.com"
        assert normalize_url("api.websms.com:8443/path") == "https://api.websms.com:8443/path"

    def test_strips_trailing_slashes(self):
        assert normalize_url("https://api.websms.com/") == "https://api.websms.com"
        assert normalize_url("https://api.websms.com///") == "https://api.websms.com"
        assert normalize_url("api.websms.com/prefix//") == "https://api.websms.com/prefix"

    def test_keeps_existing_scheme(self):
        assert normalize_url("http://api.websms.com") == "http://api.websms.com"
        assert normalize_url("HTTPS://api.websms.com") == "HTTPS://api.websms.com"

    def test_https_default_port(self):
        config = ConnectionConfig("api.websms.com", username="user", password="pw")

        assert config.url == "https://api.websms.com"
        assert config.scheme == "https"
        assert config.host == "api.websms.com"
        assert config.port == 443
        assert config.path == ""

    def test_http_default_port(self):
        config = ConnectionConfig("http://api.websms.com/", username="user", password="pw")

        assert config.scheme == "http"
        assert config.port == 80

    def test_explicit_port_and_path(self):
        config = ConnectionConfig("https://api.websms.com:8443/gateway/", username="user", password="pw")

        assert config.port == 8443
        assert config.path == "/gateway"
        assert config.url == "https://api.websms.com:8443/gateway"

    def test_api_base_url(self):
        config = ConnectionConfig("api.websms.com/ignored", username="user", password="pw")
        assert config.api_base_url == "https://api.websms.com/json/smsmessaging/"

        config = ConnectionConfig("http://localhost:8080", username="user", password="pw")
        assert config.api_base_url == "http://localhost:8080/json/smsmessaging/"

    def test_ipv6_host_keeps_brackets(self):
        config = ConnectionConfig("https://[2001:db8::1]:8443", username="user", password="pw")

        assert config.host == "[2001:db8::1]"
        assert config.port == 8443
        assert config.api_base_url == "https://[2001:db8::1]:8443/json/smsmessaging/"

    def test_short_ipv6_host_accepted(self):
        config = ConnectionConfig("http://[::1]", username="user", password="pw")

        assert config.host == "[::1]"
        assert config.api_base_url == "http://[::1]/json/smsmessaging/"

    def test_invalid_port_raises(self):
        with pytest.raises(ParameterValidationException):
            ConnectionConfig("api.websms.com:notaport", username="user", password="pw")


class TestConfigValidation:
    """Test hostname and credential validation on construction."""

    @pytest.mark.parametrize("url", ["", "a", "abc", "https://abc", "http://x.y/", "https://"])
    def test_short_host_rejected(self, url):
        with pytest.raises(ParameterValidationException) as exc_info:
            ConnectionConfig(url, username="user", password="pw")

        assert exc_info.value.field == "host"

    def test_short_host_rejected_before_credentials(self):
        with pytest.raises(ParameterValidationException) as exc_info:
            ConnectionConfig("abc", mode=AuthenticationMode.ACCESS_TOKEN)

        assert exc_info.value.field == "host"

    @pytest.mark.parametrize("username,password", [
        ("", "pw"),
        ("user", ""),
        (None, "pw"),
        ("user", None),
        (None, None),
    ])
    def test_user_pw_requires_both(self, username, password):
        with pytest.raises(ParameterValidationException):
            ConnectionConfig("api.websms.com", username=username, password=password)

    @pytest.mark.parametrize("token", ["", None])
    def test_access_token_required(self, token):
        with pytest.raises(ParameterValidationException):
            ConnectionConfig(
                "api.websms.com",
                access_token=token,
                mode=AuthenticationMode.ACCESS_TOKEN
            )

    def test_access_token_mode_ignores_missing_password(self):
        config = ConnectionConfig(
            "api.websms.com",
            access_token="secret-token",
            mode=AuthenticationMode.ACCESS_TOKEN
        )

        assert config.token_auth
        assert config.password is None

    def test_credentials_not_in_repr(self):
        config = ConnectionConfig("api.websms.com", username="user", password="hunter2")
        assert "hunter2" not in repr(config)

    def test_defaults(self):
        config = ConnectionConfig("api.websms.com", username="user", password="pw")

        assert config.connection_timeout == 10
        assert config.verify_ssl is True
        assert config.verbose is False
        assert config.test_mode is False
        assert config.transport_options == {}


class TestWithTestMode:
    """Test the copy-on-set test mode transformation."""

    def test_returns_copy(self):
        config = ConnectionConfig(
            "api.websms.com",
            username="user",
            password="pw",
            transport_options={"proxies": {"https": "http://proxy:3128"}}
        )

        test_config = config.with_test_mode()

        assert test_config.test_mode is True
        assert config.test_mode is False
        assert test_config is not config
        assert test_config.host == config.host
        assert test_config.transport_options == config.transport_options
        assert test_config.transport_options is not config.transport_options

    def test_disable(self):
        config = ConnectionConfig("api.websms.com", username="user", password="pw", test_mode=True)
        assert config.with_test_mode(False).test_mode is False


class TestFromEnv:
    """Test loading config from environment variables."""

    @patch('websms.config.load_dotenv')
    @patch.dict(os.environ, {
        "WEBSMS_URL": "api.websms.com/",
        "WEBSMS_USERNAME": "env_user",
        "WEBSMS_PASSWORD": "env_password"
    }, clear=True)
    def test_user_pw_from_env(self, mock_load_dotenv):
        config = ConnectionConfig.from_env()

        assert config.mode is AuthenticationMode.USER_PW
        assert config.url == "https://api.websms.com"
        assert config.username == "env_user"
        assert config.password == "env_password"
        assert config.connection_timeout == 10
        mock_load_dotenv.assert_called_once()

    @patch('websms.config.load_dotenv')
    @patch.dict(os.environ, {
        "WEBSMS_URL": "https://api.websms.com",
        "WEBSMS_ACCESS_TOKEN": "env_token",
        "WEBSMS_TIMEOUT": "25",
        "WEBSMS_VERIFY_SSL": "false",
        "WEBSMS_VERBOSE": "1",
        "WEBSMS_TEST_MODE": "yes"
    }, clear=True)
    def test_token_and_flags_from_env(self, mock_load_dotenv):
        config = ConnectionConfig.from_env()

        assert config.mode is AuthenticationMode.ACCESS_TOKEN
        assert config.access_token == "env_token"
        assert config.connection_timeout == 25.0
        assert config.verify_ssl is False
        assert config.verbose is True
        assert config.test_mode is True

    @patch('websms.config.load_dotenv')
    @patch.dict(os.environ, {}, clear=True)
    def test_missing_url(self, mock_load_dotenv):
        with pytest.raises(ParameterValidationException) as exc_info:
            ConnectionConfig.from_env()

        assert "WEBSMS_URL" in exc_info.value.message

    @patch('websms.config.load_dotenv')
    @patch.dict(os.environ, {"WEBSMS_URL": "api.websms.com"}, clear=True)
    def test_missing_credentials(self, mock_load_dotenv):
        with pytest.raises(ParameterValidationException):
            ConnectionConfig.from_env()

    @patch('websms.config.load_dotenv')
    @patch.dict(os.environ, {
        "WEBSMS_URL": "api.websms.com",
        "WEBSMS_ACCESS_TOKEN": "token",
        "WEBSMS_TIMEOUT": "soon"
    }, clear=True)
    def test_invalid_timeout(self, mock_load_dotenv):
        with pytest.raises(ParameterValidationException) as exc_info:
            ConnectionConfig.from_env()

        assert exc_info.value.field == "connection_timeout"


if __name__ == "__main__":
    pytest.main([__file__])
