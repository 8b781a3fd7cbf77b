"""
Connection configuration for the websms SDK.

Holds the gateway URL, credentials and transport settings shared across
``Client.send`` calls, and loads them from environment variables.
"""

import dataclasses
import logging
import os
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any
from urllib.parse import urlparse

from dotenv import load_dotenv

from .constants import (
    Endpoints,
    EnvVars,
    ErrorMessages,
    ValidationPatterns,
    DEFAULT_TIMEOUT,
    DEFAULT_HTTPS_PORT,
    DEFAULT_HTTP_PORT
)
from .exceptions import ParameterValidationException
from .validators import validate_hostname, validate_credentials

logger = logging.getLogger(__name__)


class AuthenticationMode(Enum):
    """How the client authenticates against the gateway."""
    USER_PW = "user_pw"
    ACCESS_TOKEN = "access_token"


def normalize_url(url: str) -> str:
    """Strip trailing slashes and prepend https:// when no scheme is given."""
    url = re.sub(ValidationPatterns.TRAILING_SLASHES_PATTERN, "", url or "")
    if not re.match(ValidationPatterns.SCHEME_PATTERN, url, re.IGNORECASE):
        url = f"https://{url}"
    return url


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ConnectionConfig:
    """
    Connection settings for the websms gateway.

    Attributes:
        url: Gateway URL, normalized on construction
        username: Username (USER_PW mode)
        password: Password (USER_PW mode)
        access_token: Bearer token (ACCESS_TOKEN mode)
        mode: Authentication mode
        connection_timeout: Request timeout in seconds
        verify_ssl: Verify the gateway's TLS certificate
        verbose: Log request and response details at INFO level
        transport_options: Extra keyword arguments passed to requests.post;
            explicit settings above always take precedence
        test_mode: Ask the gateway to simulate instead of dispatching
        scheme, host, path, port: Derived from url
    """
    url: str
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    access_token: Optional[str] = field(default=None, repr=False)
    mode: AuthenticationMode = AuthenticationMode.USER_PW
    connection_timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    verbose: bool = False
    transport_options: Dict[str, Any] = field(default_factory=dict)
    test_mode: bool = False
    scheme: str = field(init=False, default="https")
    host: str = field(init=False, default="")
    path: str = field(init=False, default="")
    port: int = field(init=False, default=DEFAULT_HTTPS_PORT)

    def __post_init__(self):
        self.url = normalize_url(self.url)
        self._parse_url()

        validate_hostname(self.host, url=self.url, strict=True)

        token_auth = self.mode is AuthenticationMode.ACCESS_TOKEN
        validate_credentials(
            token_auth,
            self.access_token if token_auth else self.username,
            self.password,
            strict=True
        )

    def _parse_url(self) -> None:
        try:
            parsed = urlparse(self.url)
            port = parsed.port
        except ValueError as e:
            raise ParameterValidationException(
                ErrorMessages.INVALID_URL.format(url=self.url),
                field="url",
                value=self.url
            ) from e

        host = parsed.hostname or ""
        # IPv6 literals keep their brackets so the host can be joined with a port
        self.host = f"[{host}]" if ":" in host else host
        self.path = parsed.path or ""
        self.scheme = (parsed.scheme or "http").lower()

        if not port:
            port = DEFAULT_HTTP_PORT if self.scheme == "http" else DEFAULT_HTTPS_PORT
        self.port = port

    @property
    def token_auth(self) -> bool:
        return self.mode is AuthenticationMode.ACCESS_TOKEN

    @property
    def api_base_url(self) -> str:
        """Base URL of the JSON messaging API, ending with a slash."""
        default_port = DEFAULT_HTTP_PORT if self.scheme == "http" else DEFAULT_HTTPS_PORT
        netloc = self.host if self.port == default_port else f"{self.host}:{self.port}"
        return f"{self.scheme}://{netloc}{Endpoints.BASE_PATH}"

    def with_test_mode(self, enabled: bool = True) -> "ConnectionConfig":
        """Return a copy of this config with test mode set."""
        return dataclasses.replace(
            self,
            test_mode=enabled,
            transport_options=dict(self.transport_options)
        )

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "ConnectionConfig":
        """
        Build a config from environment variables (and a .env file if present).

        WEBSMS_ACCESS_TOKEN selects token authentication; otherwise
        WEBSMS_USERNAME and WEBSMS_PASSWORD are used.

        Raises:
            ParameterValidationException: If the URL or credentials are missing
        """
        load_dotenv(dotenv_path)

        url = os.getenv(EnvVars.URL)
        if not url:
            raise ParameterValidationException(
                ErrorMessages.MISSING_URL.format(env_var=EnvVars.URL),
                field="url"
            )

        access_token = os.getenv(EnvVars.ACCESS_TOKEN)
        mode = AuthenticationMode.ACCESS_TOKEN if access_token else AuthenticationMode.USER_PW

        timeout_value = os.getenv(EnvVars.TIMEOUT)
        try:
            timeout = float(timeout_value) if timeout_value else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ParameterValidationException(
                f"Invalid {EnvVars.TIMEOUT}: must be a number of seconds",
                field="connection_timeout",
                value=timeout_value
            ) from e

        config = cls(
            url=url,
            username=os.getenv(EnvVars.USERNAME),
            password=os.getenv(EnvVars.PASSWORD),
            access_token=access_token,
            mode=mode,
            connection_timeout=timeout,
            verify_ssl=_env_flag(EnvVars.VERIFY_SSL, True),
            verbose=_env_flag(EnvVars.VERBOSE, False),
            test_mode=_env_flag(EnvVars.TEST_MODE, False)
        )

        logger.info(f"Loaded websms config from environment - Host: {config.host}, Mode: {mode.value}")
        return config
