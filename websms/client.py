"""
Main client for the websms SDK.

This module contains the Client class that sends text and binary SMS
messages through the websms JSON API and maps every outcome to either a
Response or one of the exceptions in ``websms.exceptions``.
"""

import logging
import numbers
import platform
from typing import Optional, Dict, Any

import requests

from .config import AuthenticationMode, ConnectionConfig
from .constants import (
    Endpoints,
    Headers,
    StatusCodes,
    ApiStatusCodes,
    ErrorMessages,
    TransportOptions,
    SDK_VERSION
)
from .exceptions import (
    HttpConnectionException,
    UnknownResponseException,
    ApiException,
    create_exception_from_response
)
from .messages import Message, BinaryMessage
from .models import Response
from .validators import validate_max_sms_per_message

# Set up logging
logger = logging.getLogger(__name__)


class Client:
    """
    Client for the websms SMS gateway.

    One ``send`` call performs exactly one HTTP POST; nothing is retried.
    Settings changed through the fluent setters (``test()``,
    ``set_verbose()`` ...) are shared by every later send on the same
    instance, so toggling them while another thread is sending is the
    caller's responsibility. Pass ``test_mode`` to ``send`` or use
    ``ConnectionConfig.with_test_mode`` to avoid shared toggles.

    Example:
        client = Client("https://api.websms.com", "my_user", "my_password")

        message = TextMessage([4367612345678], "Hello!")
        response = client.test().send(message, max_sms_per_message=1)
        print(response.transfer_id)
    """

    def __init__(
        self,
        url: Optional[str] = None,
        username_or_access_token: Optional[str] = None,
        password: Optional[str] = None,
        mode: AuthenticationMode = AuthenticationMode.USER_PW,
        config: Optional[ConnectionConfig] = None
    ):
        """
        Initialize the client.

        Args:
            url: Gateway URL; https:// is assumed when no scheme is given
            username_or_access_token: Username (USER_PW) or access token (ACCESS_TOKEN)
            password: Password, USER_PW mode only
            mode: Authentication mode
            config: Ready-made connection config; other arguments are ignored

        Raises:
            ParameterValidationException: If the hostname or credentials are invalid
        """
        if config is None:
            token_auth = mode is AuthenticationMode.ACCESS_TOKEN
            config = ConnectionConfig(
                url=url,
                username=None if token_auth else username_or_access_token,
                password=None if token_auth else password,
                access_token=username_or_access_token if token_auth else None,
                mode=mode
            )

        self.config = config

        logger.info(f"websms client initialized - Host: {self.config.host}, Mode: {self.config.mode.value}")

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> "Client":
        return cls(config=config)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Client":
        """Create a client from WEBSMS_* environment variables."""
        return cls(config=ConnectionConfig.from_env(dotenv_path))

    def send(
        self,
        message: Message,
        max_sms_per_message: Optional[int] = None,
        test_mode: Optional[bool] = None
    ) -> Response:
        """
        Send a text or binary message.

        Args:
            message: TextMessage or BinaryMessage
            max_sms_per_message: Maximum number of SMS segments per message
            test_mode: Override the client's test mode for this call only

        Returns:
            Response with the gateway's status and transfer id

        Raises:
            ParameterValidationException: If max_sms_per_message is not positive
            HttpConnectionException: If the gateway is unreachable or the HTTP status is not 200
            AuthorizationFailedException: If the gateway answers 401
            UnknownResponseException: If the response is not JSON
            ApiException: If the gateway rejects the message

        Example:
            response = client.send(TextMessage(["4367612345678"], "Hi"), max_sms_per_message=2)
        """
        validate_max_sms_per_message(max_sms_per_message, strict=True)

        return self._do_request(message, max_sms_per_message, test_mode)

    def _build_payload(
        self,
        message: Message,
        max_sms_per_message: Optional[int],
        test_mode: Optional[bool]
    ) -> Dict[str, Any]:
        payload = message.to_json_data()

        if max_sms_per_message is not None:
            payload["maxSmsPerMessage"] = max_sms_per_message

        payload["test"] = self.config.test_mode if test_mode is None else bool(test_mode)
        return payload

    def _build_headers(self) -> Dict[str, str]:
        headers = {
            Headers.USER_AGENT: Headers.USER_AGENT_TEMPLATE.format(
                version=SDK_VERSION,
                python_version=platform.python_version()
            )
        }

        if self.config.token_auth:
            headers[Headers.AUTHORIZATION] = Headers.BEARER_TEMPLATE.format(token=self.config.access_token)

        return headers

    def _build_request_options(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Merge passthrough transport options with the client's explicit settings."""
        options = dict(self.config.transport_options)

        for key in TransportOptions.RESERVED_KEYS & options.keys():
            logger.warning(f"Ignoring transport option '{key}', it is set by the client")
            del options[key]

        headers = dict(options.get("headers") or {})
        headers.update(self._build_headers())

        options.update({
            "json": payload,
            "headers": headers,
            "timeout": self.config.connection_timeout
        })

        if self.config.token_auth:
            options.pop("auth", None)
        else:
            options["auth"] = (self.config.username, self.config.password)

        # Only disabling is explicit; a passthrough CA bundle path stays intact
        if not self.config.verify_ssl:
            options["verify"] = False

        return options

    def _endpoint_for(self, message: Message) -> str:
        path = Endpoints.BINARY if isinstance(message, BinaryMessage) else Endpoints.TEXT
        return f"{self.config.api_base_url}{path}"

    def _do_request(
        self,
        message: Message,
        max_sms_per_message: Optional[int],
        test_mode: Optional[bool]
    ) -> Response:
        url = self._endpoint_for(message)
        payload = self._build_payload(message, max_sms_per_message, test_mode)
        options = self._build_request_options(payload)

        logger.info(f"Sending {message.message_type} message to {url}")
        if self.config.verbose:
            logger.info(f"Request payload: {payload}")
        else:
            logger.debug(f"Request payload: {payload}")

        try:
            response = requests.post(url, **options)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Connection to {self.config.host} failed: {e}")
            raise HttpConnectionException(
                ErrorMessages.CONNECT_FAILED,
                details={"error": str(e)}
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {self.config.host} failed: {e}")
            raise HttpConnectionException(f"Request error: {str(e)}") from e

        return self._parse_response(response)

    def _parse_response(self, response: requests.Response) -> Response:
        """Check HTTP status, content type and business status code, in that order."""
        if self.config.verbose:
            logger.info(f"Response status: {response.status_code}, body: {response.text}")
        else:
            logger.info(f"Response status: {response.status_code}")

        # Exactly 200 passes; 401 is mapped to AuthorizationFailedException
        if response.status_code > StatusCodes.OK:
            error = create_exception_from_response(response, token_auth=self.config.token_auth)
            logger.error(f"websms request failed: {error.to_dict()}")
            raise error

        content_type = response.headers.get(Headers.CONTENT_TYPE, "")
        if Headers.JSON_CONTENT_TYPE not in content_type:
            raise UnknownResponseException(
                ErrorMessages.UNKNOWN_CONTENT_TYPE.format(content_type=content_type, body=response.text),
                content_type=content_type,
                status_code=response.status_code,
                body=response.text
            )

        try:
            api_result = response.json()
        except ValueError as e:
            raise UnknownResponseException(
                ErrorMessages.INVALID_JSON.format(body=response.text),
                content_type=content_type,
                status_code=response.status_code,
                body=response.text
            ) from e

        if not isinstance(api_result, dict):
            raise UnknownResponseException(
                ErrorMessages.INVALID_JSON.format(body=response.text),
                content_type=content_type,
                status_code=response.status_code,
                body=response.text
            )

        api_status = api_result.get("statusCode")
        is_number = isinstance(api_status, numbers.Real) and not isinstance(api_status, bool)
        if not is_number or not ApiStatusCodes.is_success(api_status):
            error = ApiException(
                api_result.get("statusMessage") or ApiStatusCodes.describe(api_status),
                code=api_status,
                api_response=api_result,
                status_code=response.status_code,
                body=response.text
            )
            logger.error(f"websms rejected message: {error.to_dict()}")
            raise error

        result = Response.from_api_result(api_result, response)
        logger.info(f"Message accepted - Transfer ID: {result.transfer_id}, Status: {result.status_code}")
        return result

    def test(self) -> "Client":
        """Flag every following request as a test; the gateway will not dispatch."""
        self.config.test_mode = True
        return self

    def no_test(self) -> "Client":
        self.config.test_mode = False
        return self

    def set_connection_timeout(self, connection_timeout: float) -> "Client":
        """Set the HTTP timeout in seconds."""
        self.config.connection_timeout = connection_timeout
        return self

    def set_verbose(self, value: bool) -> "Client":
        """Log request payloads and response bodies at INFO level."""
        self.config.verbose = value
        return self

    def set_ssl_verify_host(self, value: bool) -> "Client":
        """Enable or disable TLS certificate verification."""
        self.config.verify_ssl = value
        return self

    def set_transport_options(self, transport_options: Dict[str, Any]) -> "Client":
        """
        Set extra keyword arguments for requests.post (proxies, cert, ...).

        json, headers, timeout and auth set by the client take precedence;
        url, data and files are dropped.
        """
        self.config.transport_options = dict(transport_options)
        return self

    @property
    def version(self) -> str:
        return SDK_VERSION

    @property
    def mode(self) -> AuthenticationMode:
        return self.config.mode

    @property
    def username(self) -> Optional[str]:
        return self.config.username

    @property
    def password(self) -> Optional[str]:
        return self.config.password

    @property
    def access_token(self) -> Optional[str]:
        return self.config.access_token

    @property
    def url(self) -> str:
        return self.config.url

    @property
    def scheme(self) -> str:
        return self.config.scheme

    @property
    def host(self) -> str:
        return self.config.host

    @property
    def path(self) -> str:
        return self.config.path

    @property
    def port(self) -> int:
        return self.config.port

    @property
    def connection_timeout(self) -> float:
        return self.config.connection_timeout

    @property
    def test_mode(self) -> bool:
        return self.config.test_mode

    def get_client_info(self) -> Dict[str, Any]:
        """
        Get client configuration information, without credentials.

        Returns:
            Dictionary with client configuration
        """
        return {
            "version": self.version,
            "url": self.url,
            "api_base_url": self.config.api_base_url,
            "mode": self.mode.value,
            "timeout": self.connection_timeout,
            "verify_ssl": self.config.verify_ssl,
            "verbose": self.config.verbose,
            "test_mode": self.test_mode
        }
