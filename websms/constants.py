"""
Constants and configuration for the websms SDK.

This module contains the API endpoints, default values, status codes
and other constants used throughout the SDK.
"""

from typing import Dict, Set

SDK_VERSION = "1.0.0"

# API Configuration
DEFAULT_TIMEOUT = 10  # seconds
DEFAULT_HTTPS_PORT = 443
DEFAULT_HTTP_PORT = 80
MIN_HOST_LENGTH = 4

# API Endpoints
class Endpoints:
    """websms JSON API endpoints."""

    # Base API path, appended to the configured host
    BASE_PATH = "/json/smsmessaging/"

    # Message endpoints, relative to BASE_PATH
    TEXT = "text"
    BINARY = "binary"

# HTTP Headers
class Headers:
    """Standard HTTP headers used by the SDK."""

    AUTHORIZATION = "Authorization"
    CONTENT_TYPE = "Content-Type"
    USER_AGENT = "User-Agent"

    JSON_CONTENT_TYPE = "application/json"

    USER_AGENT_TEMPLATE = "Python SDK Client with requests (v{version}, Python {python_version})"
    BEARER_TEMPLATE = "Bearer {token}"

# Status Codes
class StatusCodes:
    """HTTP status codes the client distinguishes."""

    # Only exactly 200 passes; 201/204 are treated as failures
    OK = 200
    UNAUTHORIZED = 401

# API Status Codes
class ApiStatusCodes:
    """Business status codes returned in the JSON body."""

    OK = 2000
    OK_QUEUED = 2001

    SUCCESS_MIN = OK
    SUCCESS_MAX = OK_QUEUED

    DESCRIPTIONS: Dict[int, str] = {
        2000: "Request accepted, message(s) sent",
        2001: "Request accepted, message(s) queued",
        4001: "Invalid credentials",
        4002: "Invalid recipient(s)",
        4003: "Invalid sender address",
        4004: "Invalid message type",
        4008: "Invalid message id",
        4009: "Invalid text",
        4013: "Message limit reached",
        4014: "Unauthorized IP address",
        4015: "Invalid message priority",
        4016: "Invalid notification callback address",
        4019: "Required parameter missing",
        4021: "Account locked",
        4022: "API access denied",
        4023: "Too many requests",
        5000: "Internal server error",
        5003: "Service temporarily unavailable",
    }

    @classmethod
    def is_success(cls, code: int) -> bool:
        """Check if a business status code is in the success range."""
        return cls.SUCCESS_MIN <= code <= cls.SUCCESS_MAX

    @classmethod
    def describe(cls, code: int) -> str:
        return cls.DESCRIPTIONS.get(code, "Unknown status code")

# Message field values
class SenderAddressTypes:
    """Allowed values for senderAddressType."""

    NATIONAL = "national"
    INTERNATIONAL = "international"
    ALPHANUMERIC = "alphanumeric"
    SHORTCODE = "shortcode"

    ALL_TYPES: Set[str] = {NATIONAL, INTERNATIONAL, ALPHANUMERIC, SHORTCODE}

class ContentCategories:
    """Allowed values for contentCategory."""

    INFORMATIONAL = "informational"
    ADVERTISEMENT = "advertisement"

    ALL_CATEGORIES: Set[str] = {INFORMATIONAL, ADVERTISEMENT}

# Validation Patterns
class ValidationPatterns:
    """Regular expression patterns for validation."""

    MSISDN_PATTERN = r'^\d{1,20}$'
    SCHEME_PATTERN = r'^https?://'
    TRAILING_SLASHES_PATTERN = r'/+$'

# Transport Options
class TransportOptions:
    """Keyword arguments for requests.post that callers may not pass through."""

    # The client owns the URL and request body
    RESERVED_KEYS: Set[str] = {"url", "data", "files"}

# Environment Variable Names
class EnvVars:
    """Environment variable names."""

    URL = "WEBSMS_URL"
    USERNAME = "WEBSMS_USERNAME"
    PASSWORD = "WEBSMS_PASSWORD"
    ACCESS_TOKEN = "WEBSMS_ACCESS_TOKEN"

    TIMEOUT = "WEBSMS_TIMEOUT"
    VERIFY_SSL = "WEBSMS_VERIFY_SSL"
    VERBOSE = "WEBSMS_VERBOSE"
    TEST_MODE = "WEBSMS_TEST_MODE"

# Logging Configuration
class LogConfig:
    """Logging configuration constants."""

    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"

# Common Error Messages
class ErrorMessages:
    """Common error messages."""

    INVALID_HOST = "Invalid call of sms.at gateway class. Hostname in wrong format: {url}"
    INVALID_CREDENTIALS = "Invalid call of sms.at gateway class. Check username/password or token."
    INVALID_URL = "Invalid call of sms.at gateway class. URL in wrong format: {url}"
    INVALID_MAX_SMS = "maxSmsPerMessage cannot be less or equal to 0, try None."
    CONNECT_FAILED = "Couldn't connect to remote server"
    TOKEN_AUTH_FAILED = "Authentication failed. Invalid access token."
    BASIC_AUTH_FAILED = "Basic Authentication failed. Check given username and password. (Account has to be active)"
    HTTP_STATUS = "Response HTTP Status: {status_code}\n{body}"
    UNKNOWN_CONTENT_TYPE = "Received unknown content type '{content_type}'. Content: {body}"
    INVALID_JSON = "Received invalid JSON content. Content: {body}"
    INVALID_RECIPIENT = "Recipient '{recipient}' is invalid. (must be numeric)"
    EMPTY_RECIPIENTS = "Recipient address list cannot be empty"
    EMPTY_CONTENT = "Message content cannot be empty"
    INVALID_SEGMENT = "Binary message segment {index} is not valid base64"
    MISSING_URL = "Missing gateway URL (set {env_var})"
