"""
Custom exceptions for the websms SDK.

This module defines the exception hierarchy for the errors that can occur
when sending messages through the websms gateway. Every failure raised by
``Client.send`` is one of the subclasses below; none of them is retried.
"""

from typing import Optional, Dict, Any

import requests

from .constants import ErrorMessages, StatusCodes


class WebSmsError(Exception):
    """
    Base exception class for all websms related errors.

    Attributes:
        message (str): Error message
        code (Optional[int]): Business status code if applicable
        status_code (Optional[int]): HTTP status code if applicable
        body (Optional[str]): Raw response body if one was received
        details (Dict[str, Any]): Additional error details
    """

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.body = body
        self.details = details or {}

    def __str__(self):
        error_parts = [f"{self.__class__.__name__}: {self.message}"]

        if self.code is not None:
            error_parts.append(f"Code: {self.code}")

        if self.status_code is not None:
            error_parts.append(f"Status Code: {self.status_code}")

        if self.details:
            error_parts.append(f"Details: {self.details}")

        return " | ".join(error_parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "body": self.body,
            "details": self.details
        }


class ParameterValidationException(WebSmsError):
    """
    Raised when caller input is invalid.

    Always raised before any network activity, for example when:
    - The gateway hostname is malformed
    - Credentials are missing for the selected authentication mode
    - maxSmsPerMessage is not a positive integer
    - Message fields are empty or in the wrong format

    Attributes:
        field (Optional[str]): The field that failed validation
        value (Any): The invalid value
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

    def __str__(self):
        base_str = super().__str__()
        if self.field:
            base_str += f" | Field: {self.field}"
        if self.value is not None:
            base_str += f" | Value: {self.value}"
        return base_str


class HttpConnectionException(WebSmsError):
    """
    Raised on transport failures and unexpected HTTP status codes.

    When the server could not be reached at all (DNS, connect, TLS, timeout)
    ``status_code`` is None. Otherwise it holds the HTTP status and ``body``
    the raw response body.
    """

    def __init__(self, message: str = ErrorMessages.CONNECT_FAILED, **kwargs):
        super().__init__(message, **kwargs)


class AuthorizationFailedException(WebSmsError):
    """Raised when the gateway answers with HTTP 401."""

    def __init__(self, message: str = ErrorMessages.BASIC_AUTH_FAILED, **kwargs):
        kwargs.setdefault("status_code", StatusCodes.UNAUTHORIZED)
        super().__init__(message, **kwargs)


class UnknownResponseException(WebSmsError):
    """
    Raised when the response is not JSON.

    Attributes:
        content_type (Optional[str]): Content type the gateway sent
    """

    def __init__(
        self,
        message: str,
        content_type: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.content_type = content_type

    def __str__(self):
        base_str = super().__str__()
        if self.content_type:
            base_str += f" | Content Type: {self.content_type}"
        return base_str


class ApiException(WebSmsError):
    """
    Raised when the gateway understood the request but rejected it.

    ``code`` holds the business status code from the JSON body and
    ``message`` the gateway's statusMessage.

    Attributes:
        api_response (Optional[Dict]): Decoded API response
    """

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        api_response: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        super().__init__(message, code=code, **kwargs)
        self.api_response = api_response


def create_exception_from_response(
    response: requests.Response,
    token_auth: bool = False
) -> WebSmsError:
    """
    Create appropriate exception for a response with a non-200 HTTP status.

    Args:
        response: The failed HTTP response
        token_auth: Whether the request was authenticated with a bearer token

    Returns:
        AuthorizationFailedException for 401, HttpConnectionException otherwise
    """
    status_code = response.status_code
    body = response.text

    if status_code == StatusCodes.UNAUTHORIZED:
        message = ErrorMessages.TOKEN_AUTH_FAILED if token_auth else ErrorMessages.BASIC_AUTH_FAILED
        return AuthorizationFailedException(message, status_code=status_code, body=body)

    return HttpConnectionException(
        ErrorMessages.HTTP_STATUS.format(status_code=status_code, body=body),
        status_code=status_code,
        body=body
    )
