"""
websms SDK

Python client for the websms (sms.at) SMS gateway JSON API. Sends text and
binary SMS messages and maps every outcome to a Response or a typed exception.

Usage:
    from websms import Client, TextMessage

    client = Client("https://api.websms.com", "your_username", "your_password")

    # Simulate delivery without sending
    response = client.test().send(TextMessage([4367612345678], "Hello!"))
    print(response.status_code, response.transfer_id)
"""

from .constants import SDK_VERSION

__version__ = SDK_VERSION
__description__ = "Python client for the websms SMS gateway JSON API"

from .config import AuthenticationMode, ConnectionConfig
from .messages import Message, TextMessage, BinaryMessage
from .models import Response
from .exceptions import (
    WebSmsError,
    ParameterValidationException,
    HttpConnectionException,
    AuthorizationFailedException,
    UnknownResponseException,
    ApiException
)

# Import client
from .client import Client

# Main exports
__all__ = [
    "Client",
    "AuthenticationMode",
    "ConnectionConfig",
    "Message",
    "TextMessage",
    "BinaryMessage",
    "Response",
    "WebSmsError",
    "ParameterValidationException",
    "HttpConnectionException",
    "AuthorizationFailedException",
    "UnknownResponseException",
    "ApiException"
]
