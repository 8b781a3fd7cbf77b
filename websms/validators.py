"""
Input validation functions for the websms SDK.

Every validator returns True/False by default and raises
ParameterValidationException instead when called with ``strict=True``.
"""

import base64
import binascii
import logging
import re
from typing import Any, Optional, Union
from urllib.parse import urlparse

from .constants import (
    ValidationPatterns,
    SenderAddressTypes,
    ContentCategories,
    ErrorMessages,
    MIN_HOST_LENGTH
)
from .exceptions import ParameterValidationException

# Set up logging
logger = logging.getLogger(__name__)


def validate_hostname(host: Optional[str], url: str = "", strict: bool = False) -> bool:
    """
    Validate the gateway hostname.

    Only guards against obviously malformed input: the host must be at
    least four characters long.

    Args:
        host: Parsed hostname
        url: The full URL, used in the error message
        strict: Raise exception if invalid

    Returns:
        True if valid, False otherwise

    Raises:
        ParameterValidationException: If host is invalid and strict validation
    """
    is_valid = bool(host) and len(host) >= MIN_HOST_LENGTH

    if not is_valid and strict:
        raise ParameterValidationException(
            ErrorMessages.INVALID_HOST.format(url=url),
            field="host",
            value=host
        )

    return is_valid


def validate_credentials(
    token_auth: bool,
    username_or_token: Optional[str],
    password: Optional[str] = None,
    strict: bool = False
) -> bool:
    """
    Validate credentials for the selected authentication mode.

    Args:
        token_auth: True for access token mode, False for username/password
        username_or_token: Username or access token
        password: Password (username/password mode only)
        strict: Raise exception if invalid

    Returns:
        True if valid, False otherwise

    Raises:
        ParameterValidationException: If credentials are incomplete and strict validation
    """
    if token_auth:
        is_valid = bool(username_or_token)
    else:
        is_valid = bool(username_or_token) and bool(password)

    if not is_valid and strict:
        # Never echo the secret back in the exception
        raise ParameterValidationException(
            ErrorMessages.INVALID_CREDENTIALS,
            field="access_token" if token_auth else "username/password"
        )

    return is_valid


def validate_max_sms_per_message(value: Any, strict: bool = False) -> bool:
    """
    Validate the maxSmsPerMessage cap.

    None means "no cap" and is valid. Otherwise the value must be a
    positive integer.
    """
    if value is None:
        return True

    # bool is an int subclass but never a meaningful segment count
    is_valid = isinstance(value, int) and not isinstance(value, bool) and value > 0

    if not is_valid and strict:
        raise ParameterValidationException(
            ErrorMessages.INVALID_MAX_SMS,
            field="max_sms_per_message",
            value=value
        )

    return is_valid


def validate_recipient(recipient: Any, strict: bool = False) -> bool:
    """
    Validate a single recipient MSISDN.

    Recipients are digits only in international format, given either as
    an int or a string (e.g. 4367612345678).
    """
    is_valid = (
        not isinstance(recipient, bool)
        and isinstance(recipient, (int, str))
        and bool(re.match(ValidationPatterns.MSISDN_PATTERN, str(recipient)))
    )

    if not is_valid and strict:
        raise ParameterValidationException(
            ErrorMessages.INVALID_RECIPIENT.format(recipient=recipient),
            field="recipient_address_list",
            value=recipient
        )

    return is_valid


def validate_recipients(recipients: Any, strict: bool = False) -> bool:
    """
    Validate a recipient address list.

    Args:
        recipients: List of MSISDNs
        strict: Raise exception on the first invalid entry

    Returns:
        True if the list is non-empty and every entry is valid
    """
    if not recipients or not isinstance(recipients, (list, tuple)):
        if strict:
            raise ParameterValidationException(
                ErrorMessages.EMPTY_RECIPIENTS,
                field="recipient_address_list",
                value=recipients
            )
        return False

    return all(validate_recipient(recipient, strict=strict) for recipient in recipients)


def validate_message_text(text: Any, strict: bool = False) -> bool:
    """Validate text message content (non-empty string)."""
    is_valid = isinstance(text, str) and bool(text)

    if not is_valid and strict:
        raise ParameterValidationException(
            ErrorMessages.EMPTY_CONTENT,
            field="message_content",
            value=text
        )

    return is_valid


def validate_binary_segments(segments: Any, strict: bool = False) -> bool:
    """
    Validate binary message segments.

    Segments are either raw ``bytes`` or strings that already hold
    base64 encoded data.
    """
    if not segments or not isinstance(segments, (list, tuple)):
        if strict:
            raise ParameterValidationException(
                ErrorMessages.EMPTY_CONTENT,
                field="message_content",
                value=segments
            )
        return False

    for index, segment in enumerate(segments):
        if not _is_valid_segment(segment):
            if strict:
                raise ParameterValidationException(
                    ErrorMessages.INVALID_SEGMENT.format(index=index),
                    field="message_content",
                    value=segment
                )
            return False

    return True


def _is_valid_segment(segment: Union[bytes, str]) -> bool:
    if isinstance(segment, (bytes, bytearray)):
        return len(segment) > 0
    if not isinstance(segment, str) or not segment:
        return False
    try:
        base64.b64decode(segment, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def validate_sender_address_type(value: Optional[str], strict: bool = False) -> bool:
    """Validate senderAddressType; None means "let the gateway decide"."""
    is_valid = value is None or value in SenderAddressTypes.ALL_TYPES

    if not is_valid and strict:
        allowed = ", ".join(sorted(SenderAddressTypes.ALL_TYPES))
        raise ParameterValidationException(
            f"Invalid sender address type. Allowed: {allowed}",
            field="sender_address_type",
            value=value
        )

    return is_valid


def validate_content_category(value: Optional[str], strict: bool = False) -> bool:
    """Validate contentCategory; None is allowed."""
    is_valid = value is None or value in ContentCategories.ALL_CATEGORIES

    if not is_valid and strict:
        allowed = ", ".join(sorted(ContentCategories.ALL_CATEGORIES))
        raise ParameterValidationException(
            f"Invalid content category. Allowed: {allowed}",
            field="content_category",
            value=value
        )

    return is_valid


def validate_callback_url(url: Optional[str], strict: bool = False) -> bool:
    """
    Validate the delivery notification callback URL.

    Args:
        url: URL to validate, None is allowed
        strict: Raise exception if invalid

    Returns:
        True if valid, False otherwise
    """
    if url is None:
        return True

    is_valid = False
    if isinstance(url, str):
        parsed = urlparse(url.strip())
        is_valid = parsed.scheme.lower() in ['http', 'https'] and bool(parsed.netloc)

    if not is_valid and strict:
        raise ParameterValidationException(
            "Notification callback URL must be an HTTP or HTTPS URL",
            field="notification_callback_url",
            value=url
        )

    return is_valid
