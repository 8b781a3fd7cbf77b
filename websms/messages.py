"""
Message models for the websms SDK.

A message knows which sub-endpoint it is sent to and how to serialize
itself into the JSON body the gateway expects. Fields are validated on
construction so invalid input never reaches the network.
"""

import base64
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Union, ClassVar

from .constants import Endpoints
from .validators import (
    validate_recipients,
    validate_message_text,
    validate_binary_segments,
    validate_sender_address_type,
    validate_content_category,
    validate_callback_url
)

Recipient = Union[int, str]


@dataclass
class Message(ABC):
    """
    Fields shared by all message types.

    Attributes:
        recipient_address_list: MSISDNs in international format, digits only
        sender_address: Sender shown to the recipient
        sender_address_type: national, international, alphanumeric or shortcode
        send_as_flash_sms: Display immediately instead of storing on the handset
        notification_callback_url: URL for delivery reports
        client_message_id: Caller supplied id echoed back by the gateway
        priority: Message priority
        content_category: informational or advertisement
    """
    message_type: ClassVar[str] = Endpoints.TEXT

    recipient_address_list: List[Recipient]
    sender_address: Optional[str] = field(default=None, kw_only=True)
    sender_address_type: Optional[str] = field(default=None, kw_only=True)
    send_as_flash_sms: Optional[bool] = field(default=None, kw_only=True)
    notification_callback_url: Optional[str] = field(default=None, kw_only=True)
    client_message_id: Optional[str] = field(default=None, kw_only=True)
    priority: Optional[int] = field(default=None, kw_only=True)
    content_category: Optional[str] = field(default=None, kw_only=True)

    def __post_init__(self):
        validate_recipients(self.recipient_address_list, strict=True)
        validate_sender_address_type(self.sender_address_type, strict=True)
        validate_content_category(self.content_category, strict=True)
        validate_callback_url(self.notification_callback_url, strict=True)

    @abstractmethod
    def _content_json(self) -> Any:
        """Serialized messageContent value."""

    def to_json_data(self) -> Dict[str, Any]:
        """Convert to the gateway's JSON request body, omitting unset fields."""
        data = {
            "recipientAddressList": [str(recipient) for recipient in self.recipient_address_list],
            "messageContent": self._content_json()
        }

        optional = {
            "senderAddress": self.sender_address,
            "senderAddressType": self.sender_address_type,
            "sendAsFlashSms": self.send_as_flash_sms,
            "notificationCallbackUrl": self.notification_callback_url,
            "clientMessageId": self.client_message_id,
            "priority": self.priority,
            "contentCategory": self.content_category
        }
        data.update({key: value for key, value in optional.items() if value is not None})

        return data


@dataclass
class TextMessage(Message):
    """A plain text SMS. Long texts are split into segments by the gateway."""
    message_type: ClassVar[str] = Endpoints.TEXT

    message_content: str = ""

    def __post_init__(self):
        super().__post_init__()
        validate_message_text(self.message_content, strict=True)

    def _content_json(self) -> str:
        return self.message_content


@dataclass
class BinaryMessage(Message):
    """
    A binary SMS made of one or more segments.

    Segments given as bytes are base64 encoded on serialization; string
    segments must already be base64. Set ``user_data_header_present`` when
    each segment starts with a user data header (UDH).
    """
    message_type: ClassVar[str] = Endpoints.BINARY

    message_content: List[Union[bytes, str]] = field(default_factory=list)
    user_data_header_present: bool = False

    def __post_init__(self):
        super().__post_init__()
        validate_binary_segments(self.message_content, strict=True)

    def _content_json(self) -> List[str]:
        return [
            base64.b64encode(bytes(segment)).decode("ascii")
            if isinstance(segment, (bytes, bytearray)) else segment
            for segment in self.message_content
        ]

    def to_json_data(self) -> Dict[str, Any]:
        data = super().to_json_data()
        data["userDataHeaderPresent"] = self.user_data_header_present
        return data
