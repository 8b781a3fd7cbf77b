"""
Response models for the websms SDK.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any

import requests

from .constants import ApiStatusCodes


@dataclass(frozen=True)
class Response:
    """
    Result of a successful send.

    Only built by the client after the HTTP status, content type and
    business status code all checked out. Never mutated afterwards.

    Attributes:
        status_code: Business status code (2000 or 2001)
        status_message: Gateway status message
        transfer_id: Gateway id for this request
        client_message_id: Echo of the caller supplied message id
        sms_count: Number of SMS segments the gateway dispatched
        raw_content: Decoded JSON body
        raw_response: The underlying HTTP response, for diagnostics
    """
    status_code: int
    status_message: str = ""
    transfer_id: Optional[str] = None
    client_message_id: Optional[str] = None
    sms_count: Optional[int] = None
    raw_content: Dict[str, Any] = field(default_factory=dict)
    raw_response: Optional[requests.Response] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_api_result(
        cls,
        api_result: Dict[str, Any],
        raw_response: Optional[requests.Response] = None
    ) -> "Response":
        """Create a response from the decoded JSON body."""
        return cls(
            status_code=api_result["statusCode"],
            status_message=api_result.get("statusMessage", ""),
            transfer_id=api_result.get("transferId"),
            client_message_id=api_result.get("clientMessageId"),
            sms_count=api_result.get("smsCount"),
            raw_content=dict(api_result),
            raw_response=raw_response
        )

    @property
    def success(self) -> bool:
        return ApiStatusCodes.is_success(self.status_code)

    @property
    def queued(self) -> bool:
        """True when the gateway accepted the message for later dispatch."""
        return self.status_code == ApiStatusCodes.OK_QUEUED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "status_code": self.status_code,
            "status_message": self.status_message,
            "transfer_id": self.transfer_id,
            "client_message_id": self.client_message_id,
            "sms_count": self.sms_count,
            "raw_content": self.raw_content
        }
