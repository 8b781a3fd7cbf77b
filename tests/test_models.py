"""
Unit tests for websms.models module.
"""

import dataclasses
import pytest
from unittest.mock import Mock
import sys
import os

# Add the parent directory to the path so we can import the module
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from websms.models import Response


class TestResponse:
    """Test the Response value object."""

    def test_from_api_result(self):
        raw = Mock()
        api_result = {
            "statusCode": 2000,
            "statusMessage": "OK",
            "transferId": "005ee1d8b3000001",
            "clientMessageId": "order-42",
            "smsCount": 1,
            "extraField": "kept"
        }

        response = Response.from_api_result(api_result, raw)

        assert response.status_code == 2000
        assert response.status_message == "OK"
        assert response.transfer_id == "005ee1d8b3000001"
        assert response.client_message_id == "order-42"
        assert response.sms_count == 1
        assert response.raw_content["extraField"] == "kept"
        assert response.raw_response is raw
        assert response.success
        assert not response.queued

    def test_optional_fields_missing(self):
        response = Response.from_api_result({"statusCode": 2001})

        assert response.status_message == ""
        assert response.transfer_id is None
        assert response.raw_response is None
        assert response.queued

    def test_immutable(self):
        response = Response.from_api_result({"statusCode": 2000, "statusMessage": "OK"})

        with pytest.raises(dataclasses.FrozenInstanceError):
            response.status_code = 4000

    def test_raw_content_is_a_copy(self):
        api_result = {"statusCode": 2000}
        response = Response.from_api_result(api_result)

        api_result["statusCode"] = 4000
        assert response.raw_content["statusCode"] == 2000

    def test_to_dict(self):
        response = Response.from_api_result({"statusCode": 2000, "statusMessage": "OK", "transferId": "t1"})

        data = response.to_dict()

        assert data["status_code"] == 2000
        assert data["transfer_id"] == "t1"
        assert "raw_response" not in data


if __name__ == "__main__":
    pytest.main([__file__])
