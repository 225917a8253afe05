"""
Unit Tests for the Error Model
==============================
"""

import pytest

from budgetsms.constants import BudgetSMSErrorCode, ERROR_MESSAGES, DeliveryStatus, DLR_STATUS_MESSAGES
from budgetsms.exceptions import (
    BudgetSMSError,
    ProtocolError,
    MalformedResponseError,
    TransportError,
    RequestTimeoutError,
)


class TestProtocolError:
    """Tests for gateway error codes."""

    def test_known_code_message(self):
        error = ProtocolError(BudgetSMSErrorCode.IP_NOT_ALLOWED)

        assert error.code == 1004
        assert str(error) == "This IP address is not added to this account. No access to the API"

    def test_unknown_code_message(self):
        error = ProtocolError(8123)

        assert error.message == "BudgetSMS API error: 8123"
        assert error.error_code is None

    def test_custom_message(self):
        error = ProtocolError(1001, "Top up your account")

        assert error.message == "Top up your account"

    def test_error_code_member(self):
        assert ProtocolError(2014).error_code is BudgetSMSErrorCode.CUSTOM_ID_ALREADY_USED

    @pytest.mark.parametrize("code", [4002, 4003, 4006])
    def test_retryable(self, code):
        assert ProtocolError(code).is_retryable() is True

    @pytest.mark.parametrize("code", [1001, 1002, 4001, 4004, 4005, 4007, 5001, 9999])
    def test_not_retryable(self, code):
        assert ProtocolError(code).is_retryable() is False

    @pytest.mark.parametrize("code", [1002, 1003, 1004, 1005, 1006, 1007])
    def test_authentication_error(self, code):
        assert ProtocolError(code).is_authentication_error() is True

    def test_insufficient_credits_is_not_authentication(self):
        error = ProtocolError(1001)

        assert error.is_authentication_error() is False
        assert error.is_insufficient_credits() is True

    def test_insufficient_credits_only_1001(self):
        assert ProtocolError(1002).is_insufficient_credits() is False

    def test_to_dict(self):
        assert ProtocolError(3001).to_dict() == {
            "name": "ProtocolError",
            "code": 3001,
            "message": "No route to destination. Contact BudgetSMS for possible solutions",
        }


class TestHierarchy:
    """All library errors share a base class."""

    def test_subclasses(self):
        assert issubclass(ProtocolError, BudgetSMSError)
        assert issubclass(MalformedResponseError, BudgetSMSError)
        assert issubclass(TransportError, BudgetSMSError)
        assert issubclass(RequestTimeoutError, TransportError)

    def test_timeout_message(self):
        error = RequestTimeoutError(100)

        assert error.timeout == 100
        assert str(error) == "Request timeout after 100ms"

    def test_transport_error_attributes(self):
        error = TransportError("HTTP error! status: 502", status_code=502, details="Bad Gateway")

        assert error.status_code == 502
        assert error.details == "Bad Gateway"


class TestCodeTables:
    """Tests for the code and status tables."""

    def test_every_error_code_has_a_message(self):
        for code in BudgetSMSErrorCode:
            assert ERROR_MESSAGES[code]

    def test_lookup_by_plain_int(self):
        assert ERROR_MESSAGES[1001] == "Not enough credits to send messages"

    def test_error_codes_fall_in_known_ranges(self):
        for code in BudgetSMSErrorCode:
            assert 1 <= code // 1000 <= 7

    def test_delivery_statuses(self):
        assert sorted(int(s) for s in DeliveryStatus) == [0, 1, 2, 3, 4, 5, 6, 7, 8, 11, 12, 13]
        for status in DeliveryStatus:
            assert DLR_STATUS_MESSAGES[status]
