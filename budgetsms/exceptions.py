from typing import Optional, Any, Dict

from .constants import BudgetSMSErrorCode, ERROR_MESSAGES

RETRYABLE_CODES = frozenset({
    BudgetSMSErrorCode.SYSTEM_ERROR_TEMPORARY,
    BudgetSMSErrorCode.SYSTEM_ERROR_TEMPORARY_2,
    BudgetSMSErrorCode.GATEWAY_NOT_REACHABLE,
})

AUTHENTICATION_CODES = frozenset({
    BudgetSMSErrorCode.INVALID_CREDENTIALS,
    BudgetSMSErrorCode.ACCOUNT_NOT_ACTIVE,
    BudgetSMSErrorCode.IP_NOT_ALLOWED,
    BudgetSMSErrorCode.NO_HANDLE_PROVIDED,
    BudgetSMSErrorCode.NO_USERID_PROVIDED,
    BudgetSMSErrorCode.NO_USERNAME_PROVIDED,
})


def error_message_for(code: int) -> str:
    """Canonical message for an error code, with a fallback for unlisted codes."""
    return ERROR_MESSAGES.get(code, f"BudgetSMS API error: {code}")


class BudgetSMSError(Exception):
    """Base exception for everything raised by the BudgetSMS client."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ProtocolError(BudgetSMSError):
    """
    Raised when the gateway answers ``ERR <code>``.

    Unknown codes are kept as plain integers so new gateway codes still
    produce a usable error.
    """
    def __init__(self, code: int, message: Optional[str] = None):
        self.code = int(code)
        super().__init__(message or error_message_for(self.code))

    @property
    def error_code(self) -> Optional[BudgetSMSErrorCode]:
        try:
            return BudgetSMSErrorCode(self.code)
        except ValueError:
            return None

    def is_retryable(self) -> bool:
        """Temporary gateway-side failure; resubmitting later may succeed."""
        return self.code in RETRYABLE_CODES

    def is_authentication_error(self) -> bool:
        """Credentials, account or IP whitelist problem."""
        return self.code in AUTHENTICATION_CODES

    def is_insufficient_credits(self) -> bool:
        return self.code == BudgetSMSErrorCode.NOT_ENOUGH_CREDITS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": type(self).__name__,
            "code": self.code,
            "message": self.message,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code}, message={self.message!r})"


class MalformedResponseError(BudgetSMSError):
    """Raised when a reply does not match the shape expected for the endpoint."""
    def __init__(self, message: str, raw: Optional[str] = None):
        self.raw = raw
        super().__init__(message)


class TransportError(BudgetSMSError):
    """Raised on network failures and non-2xx HTTP responses."""
    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class RequestTimeoutError(TransportError):
    """Raised when no response arrived within the configured timeout."""
    def __init__(self, timeout: int):
        self.timeout = timeout
        super().__init__(f"Request timeout after {timeout}ms")
