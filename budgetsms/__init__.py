"""
BudgetSMS
=========
Typed async client for the BudgetSMS.net HTTP API.
"""

__version__ = "1.0.0"

# Client
from budgetsms.client import BudgetSMS
from budgetsms.config import BudgetSMSConfig

# Constants
from budgetsms.constants import (
    API_BASE,
    DEFAULT_TIMEOUT_MS,
    MAX_MESSAGE_LENGTH,
    Endpoint,
    BudgetSMSErrorCode,
    ERROR_MESSAGES,
    DeliveryStatus,
    DLR_STATUS_MESSAGES,
)

# Errors
from budgetsms.exceptions import (
    BudgetSMSError,
    ProtocolError,
    MalformedResponseError,
    TransportError,
    RequestTimeoutError,
)

# Models
from budgetsms.models import (
    SendResult,
    TestSMSResult,
    CreditResult,
    OperatorResult,
    HLRResult,
    StatusResult,
    PricingEntry,
    PricingResult,
)

# Protocol
from budgetsms.protocol import (
    build_query_string,
    parse_response,
    parse_send_result,
    parse_credit_result,
    parse_operator_result,
    parse_status_result,
    parse_pricing_result,
)

# Validators
from budgetsms.validators import (
    validate_phone_number,
    validate_sender,
    validate_message,
)

__all__ = [
    # Client
    "BudgetSMS",
    "BudgetSMSConfig",
    # Constants
    "API_BASE",
    "DEFAULT_TIMEOUT_MS",
    "MAX_MESSAGE_LENGTH",
    "Endpoint",
    "BudgetSMSErrorCode",
    "ERROR_MESSAGES",
    "DeliveryStatus",
    "DLR_STATUS_MESSAGES",
    # Errors
    "BudgetSMSError",
    "ProtocolError",
    "MalformedResponseError",
    "TransportError",
    "RequestTimeoutError",
    # Models
    "SendResult",
    "TestSMSResult",
    "CreditResult",
    "OperatorResult",
    "HLRResult",
    "StatusResult",
    "PricingEntry",
    "PricingResult",
    # Protocol
    "build_query_string",
    "parse_response",
    "parse_send_result",
    "parse_credit_result",
    "parse_operator_result",
    "parse_status_result",
    "parse_pricing_result",
    # Validators
    "validate_phone_number",
    "validate_sender",
    "validate_message",
]
