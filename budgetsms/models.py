"""
BudgetSMS Models
================
Typed results decoded from gateway replies.
"""

from typing import Optional, Dict, Any, List

from pydantic import BaseModel, ConfigDict

from .constants import DeliveryStatus, DLR_STATUS_MESSAGES


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


class SendResult(_Result):
    """
    Result of ``/sendsms/`` and ``/testsms/``.

    ``price``/``parts``, ``mcc_mnc`` and ``credit`` are only filled when the
    matching flag was set on the request and the gateway returned the field.
    """
    sms_id: str
    price: Optional[float] = None
    parts: Optional[int] = None
    mcc_mnc: Optional[str] = None
    credit: Optional[float] = None


class CreditResult(_Result):
    """Remaining account credit."""
    credit: float


class OperatorResult(_Result):
    """Operator of a number, from ``/checkoperator/`` (prefix based) or ``/hlr/`` (live lookup)."""
    mcc_mnc: str
    operator_name: str
    message_cost: float


class StatusResult(_Result):
    """Pull DLR result. ``status`` is the raw code, unlisted codes are kept as-is."""
    sms_id: str
    status: int

    @property
    def delivery_status(self) -> Optional[DeliveryStatus]:
        try:
            return DeliveryStatus(self.status)
        except ValueError:
            return None

    @property
    def description(self) -> Optional[str]:
        return DLR_STATUS_MESSAGES.get(self.status)


# Pricing entries are passed through untouched. Typical keys: countryprefix,
# countryname, mcc, operatorname, mnc, price, old_price, last_modified.
PricingEntry = Dict[str, Any]
PricingResult = List[PricingEntry]

# Import inside test functions: pytest collects module-level names starting with "Test".
TestSMSResult = SendResult
HLRResult = OperatorResult
