"""
BudgetSMS Protocol Codec
========================
Encodes request parameters and decodes the gateway's plain-text replies.

Reply shapes:
- ``OK`` or ``OK <payload>`` on success
- ``ERR <code>`` on failure
- a raw JSON array for ``/getpricing/``
"""

import json
import math
import re
from typing import Mapping, Optional, Union
from urllib.parse import quote

import structlog

from .exceptions import MalformedResponseError, ProtocolError
from .models import (
    SendResult,
    CreditResult,
    OperatorResult,
    StatusResult,
    PricingResult,
)

logger = structlog.get_logger(__name__)

ParamValue = Optional[Union[str, int, float, bool]]

# Same unreserved set as JavaScript's encodeURIComponent; space becomes %20.
_SAFE_CHARS = "-_.!~*'()"

_WHITESPACE = re.compile(r"\s+")

# ASCII only: int() and float() also accept "_" separators and non-ASCII digits.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _encode_component(value: str) -> str:
    return quote(value, safe=_SAFE_CHARS)


def _encode_value(value: Union[str, int, float, bool]) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def build_query_string(params: Mapping[str, ParamValue]) -> str:
    """
    Build the query string for a request.

    ``None`` values are dropped, booleans become ``1``/``0`` and everything
    else is stringified. Keys and values are percent-encoded separately.
    """
    pairs = []
    for key, value in params.items():
        if value is None:
            continue
        pairs.append(f"{_encode_component(str(key))}={_encode_component(_encode_value(value))}")
    return "&".join(pairs)


def _to_float(token: str, message: str, raw: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(token):
        raise MalformedResponseError(f"{message}: {token}", raw=raw)
    value = float(token)
    if not math.isfinite(value):
        raise MalformedResponseError(f"{message}: {token}", raw=raw)
    return value


def _to_int(token: str, message: str, raw: str) -> int:
    if not _INT_PATTERN.fullmatch(token):
        raise MalformedResponseError(f"{message}: {token}", raw=raw)
    return int(token)


def parse_response(raw: str) -> str:
    """
    Decode the ``OK``/``ERR`` envelope.

    Returns:
        The payload after ``OK`` (empty string for a bare ``OK``)

    Raises:
        ProtocolError: The gateway replied ``ERR <code>``
        MalformedResponseError: Anything else
    """
    trimmed = raw.strip()

    if trimmed.startswith("ERR "):
        tokens = trimmed[4:].split()
        if not tokens or not _INT_PATTERN.fullmatch(tokens[0]):
            raise MalformedResponseError(f"Invalid error response format: {trimmed}", raw=raw)
        code = int(tokens[0])
        logger.debug("BudgetSMS error reply", code=code)
        raise ProtocolError(code)

    if trimmed.startswith("OK "):
        return trimmed[3:].strip()

    if trimmed == "OK":
        return ""

    raise MalformedResponseError(f"Unexpected API response format: {trimmed}", raw=raw)


def parse_send_result(
    raw: str,
    want_price: Optional[bool] = False,
    want_mcc_mnc: Optional[bool] = False,
    want_credit: Optional[bool] = False,
) -> SendResult:
    """
    Decode a ``/sendsms/`` or ``/testsms/`` reply.

    Format: ``OK smsId [price parts] [mccMnc] [credit]``

    The reply is positional and not self-describing: the flags must be the
    ones sent with the request, otherwise fields are assigned to the wrong
    names. Requested fields the gateway left out are simply absent.
    """
    data = parse_response(raw)
    tokens = _WHITESPACE.split(data) if data else []

    if not tokens:
        raise MalformedResponseError("Invalid send SMS response: no SMS ID found", raw=raw)

    fields = {"sms_id": tokens[0]}
    index = 1

    if want_price and len(tokens) > index + 1:
        fields["price"] = _to_float(tokens[index], "Invalid price in send SMS response", raw)
        fields["parts"] = _to_int(tokens[index + 1], "Invalid parts in send SMS response", raw)
        index += 2

    if want_mcc_mnc and len(tokens) > index:
        fields["mcc_mnc"] = tokens[index]
        index += 1

    if want_credit and len(tokens) > index:
        fields["credit"] = _to_float(tokens[index], "Invalid credit in send SMS response", raw)

    return SendResult(**fields)


def parse_credit_result(raw: str) -> CreditResult:
    """Decode a ``/checkcredit/`` reply. Format: ``OK credit``"""
    data = parse_response(raw)
    return CreditResult(credit=_to_float(data, "Invalid credit response", raw))


def parse_operator_result(raw: str) -> OperatorResult:
    """
    Decode a ``/checkoperator/`` or ``/hlr/`` reply.

    Format: ``OK mccMnc:operatorName:messageCost``. Parts after the third
    are ignored.
    """
    data = parse_response(raw)
    parts = data.split(":")

    if len(parts) < 3:
        raise MalformedResponseError(f"Invalid operator response format: {data}", raw=raw)

    return OperatorResult(
        mcc_mnc=parts[0],
        operator_name=parts[1],
        message_cost=_to_float(parts[2], "Invalid operator response format", raw),
    )


def parse_status_result(raw: str, sms_id: str) -> StatusResult:
    """Decode a ``/checksms/`` reply. Format: ``OK status``"""
    data = parse_response(raw)
    return StatusResult(sms_id=sms_id, status=_to_int(data, "Invalid status response", raw))


def parse_pricing_result(raw: str) -> PricingResult:
    """
    Decode a ``/getpricing/`` reply.

    Success is a bare JSON array, errors still use ``ERR <code>``.
    Entries are returned as-is.
    """
    if raw.strip().startswith("ERR "):
        parse_response(raw)

    try:
        pricing = json.loads(raw)
    except ValueError as e:
        raise MalformedResponseError(f"Failed to parse pricing response: {e}", raw=raw) from e

    if not isinstance(pricing, list):
        raise MalformedResponseError(
            "Failed to parse pricing response: Pricing response is not an array", raw=raw
        )

    return pricing
