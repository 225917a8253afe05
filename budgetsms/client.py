"""
BudgetSMS Client
================
Async client for the BudgetSMS.net HTTP API.

Usage:
    from budgetsms import BudgetSMS

    async with BudgetSMS(username="user", userid="12345", handle="abc") as client:
        result = await client.send_sms(msg="Hello World!", from_="YourApp", to="31612345678")
        print(result.sms_id)
"""

import asyncio
from typing import Optional, Dict

import httpx
import structlog

from .config import BudgetSMSConfig
from .constants import API_BASE, DEFAULT_TIMEOUT_MS, Endpoint
from .exceptions import TransportError, RequestTimeoutError
from .models import (
    SendResult,
    CreditResult,
    OperatorResult,
    StatusResult,
    PricingResult,
)
from .protocol import (
    ParamValue,
    build_query_string,
    parse_send_result,
    parse_credit_result,
    parse_operator_result,
    parse_status_result,
    parse_pricing_result,
)

logger = structlog.get_logger(__name__)


class BudgetSMS:
    """
    BudgetSMS API client.

    Every method performs exactly one GET request and decodes the reply.
    Nothing is retried: use ``ProtocolError.is_retryable()`` to build a
    retry policy on top of the client.

    Raises (all methods):
        ProtocolError: The gateway replied ``ERR <code>``
        MalformedResponseError: The reply had an unexpected shape
        RequestTimeoutError: No reply within ``timeout`` milliseconds
        TransportError: Connection failure or non-2xx HTTP status
    """

    def __init__(
        self,
        username: str,
        userid: str,
        handle: str,
        base_url: str = API_BASE,
        timeout: int = DEFAULT_TIMEOUT_MS,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")

        self.username = username
        self.userid = userid
        self.handle = handle
        self.base_url = (base_url or API_BASE).rstrip("/")
        self.timeout = timeout

        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=timeout / 1000,
            follow_redirects=True,
            headers={"User-Agent": "budgetsms-python"},
        )

    @classmethod
    def from_config(
        cls,
        config: Optional[BudgetSMSConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "BudgetSMS":
        config = config or BudgetSMSConfig()
        return cls(
            username=config.username,
            userid=config.userid,
            handle=config.handle,
            base_url=config.base_url,
            timeout=config.timeout,
            http_client=http_client,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self):
        """Close the underlying HTTP client, unless it was passed in."""
        if self._owns_client:
            await self._client.aclose()

    def _auth_params(self) -> Dict[str, ParamValue]:
        return {
            "username": self.username,
            "userid": self.userid,
            "handle": self.handle,
        }

    async def _request(self, endpoint: Endpoint, params: Optional[Dict[str, ParamValue]] = None) -> str:
        """Issue one GET request and return the response body."""
        query = build_query_string({**self._auth_params(), **(params or {})})
        url = f"{self.base_url}{endpoint.value}?{query}"

        logger.debug("BudgetSMS request", endpoint=endpoint.value)

        try:
            response = await asyncio.wait_for(
                self._client.get(url),
                timeout=self.timeout / 1000,
            )
            response.raise_for_status()
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning("BudgetSMS request timed out", endpoint=endpoint.value, timeout=self.timeout)
            raise RequestTimeoutError(self.timeout) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("BudgetSMS HTTP error", endpoint=endpoint.value, status=status)
            raise TransportError(
                f"HTTP error! status: {status}",
                status_code=status,
                details=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            logger.warning("BudgetSMS request failed", endpoint=endpoint.value, error=str(e))
            raise TransportError(f"Failed to connect: {e}", details=str(e)) from e

        return response.text

    async def _send(
        self,
        endpoint: Endpoint,
        msg: str,
        from_: str,
        to: str,
        customid: Optional[str],
        price: Optional[bool],
        mccmnc: Optional[bool],
        credit: Optional[bool],
    ) -> SendResult:
        params = {
            "msg": msg,
            "from": from_,
            "to": to,
            "customid": customid,
            "price": price,
            "mccmnc": mccmnc,
            "credit": credit,
        }
        raw = await self._request(endpoint, params)
        return parse_send_result(raw, price, mccmnc, credit)

    async def send_sms(
        self,
        msg: str,
        from_: str,
        to: str,
        customid: Optional[str] = None,
        price: Optional[bool] = None,
        mccmnc: Optional[bool] = None,
        credit: Optional[bool] = None,
    ) -> SendResult:
        """
        Send an SMS message.

        Args:
            msg: Message text (max. 612 characters recommended)
            from_: Sender ID (alphanumeric max. 11 chars, or numeric max. 16 digits)
            to: Recipient in international format, no ``+``
            customid: Optional unique custom message ID (max. 50 chars)
            price: Include price and part count in the reply
            mccmnc: Include the operator MCC/MNC in the reply
            credit: Include the remaining credit in the reply

        Returns:
            SendResult with the gateway message ID and any requested extras
        """
        return await self._send(Endpoint.SEND_SMS, msg, from_, to, customid, price, mccmnc, credit)

    async def test_sms(
        self,
        msg: str,
        from_: str,
        to: str,
        customid: Optional[str] = None,
        price: Optional[bool] = None,
        mccmnc: Optional[bool] = None,
        credit: Optional[bool] = None,
    ) -> SendResult:
        """Same as ``send_sms`` but nothing is delivered and no credit is used."""
        return await self._send(Endpoint.TEST_SMS, msg, from_, to, customid, price, mccmnc, credit)

    async def check_credit(self) -> CreditResult:
        """Get the remaining account credit."""
        raw = await self._request(Endpoint.CHECK_CREDIT)
        return parse_credit_result(raw)

    async def check_operator(self, phone_number: str) -> OperatorResult:
        """
        Look up the operator from the number prefix.

        Ported numbers report their original operator; use ``hlr`` for the
        current one.
        """
        raw = await self._request(Endpoint.CHECK_OPERATOR, {"check": phone_number})
        return parse_operator_result(raw)

    async def hlr(self, phone_number: str) -> OperatorResult:
        """HLR lookup of the current operator. May cost credit."""
        raw = await self._request(Endpoint.HLR, {"to": phone_number})
        return parse_operator_result(raw)

    async def check_sms(self, sms_id: str) -> StatusResult:
        """Pull the delivery status of a message sent earlier."""
        raw = await self._request(Endpoint.CHECK_SMS, {"smsid": sms_id})
        return parse_status_result(raw, sms_id)

    async def get_pricing(self) -> PricingResult:
        """Get account pricing for all operators."""
        raw = await self._request(Endpoint.GET_PRICING)
        return parse_pricing_result(raw)
