"""
Input Validators
================
Format checks for numbers, sender IDs and message text.

The client does not call these itself; run them before sending to catch
errors the gateway would otherwise reject with a 2xxx code.
"""

import re

from .constants import MAX_MESSAGE_LENGTH

_PHONE_PATTERN = re.compile(r"[0-9]{8,16}")
_ALPHANUMERIC_SENDER_PATTERN = re.compile(r"[A-Za-z0-9]{1,11}")
_NUMERIC_SENDER_PATTERN = re.compile(r"[0-9]{1,16}")


def validate_phone_number(phone: str) -> bool:
    """
    Validate an MSISDN in international format.

    Digits only, 8 to 16 of them. No leading ``+``, no separators.

    Args:
        phone: Phone number

    Returns:
        True if valid
    """
    return bool(_PHONE_PATTERN.fullmatch(phone))


def validate_sender(sender: str) -> bool:
    """
    Validate a sender ID.

    Alphanumeric senders may be up to 11 characters, numeric senders up to
    16 digits.
    """
    return bool(
        _ALPHANUMERIC_SENDER_PATTERN.fullmatch(sender)
        or _NUMERIC_SENDER_PATTERN.fullmatch(sender)
    )


def validate_message(message: str) -> bool:
    # Length in UTF-16 code units, the unit used for part accounting.
    length = len(message.encode("utf-16-le", "surrogatepass")) // 2
    return 0 < length <= MAX_MESSAGE_LENGTH
