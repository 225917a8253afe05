"""
BudgetSMS Client Configuration
==============================
Credentials and connection settings, read from the environment by default.
"""

import os
from dataclasses import dataclass, field

from .constants import API_BASE, DEFAULT_TIMEOUT_MS


def _env(name: str, default: str = "") -> str:
    return os.environ.get(name, default)


@dataclass
class BudgetSMSConfig:
    """Configuration for a BudgetSMS client. ``timeout`` is in milliseconds."""
    username: str = field(default_factory=lambda: _env("BUDGETSMS_USERNAME"))
    userid: str = field(default_factory=lambda: _env("BUDGETSMS_USERID"))
    handle: str = field(default_factory=lambda: _env("BUDGETSMS_HANDLE"))
    base_url: str = field(default_factory=lambda: _env("BUDGETSMS_BASE_URL", API_BASE))
    timeout: int = field(
        default_factory=lambda: int(_env("BUDGETSMS_TIMEOUT", str(DEFAULT_TIMEOUT_MS)))
    )
