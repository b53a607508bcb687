"""Runtime configuration defaults for pricing and logging."""

from __future__ import annotations

import os
from decimal import Decimal

TAX_RATE = Decimal("0.08")
CURRENCY_SYMBOL = "$"

_DEBUG_LOG_ENV = "LUNCH_TRAY_DEBUG_LOG"
_LOG_LEVEL_ENV = "LUNCH_TRAY_LOG_LEVEL"

DEBUG_LOG_PATH = os.environ.get(_DEBUG_LOG_ENV, "/tmp/lunch-tray-debug.log")
LOG_LEVEL = os.environ.get(_LOG_LEVEL_ENV, "DEBUG")
