"""Runtime configuration defaults for display and debug logging."""

from __future__ import annotations

import os

STALL_NAME = "Waroeng Rasbani"

CURRENCY_PREFIX = "Rp"
THOUSANDS_SEPARATOR = "."

# Empty value disables the debug log.
DEBUG_LOG_ENV = "STALL_ORDER_DEBUG_LOG"
DEBUG_LOG_PATH = os.environ.get(DEBUG_LOG_ENV, "/tmp/stall-order-debug.log")
