from __future__ import annotations
import os

# host:port of the phyphox remote access server (shown in the app when remote access is enabled)
PHYPHOX_ADDRESS = os.getenv("PHYPHOX_ADDRESS", "127.0.0.1:8080")

# Seconds before a single GET to the phone is abandoned
PHYPHOX_TIMEOUT_S = float(os.getenv("PHYPHOX_TIMEOUT_S", "10"))

# Used by main.py only
PHYPHOX_POLL_INTERVAL_S = float(os.getenv("PHYPHOX_POLL_INTERVAL_S", "1.0"))
PHYPHOX_LOG_LEVEL = os.getenv("PHYPHOX_LOG_LEVEL", "INFO").upper()
