"""
Global settings loaded from environment variables.

All settings have sensible defaults so the library works out of the box.
Override via environment variables.
"""

import os

# =============================================================================
# Submission
# =============================================================================
# "log", or "webhook:<url>" to POST validated values somewhere
SUBMIT_ACTION = os.getenv("SUBMIT_ACTION", "log")
SUBMIT_WEBHOOK_TIMEOUT = float(os.getenv("SUBMIT_WEBHOOK_TIMEOUT", "30"))

# =============================================================================
# Backend Service
# =============================================================================
BACKEND_PORT = int(os.getenv("BACKEND_PORT", "10821"))
BACKEND_HOST = os.getenv("BACKEND_HOST", "0.0.0.0")

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
VERBOSE = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")
