"""
Backend Configuration

API settings and session limits.
"""

import os

from fieldkit.config.settings import BACKEND_HOST, BACKEND_PORT, LOG_LEVEL, VERBOSE

# API Settings
API_TITLE = "fieldkit"
API_DESCRIPTION = "Inline form validation sessions driven by change, blur, submit and reset events"
API_VERSION = "1.0.0"

# Session storage
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "1000"))

__all__ = [
    "API_TITLE",
    "API_DESCRIPTION",
    "API_VERSION",
    "BACKEND_HOST",
    "BACKEND_PORT",
    "LOG_LEVEL",
    "MAX_SESSIONS",
    "VERBOSE",
]
