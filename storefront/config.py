"""
Runtime settings for the storefront.

Values are plain module constants resolved once at import time. Each
one can be overridden through an environment variable so a deployment
(or a test run) can point the service at another data file without
touching the code.
"""

from __future__ import annotations

import os
from pathlib import Path


def _positive_int(name: str, default: str) -> int:
    value = int(os.environ.get(name, default))
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


# JSON document holding {"products": [...]}
DB_PATH = Path(os.environ.get("STOREFRONT_DB_PATH", "db.json"))

# Number of products shown per catalogue page
PAGE_SIZE = _positive_int("STOREFRONT_PAGE_SIZE", "6")

# Base URL the client uses to reach the product endpoints
API_URL = os.environ.get("STOREFRONT_API_URL", "http://127.0.0.1:8000")

# Seconds before an HTTP call from the client gives up
HTTP_TIMEOUT = 10
