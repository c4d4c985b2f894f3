"""Environment-driven settings for the planner service."""
from __future__ import annotations

import os
from typing import List, Optional

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()


def allowed_origins() -> List[str]:
    # Operators can scope CORS via WEGO_ALLOWED_ORIGINS; default is open for local UIs.
    raw_origins = os.getenv("WEGO_ALLOWED_ORIGINS") or "*"
    origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
    return origins or ["*"]


def catalog_path() -> Optional[str]:
    value = (os.getenv("WEGO_CATALOG_PATH") or "").strip()
    return value or None
