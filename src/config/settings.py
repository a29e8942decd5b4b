"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

# --- Pattern catalog ---
# Optional JSON file replacing the built-in catalog (same shape as DEFAULT_PATTERN_CATALOG).
PATTERN_CATALOG_PATH: str = os.getenv("PATTERN_CATALOG_PATH", "")

# --- Observability ---
METRICS_ENABLED: bool = os.getenv("METRICS_ENABLED", "true").lower() == "true"

# --- Privacy ---
MAX_BODY_LOG_CHARS: int = int(os.getenv("MAX_BODY_LOG_CHARS", "200"))
