"""
Runtime configuration for the scanner service.

Values come from the process environment; a `.env` file in the project
root is loaded first so local runs don't need exported variables.
"""

import logging
import os
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, Field

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Load environment variables from .env (in project root)
load_dotenv(BASE_DIR / ".env")

ALPHA_VANTAGE_BASE = "https://www.alphavantage.co/query"
INTRADAY_FUNCTION = "TIME_SERIES_INTRADAY"
INTRADAY_INTERVAL = "5min"
SERIES_KEY = f"Time Series ({INTRADAY_INTERVAL})"
CLOSE_FIELD = "4. close"

# Top 10 Nifty 50 constituents; kept short to stay inside the provider's quota
NIFTY_50_SYMBOLS: Tuple[str, ...] = (
    "RELIANCE.BSE",
    "TCS.BSE",
    "HDFCBANK.BSE",
    "INFY.BSE",
    "ICICIBANK.BSE",
    "KOTAKBANK.BSE",
    "SBIN.BSE",
    "ASIANPAINT.BSE",
    "AXISBANK.BSE",
    "BAJFINANCE.BSE",
)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    alpha_vantage_api_key: str = Field("", description="Alpha Vantage API key")
    host: str = Field("0.0.0.0", description="Interface uvicorn binds to")
    port: int = Field(10000, description="Listening port")
    cache_ttl_seconds: float = Field(300, description="How long a scan result is served from cache")
    request_delay_seconds: float = Field(12, description="Pause between provider calls")
    provider_timeout_seconds: float = Field(30, description="Per-request timeout for the provider")
    log_level: str = Field("INFO", description="Root log level")


def load_settings() -> Settings:
    """Build Settings from the environment, falling back to field defaults."""
    env_map = {
        "alpha_vantage_api_key": "ALPHA_VANTAGE_API_KEY",
        "host": "HOST",
        "port": "PORT",
        "cache_ttl_seconds": "CACHE_TTL_SECONDS",
        "request_delay_seconds": "REQUEST_DELAY_SECONDS",
        "provider_timeout_seconds": "PROVIDER_TIMEOUT_SECONDS",
        "log_level": "LOG_LEVEL",
    }
    values = {}
    for field, env_name in env_map.items():
        raw = os.getenv(env_name)
        if raw is not None and raw.strip() != "":
            values[field] = raw.strip()
    return Settings(**values)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
