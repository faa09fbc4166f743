"""
Configuration for the marketplace adapters.
Loads environment variables from a .env file and exposes them on a dataclass.
"""
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), ".env"))


def get_env_var(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get environment variable with fallback to default"""
    return os.getenv(key, default)


@dataclass
class MarketplaceAdaptersConfig:
    """Configuration for the marketplace adapters"""

    # Logging
    LOG_LEVEL: str = field(default_factory=lambda: get_env_var("LOG_LEVEL", "INFO"))
    # "json" switches to one JSON object per line; any other value is a logging format string
    LOG_FORMAT: Optional[str] = field(default_factory=lambda: get_env_var("LOG_FORMAT") or None)


config = MarketplaceAdaptersConfig()
