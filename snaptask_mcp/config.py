"""Configuration for the Snaptask MCP server."""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from a local .env file if present
load_dotenv()

DEFAULT_API_BASE = "https://ma64ers93d.adaptive.ai/api/rpc"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once at startup and injected where needed."""
    api_base: str = DEFAULT_API_BASE
    timeout_seconds: Optional[float] = None  # None = wait for the backend indefinitely
    log_level: str = "INFO"
    environment: str = "development"
    frontend_url: str = "http://localhost:3000"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"SNAPTASK_TIMEOUT_SECONDS must be a number, got {raw!r}")
    if value <= 0:
        raise ValueError("SNAPTASK_TIMEOUT_SECONDS must be greater than zero")
    return value


def get_settings() -> Settings:
    """Build settings from the environment."""
    return Settings(
        api_base=os.environ.get("SNAPTASK_API_BASE") or DEFAULT_API_BASE,
        timeout_seconds=_parse_timeout(os.environ.get("SNAPTASK_TIMEOUT_SECONDS")),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        environment=os.environ.get("ENVIRONMENT", "development"),
        frontend_url=os.environ.get("FRONTEND_URL", "http://localhost:3000"),
    )
