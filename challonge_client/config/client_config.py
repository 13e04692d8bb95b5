"""
config/client_config.py — Challonge Client Configuration

Loads API credentials and client options from environment variables
(a .env file in the working directory is read first, if present).
"""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

log = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.challonge.com/v1"
DEFAULT_TIMEOUT = 15.0

_TRUTHY = ("1", "true", "yes")


@dataclass
class ChallongeConfig:
    """Configuration for the Challonge gateway.

    Attributes:
        username: Challonge account name (basic-auth user)
        api_key: Challonge API key (basic-auth password)
        api_url: Base URL of the v1 API
        debug: Trace every request and response in the log
        timeout: Total request timeout in seconds
        strict: Raise on a match winner that is neither player
    """

    username: str = ""
    api_key: str = ""
    api_url: str = DEFAULT_API_URL
    debug: bool = False
    timeout: float = DEFAULT_TIMEOUT
    strict: bool = False

    @property
    def is_configured(self) -> bool:
        """Check that credentials are present."""
        return bool(self.username and self.api_key)


def _flag(name: str) -> bool:
    return os.getenv(name, "0").strip().lower() in _TRUTHY


def _timeout() -> float:
    raw = os.getenv("CHALLONGE_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        log.warning(f"[CONFIG] Invalid CHALLONGE_TIMEOUT {raw!r}, using {DEFAULT_TIMEOUT}")
        return DEFAULT_TIMEOUT


def load_challonge_config(use_dotenv: bool = True) -> ChallongeConfig:
    """Load Challonge configuration from environment variables.

    Environment Variables:
        CHALLONGE_USERNAME: Account name
        CHALLONGE_API_KEY: API key
        CHALLONGE_API_URL: Base URL (default "https://api.challonge.com/v1")
        CHALLONGE_DEBUG: "1" to trace requests
        CHALLONGE_TIMEOUT: Seconds (default 15)
        CHALLONGE_STRICT: "1" to enforce the match winner invariant

    Returns:
        ChallongeConfig instance
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    return ChallongeConfig(
        username=os.getenv("CHALLONGE_USERNAME", "").strip(),
        api_key=os.getenv("CHALLONGE_API_KEY", "").strip(),
        api_url=os.getenv("CHALLONGE_API_URL", "").strip() or DEFAULT_API_URL,
        debug=_flag("CHALLONGE_DEBUG"),
        timeout=_timeout(),
        strict=_flag("CHALLONGE_STRICT"),
    )
