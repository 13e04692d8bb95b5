"""
config/ — Client configuration loaded from the environment
"""

from challonge_client.config.client_config import (
    DEFAULT_API_URL,
    ChallongeConfig,
    load_challonge_config,
)

__all__ = ["ChallongeConfig", "DEFAULT_API_URL", "load_challonge_config"]
