"""Config package exports."""

from .schema import (
    AgentConfig,
    AppConfig,
    MatchConfig,
    load_config,
    search_config_from_dict,
)

__all__ = [
    "AgentConfig",
    "AppConfig",
    "MatchConfig",
    "load_config",
    "search_config_from_dict",
]
