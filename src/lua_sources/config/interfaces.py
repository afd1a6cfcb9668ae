from __future__ import annotations

from typing import Protocol

from lua_sources.config.models import AppConfig, ConfigLoadRequest


class ConfigLoader(Protocol):
    """
    Loads effective runtime configuration.

    Precedence, lowest first: model defaults, the YAML file, then environment
    overrides (optionally seeded from a .env file).
    """

    async def load(self, request: ConfigLoadRequest = ConfigLoadRequest()) -> AppConfig:
        ...
