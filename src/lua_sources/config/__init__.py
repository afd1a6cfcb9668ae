"""Host configuration loading and scripting namespace resolution."""

from lua_sources.config.loader import YamlConfigLoader
from lua_sources.config.models import AppConfig, ConfigLoadRequest, LoggingSettings, ScriptConfig
from lua_sources.config.parser import parse

__all__ = ["AppConfig", "ConfigLoadRequest", "LoggingSettings", "ScriptConfig", "YamlConfigLoader", "parse"]
