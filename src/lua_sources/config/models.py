from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from lua_sources.errors import UnknownSourceError
from lua_sources.loaders.interfaces import SourceLoader
from lua_sources.loaders.live import LiveLoader
from lua_sources.loaders.snapshot import SnapshotLoader


class AppSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    namespace: str = "lua"


class FileRotationSettings(BaseModel):
    """
    Date-based rotation settings (daily).

    This maps cleanly to Python's standard library TimedRotatingFileHandler behavior.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    backup_count: int = 5


class FileLoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Empty disables file logging.
    path: str = "data/logs/lua-sources.log"
    rotation: FileRotationSettings = Field(default_factory=FileRotationSettings)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"
    file: FileLoggingSettings = Field(default_factory=FileLoggingSettings)


class AppConfig(BaseModel):
    """
    Effective runtime configuration after applying all precedence rules.

    `extra_config` is the host's generic mapping; its content is only interpreted
    by the namespace parser.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    extra_config: Dict[str, Any] = Field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ConfigLoadRequest:
    """
    Optional inputs for a configuration loader.

    Implementations may use these to control where configuration is read from.
    """

    yaml_path: str = "data/config/config.yaml"
    env_prefix: str = "APP__"
    dotenv_path: Optional[str] = ".env"


@dataclass(frozen=True, slots=True)
class ScriptConfig:
    """
    The resolved scripting namespace.

    Immutable once built. The loader variant is fixed at parse time and owned by
    this object.
    """

    sources: Tuple[str, ...] = ()
    pre_code: str = ""
    post_code: str = ""
    skip_next: bool = False
    allow_open_libs: bool = False
    source_loader: SourceLoader = field(default_factory=lambda: SnapshotLoader({}))

    @property
    def is_live(self) -> bool:
        return isinstance(self.source_loader, LiveLoader)

    def get(self, source: str) -> Tuple[str, bool]:
        return self.source_loader.get(source)

    def require(self, source: str) -> str:
        content, found = self.source_loader.get(source)
        if not found:
            raise UnknownSourceError(source)
        return content

    def iter_sources(self) -> Iterator[Tuple[str, str]]:
        """Yield (source, content) in declared order."""
        for source in self.sources:
            yield source, self.require(source)
