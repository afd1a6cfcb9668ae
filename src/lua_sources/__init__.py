"""Script source loading with optional MD5 integrity checks."""

from lua_sources.checksum import md5_hex, verify_checksums
from lua_sources.config.models import ScriptConfig
from lua_sources.config.parser import parse
from lua_sources.errors import (
    LuaConfigError,
    NoExtraConfigError,
    UnknownSourceError,
    WrongChecksumError,
    WrongChecksumTypeError,
    WrongExtraConfigError,
)
from lua_sources.loaders import LiveLoader, SnapshotLoader, SourceLoader, preload

__all__ = [
    "LiveLoader",
    "LuaConfigError",
    "NoExtraConfigError",
    "ScriptConfig",
    "SnapshotLoader",
    "SourceLoader",
    "UnknownSourceError",
    "WrongChecksumError",
    "WrongChecksumTypeError",
    "WrongExtraConfigError",
    "md5_hex",
    "parse",
    "preload",
    "verify_checksums",
]
