"""Source loaders: snapshot (read once) and live (read on every access)."""

from lua_sources.loaders.interfaces import SourceLoader, SourceReader, read_source
from lua_sources.loaders.live import LiveLoader
from lua_sources.loaders.snapshot import SnapshotLoader, preload

__all__ = ["LiveLoader", "SnapshotLoader", "SourceLoader", "SourceReader", "preload", "read_source"]
