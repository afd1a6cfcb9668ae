from __future__ import annotations

from typing import Tuple

from lua_sources.loaders.interfaces import SourceReader, read_source


class LiveLoader:
    """Re-reads storage on every lookup. Read failures of any kind mean not found."""

    __slots__ = ("_reader",)

    def __init__(self, reader: SourceReader = read_source):
        self._reader = reader

    def get(self, source: str) -> Tuple[str, bool]:
        try:
            return self._reader(source), True
        except OSError:
            return "", False

    def __repr__(self) -> str:
        return "LiveLoader()"
