from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Set, Tuple

from lua_sources.loaders.interfaces import SourceReader, read_source

logger = logging.getLogger(__name__)


class SnapshotLoader:
    """
    Serves source content captured once at construction.

    Sources missing from the snapshot stay missing for the lifetime of the loader,
    even if storage later gains them.
    """

    __slots__ = ("_contents",)

    def __init__(self, contents: Mapping[str, str]):
        self._contents = MappingProxyType(dict(contents))

    def get(self, source: str) -> Tuple[str, bool]:
        content = self._contents.get(source)
        if content is None:
            return "", False
        return content, True

    def __contains__(self, source: object) -> bool:
        return source in self._contents

    def __iter__(self) -> Iterator[str]:
        return iter(self._contents)

    def __len__(self) -> int:
        return len(self._contents)

    def __repr__(self) -> str:
        return f"SnapshotLoader(sources={list(self._contents)!r})"


def preload(
    sources: Iterable[str],
    *,
    reader: SourceReader = read_source,
    log: Optional[logging.Logger] = None,
) -> SnapshotLoader:
    """Read every source once and freeze the results into a SnapshotLoader."""
    log = log or logger
    contents: Dict[str, str] = {}
    seen: Set[str] = set()
    for source in sources:
        if source in seen:
            continue
        seen.add(source)
        try:
            contents[source] = reader(source)
        except OSError as e:
            log.error("lua: %s", e)
    return SnapshotLoader(contents)
