from __future__ import annotations

from pathlib import Path
from typing import Protocol, Tuple


class SourceLoader(Protocol):
    def get(self, source: str) -> Tuple[str, bool]:
        """Return the current content of a source and whether it was found."""


class SourceReader(Protocol):
    """
    Reads the whole content of a source from storage.

    Implementations raise OSError when the source cannot be read.
    """

    def __call__(self, source: str) -> str: ...


def read_source(source: str) -> str:
    try:
        raw = Path(source).read_bytes()
    except ValueError as e:
        # pathlib rejects paths the OS could never open, e.g. embedded NUL bytes
        raise OSError(f"cannot read source {source!r}: {e}") from e
    # surrogateescape keeps undecodable bytes so digests see the file as stored
    return raw.decode("utf-8", errors="surrogateescape")
