from __future__ import annotations

import hashlib
from typing import Any, Mapping

from lua_sources.errors import WrongChecksumError, WrongChecksumTypeError
from lua_sources.loaders.interfaces import SourceLoader


def md5_hex(content: str) -> str:
    data = content.encode("utf-8", errors="surrogateescape")
    return hashlib.md5(data, usedforsecurity=False).hexdigest()


def verify_checksums(loader: SourceLoader, checksums: Mapping[str, Any]) -> None:
    """
    Check every (source, expected digest) pair against the loader's content.

    Stops at the first malformed entry or mismatch. A source the loader cannot
    resolve is hashed as empty content rather than reported as unknown.
    """
    for source, expected in checksums.items():
        if not isinstance(expected, str):
            raise WrongChecksumTypeError(source)
        content, _ = loader.get(source)
        actual = md5_hex(content)
        if actual != expected:
            raise WrongChecksumError(source=source, actual=actual, expected=expected)
