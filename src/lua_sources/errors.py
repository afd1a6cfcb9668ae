from __future__ import annotations


class LuaConfigError(Exception):
    """Base class for errors raised while resolving a scripting namespace."""


class NoExtraConfigError(LuaConfigError):
    def __init__(self, namespace: str):
        super().__init__(f"lua: no extra config for namespace {namespace}")
        self.namespace = namespace


class WrongExtraConfigError(LuaConfigError):
    def __init__(self, namespace: str):
        super().__init__(f"lua: wrong extra config for namespace {namespace}")
        self.namespace = namespace


class WrongChecksumTypeError(LuaConfigError):
    def __init__(self, source: str):
        super().__init__(f"lua: wrong checksum type for source {source}")
        self.source = source


class WrongChecksumError(LuaConfigError):
    """The resolved content of a source does not match its certified digest."""

    def __init__(self, source: str, actual: str, expected: str):
        super().__init__(f"lua: wrong checksum for source {source}. have: {actual}, want: {expected}")
        self.source = source
        self.actual = actual
        self.expected = expected


class UnknownSourceError(LuaConfigError):
    def __init__(self, source: str):
        super().__init__(f"lua: unable to load required source {source}")
        self.source = source
