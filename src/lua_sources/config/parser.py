from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from lua_sources.checksum import verify_checksums
from lua_sources.config.models import ScriptConfig
from lua_sources.errors import NoExtraConfigError, WrongExtraConfigError
from lua_sources.loaders.interfaces import SourceLoader, SourceReader, read_source
from lua_sources.loaders.live import LiveLoader
from lua_sources.loaders.snapshot import preload

logger = logging.getLogger(__name__)


def _is_string_keyed_mapping(value: Any) -> bool:
    return isinstance(value, Mapping) and all(isinstance(k, str) for k in value)


def _optional_str(options: Mapping[str, Any], key: str) -> str:
    value = options.get(key)
    return value if isinstance(value, str) else ""


def _flag(options: Mapping[str, Any], key: str) -> bool:
    return options.get(key) is True


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


def parse(
    extra_config: Mapping[str, Any],
    namespace: str,
    *,
    log: Optional[logging.Logger] = None,
    reader: SourceReader = read_source,
) -> ScriptConfig:
    """
    Resolve the scripting block stored under `namespace` in a host's extra config.

    Sources are read once into a snapshot unless `live` is true, in which case every
    lookup reads storage again and checksums are not verified. Read failures while
    building the snapshot are logged (on `log` when given) and leave the source
    unresolved. Structural errors and checksum mismatches abort the parse.
    """
    if namespace not in extra_config:
        raise NoExtraConfigError(namespace)
    options = extra_config[namespace]
    if not _is_string_keyed_mapping(options):
        raise WrongExtraConfigError(namespace)

    sources = tuple(_string_list(options.get("sources")))
    live = _flag(options, "live")

    loader: SourceLoader
    if live:
        loader = LiveLoader(reader)
    else:
        loader = preload(sources, reader=reader, log=log)

    config = ScriptConfig(
        sources=sources,
        pre_code=_optional_str(options, "pre"),
        post_code=_optional_str(options, "post"),
        skip_next=_flag(options, "skip_next"),
        allow_open_libs=_flag(options, "allow_open_libs"),
        source_loader=loader,
    )
    (log or logger).debug("lua: namespace resolved. namespace=%s live=%s sources=%d", namespace, live, len(sources))
    if live:
        return config

    checksums = options.get("md5")
    if _is_string_keyed_mapping(checksums):
        verify_checksums(loader, checksums)
    return config
