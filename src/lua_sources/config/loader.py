from __future__ import annotations

import copy
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Optional, Sequence

import yaml
from dotenv import load_dotenv

from lua_sources.config.models import AppConfig, ConfigLoadRequest

logger = logging.getLogger(__name__)

_NON_ENV_CHARS = re.compile(r"[^a-z0-9_]")


def _deep_merge(base: MutableMapping[str, Any], override: Mapping[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), Mapping):
            _deep_merge(base[key], value)  # type: ignore[arg-type]
            continue
        base[key] = value


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Top-level YAML must be a mapping, got: {type(data).__name__}")
    return data


def _override_path(env_var_name: str, prefix: str) -> Sequence[str]:
    parts = [p.lower() for p in env_var_name[len(prefix) :].split("__") if p]
    if not parts:
        raise ValueError(f"Invalid environment variable override name: {env_var_name}")
    return parts


def _find_key(mapping: Mapping[str, Any], segment: str) -> Optional[str]:
    """
    Match an override segment against an existing key.

    Keys such as `github.com/devopsfaith/krakend-lua` cannot appear in an environment
    variable name, so they are addressed with every non-alphanumeric character folded
    to `_` (`GITHUB_COM_DEVOPSFAITH_KRAKEND_LUA`).
    """
    if segment in mapping:
        return segment
    for key in mapping:
        if isinstance(key, str) and _NON_ENV_CHARS.sub("_", key.lower()) == segment:
            return key
    return None


def _resolve_parent(config: MutableMapping[str, Any], path: Sequence[str]) -> MutableMapping[str, Any]:
    dotted = ".".join(path)
    current: MutableMapping[str, Any] = config
    for segment in path[:-1]:
        key = _find_key(current, segment)
        if key is None:
            raise KeyError(f"Unknown configuration key path: {dotted}")
        current = current[key]
        if not isinstance(current, dict):
            raise TypeError(f"Configuration key path does not point to a mapping: {dotted}")
    return current


def _apply_env_overrides(config: MutableMapping[str, Any], env_prefix: str) -> None:
    """Replace string leaves with `<prefix>SECTION__KEY` environment values."""
    for name, value in os.environ.items():
        if not name.startswith(env_prefix):
            continue

        path = _override_path(name, env_prefix)
        parent = _resolve_parent(config, path)
        leaf = _find_key(parent, path[-1])
        dotted = ".".join(path)

        if leaf is None:
            raise KeyError(f"Unknown configuration key path: {dotted}")
        if not isinstance(parent[leaf], str):
            raise TypeError(
                f"Environment variable overrides are only allowed for string values. "
                f"Key '{dotted}' is {type(parent[leaf]).__name__}."
            )
        parent[leaf] = value
        logger.debug("Configuration override applied. key=%s", dotted)


class YamlConfigLoader:
    async def load(self, request: ConfigLoadRequest = ConfigLoadRequest()) -> AppConfig:
        config: Dict[str, Any] = copy.deepcopy(AppConfig().model_dump(mode="python"))
        _deep_merge(config, _read_yaml(Path(request.yaml_path)))

        if request.dotenv_path is not None and Path(request.dotenv_path).exists():
            load_dotenv(dotenv_path=request.dotenv_path, override=False)

        _apply_env_overrides(config, request.env_prefix)
        return AppConfig.model_validate(config)
