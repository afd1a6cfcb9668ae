from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from lua_sources.config import YamlConfigLoader, parse
from lua_sources.config.interfaces import ConfigLoader
from lua_sources.config.models import AppConfig, ConfigLoadRequest, ScriptConfig
from lua_sources.errors import LuaConfigError, NoExtraConfigError
from lua_sources.logging import init_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lua-sources", description="Resolve and verify scripting sources")
    parser.add_argument(
        "--config",
        default="data/config/config.yaml",
        help="Path to config.yaml (default: data/config/config.yaml)",
    )
    parser.add_argument(
        "--namespace",
        default=None,
        help="Extra config namespace to resolve (default: app.namespace from the config file)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    # Command: check
    subparsers.add_parser("check", help="Resolve the namespace and verify declared checksums")

    # Command: show
    show_parser = subparsers.add_parser("show", help="Print the resolved content of one source")
    show_parser.add_argument("source", help="Source identifier as declared under 'sources'")

    return parser


async def _load_config(args: argparse.Namespace) -> AppConfig:
    loader: ConfigLoader = YamlConfigLoader()
    return await loader.load(ConfigLoadRequest(yaml_path=args.config))


def _resolve(config: AppConfig, namespace: Optional[str]) -> ScriptConfig:
    namespace = namespace or config.app.namespace
    return parse(config.extra_config, namespace)


def _check(script_config: ScriptConfig) -> int:
    logger.info(
        "Namespace resolved. live=%s sources=%d skip_next=%s allow_open_libs=%s",
        script_config.is_live,
        len(script_config.sources),
        script_config.skip_next,
        script_config.allow_open_libs,
    )
    missing = 0
    for source in script_config.sources:
        _, found = script_config.get(source)
        if found:
            logger.info("Source available. source=%s", source)
        else:
            missing += 1
            logger.warning("Source unavailable. source=%s", source)
    return 0 if missing == 0 else 1


def _show(script_config: ScriptConfig, source: str) -> int:
    sys.stdout.write(script_config.require(source))
    return 0


async def _main_async(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    config = await _load_config(args)
    init_logging(config.logging)

    try:
        script_config = _resolve(config, args.namespace)
        if args.command == "check":
            return _check(script_config)
        return _show(script_config, args.source)
    except NoExtraConfigError as e:
        logger.warning("Scripting disabled: namespace not configured. namespace=%s", e.namespace)
        return 1
    except LuaConfigError as e:
        logger.error("%s", e)
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        return asyncio.run(_main_async(argv))
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
