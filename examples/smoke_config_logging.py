from __future__ import annotations

import asyncio
import logging

from lua_sources import LuaConfigError, md5_hex, parse
from lua_sources.config import YamlConfigLoader
from lua_sources.config.models import ConfigLoadRequest
from lua_sources.logging import init_logging


async def main() -> None:
    config = await YamlConfigLoader().load(ConfigLoadRequest(yaml_path="examples/config.yaml"))
    init_logging(config.logging)

    logger = logging.getLogger("smoke")
    logger.info("Config loaded namespace=%s", config.app.namespace)
    try:
        script_config = parse(config.extra_config, config.app.namespace)
    except LuaConfigError as e:
        logger.warning("Parse failed: %s", e)
        return
    for source, content in script_config.iter_sources():
        logger.info("Source loaded source=%s md5=%s", source, md5_hex(content))


if __name__ == "__main__":
    asyncio.run(main())
