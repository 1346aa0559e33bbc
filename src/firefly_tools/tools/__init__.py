"""
Agent tool layer.

Maps each client operation onto a named tool with a JSON parameter schema
and a content-envelope executor, and registers them with a host.
"""

import logging
from typing import Any, Callable

from ..config import FireflyConfig
from ..firefly_client import FireflyClient
from .definitions import TOOLS, Tool, get_tool, json_content, text_content

logger = logging.getLogger(__name__)


def register_tools(register_tool: Callable[..., Any], config: FireflyConfig) -> FireflyClient:
    """
    Build one client from config and register every tool with the host.

    Args:
        register_tool: Host callback, called with name, description,
            parameters and execute keyword arguments
        config: Firefly connection configuration

    Returns:
        The shared client instance

    Raises:
        ConfigurationError: If config has no usable credentials
    """
    client = FireflyClient(config)

    for tool in TOOLS:
        register_tool(
            name=tool.name,
            description=tool.description,
            parameters=tool.parameters,
            execute=tool.create_executor(client),
        )

    logger.info("Registered %d Firefly tools for %s", len(TOOLS), client.base_url)
    return client


__all__ = [
    "TOOLS",
    "Tool",
    "get_tool",
    "json_content",
    "register_tools",
    "text_content",
]
