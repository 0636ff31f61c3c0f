"""Tool dispatcher: lists every tool and routes calls to the owning handler."""

import logging
from typing import Any

from api_tool_agent import config
from api_tool_agent.collection.service import CollectionService
from api_tool_agent.http_client.executor import RequestExecutor

from .api_client import ApiClientTools
from .base import ToolHandler, ToolResult
from .calculator import CalculatorTools
from .file_system import FileSystemTools
from .postman import PostmanCollectionTools
from .weather import WeatherTools

logger = logging.getLogger(__name__)


class ToolServer:
    """Owns the tool handlers, and through them the request registry."""

    def __init__(self, handlers: list[ToolHandler] | None = None):
        self.handlers = handlers if handlers is not None else default_handlers()

    def list_tools(self) -> list[dict]:
        return [definition for handler in self.handlers for definition in handler.definitions()]

    def call_tool(self, name: str, args: Any = None) -> ToolResult:
        for handler in self.handlers:
            result = handler.handle(name, args)
            if result is not None:
                return result
        logger.warning("Unknown tool requested: %s", name)
        return ToolResult.from_text(f"Unknown tool: {name}", is_error=True)


def default_handlers() -> list[ToolHandler]:
    timeout_ms = config.get_default_timeout_ms()
    executor = RequestExecutor()
    return [
        CalculatorTools(),
        FileSystemTools(),
        WeatherTools(),
        ApiClientTools(executor, default_timeout_ms=timeout_ms),
        PostmanCollectionTools(CollectionService(executor, timeout_ms=timeout_ms)),
    ]
