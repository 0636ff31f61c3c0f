"""Tool result envelopes and the handler base class.

Every tool takes a JSON-like argument bag, validates it against its own
pydantic model and returns a ToolResult. Handlers return None for tool
names they do not own so a dispatcher can try them in turn.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from api_tool_agent.errors import describe_validation_error

logger = logging.getLogger(__name__)


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Uniform result of a tool call: text content plus an error flag."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def from_text(cls, text: str, is_error: bool = False) -> "ToolResult":
        return cls(content=[TextContent(text=text)], is_error=is_error)

    @classmethod
    def from_payload(cls, payload: dict, is_error: bool = False) -> "ToolResult":
        """Wrap a JSON-serializable payload as indented JSON text."""
        return cls.from_text(json.dumps(payload, indent=2, ensure_ascii=False), is_error=is_error)

    @property
    def text(self) -> str:
        return "\n".join(c.text for c in self.content)

    def to_dict(self) -> dict:
        data = {"content": [c.model_dump() for c in self.content]}
        if self.is_error:
            data["isError"] = True
        return data


class ToolArgs(BaseModel):
    """Base for tool argument models: camelCase on the wire, snake_case in code."""

    model_config = ConfigDict(populate_by_name=True)


@dataclass
class ToolSpec:
    """A single tool: its public metadata, argument model and implementation."""

    name: str
    description: str
    args_model: type[ToolArgs]
    fn: Callable[[Any], ToolResult]

    def definition(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.args_model.model_json_schema(by_alias=True),
        }


class ToolHandler:
    """A family of related tools sharing state."""

    def tool_specs(self) -> list[ToolSpec]:
        raise NotImplementedError

    def definitions(self) -> list[dict]:
        return [spec.definition() for spec in self.tool_specs()]

    def handle(self, name: str, args: Any) -> ToolResult | None:
        spec = next((s for s in self.tool_specs() if s.name == name), None)
        if spec is None:
            return None

        try:
            parsed = spec.args_model.model_validate(args if args is not None else {})
        except ValidationError as e:
            logger.info("Rejected arguments for %s: %s", name, e)
            return ToolResult.from_payload(
                {
                    "success": False,
                    "error": f"Invalid arguments for {name}: {describe_validation_error(e)}",
                },
                is_error=True,
            )

        logger.debug("Calling tool %s", name)
        return spec.fn(parsed)
