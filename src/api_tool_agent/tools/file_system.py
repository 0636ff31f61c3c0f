"""The read-file tool."""

from pathlib import Path

from pydantic import Field

from .base import ToolArgs, ToolHandler, ToolResult, ToolSpec


class ReadFileArgs(ToolArgs):
    file_path: str = Field(alias="filePath", min_length=1, description="The path to the text file to read")


class FileSystemTools(ToolHandler):
    def tool_specs(self) -> list[ToolSpec]:
        return [
            ToolSpec(
                name="read-file",
                description="Performs basic file system operations by reading content of a text file",
                args_model=ReadFileArgs,
                fn=self.read_file,
            ),
        ]

    def read_file(self, args: ReadFileArgs) -> ToolResult:
        try:
            content = Path(args.file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return ToolResult.from_text(f"Error reading file {args.file_path}: {e}", is_error=True)
        return ToolResult.from_text(f"Content of file {args.file_path}:\n{content}")
