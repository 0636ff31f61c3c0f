"""The calculate tool: basic arithmetic from structured or natural-language input."""

import re
from functools import reduce
from typing import Literal

from pydantic import Field

from api_tool_agent.errors import CalculationError

from .base import ToolArgs, ToolHandler, ToolResult, ToolSpec

Operation = Literal["add", "subtract", "multiply", "divide"]

_NUMBER = r"(\d+(?:\.\d+)?)"
_FILLER = re.compile(r"what is|calculate|compute|please|can you")

# Order matters: symbolic forms are tried before worded ones.
# The last element says whether the captured operands appear in reverse order.
_PATTERNS: list[tuple[re.Pattern, str, bool]] = [
    (re.compile(rf"{_NUMBER}\s*\+\s*{_NUMBER}"), "add", False),
    (re.compile(rf"{_NUMBER}\s*-\s*{_NUMBER}"), "subtract", False),
    (re.compile(rf"{_NUMBER}\s*\*\s*{_NUMBER}"), "multiply", False),
    (re.compile(rf"{_NUMBER}\s*/\s*{_NUMBER}"), "divide", False),
    (re.compile(rf"add\s+{_NUMBER}\s+(?:and\s+|to\s+|with\s+)?{_NUMBER}"), "add", False),
    (re.compile(rf"subtract\s+{_NUMBER}\s+from\s+{_NUMBER}"), "subtract", True),
    (re.compile(rf"multiply\s+{_NUMBER}\s+(?:by\s+|and\s+)?{_NUMBER}"), "multiply", False),
    (re.compile(rf"divide\s+{_NUMBER}\s+by\s+{_NUMBER}"), "divide", False),
    (re.compile(rf"{_NUMBER}\s+plus\s+{_NUMBER}"), "add", False),
    (re.compile(rf"{_NUMBER}\s+minus\s+{_NUMBER}"), "subtract", False),
    (re.compile(rf"{_NUMBER}\s+times\s+{_NUMBER}"), "multiply", False),
    (re.compile(rf"{_NUMBER}\s+divided\s+by\s+{_NUMBER}"), "divide", False),
]


class CalculateArgs(ToolArgs):
    operation: Operation | None = Field(default=None, description="The arithmetic operation to perform")
    operands: list[float] | None = Field(default=None, min_length=1, description="The numbers to operate on")
    input: str | None = Field(
        default=None, description="Natural language math expression like 'add 25 and 6' or '25 + 6'"
    )


def parse_natural_language(text: str) -> tuple[str, list[float]] | None:
    """Extract (operation, operands) from phrases like '25 + 6' or 'divide 8 by 2'."""
    normalized = _FILLER.sub("", text.lower()).strip()
    for pattern, operation, reversed_operands in _PATTERNS:
        match = pattern.search(normalized)
        if match:
            operands = [float(match.group(1)), float(match.group(2))]
            if reversed_operands:
                operands.reverse()
            return operation, operands
    return None


def calculate(operation: str, operands: list[float]) -> float:
    if not operands:
        raise CalculationError("At least one operand is required")
    if operation == "add":
        return sum(operands)
    if operation == "subtract":
        return reduce(lambda acc, n: acc - n, operands)
    if operation == "multiply":
        return reduce(lambda acc, n: acc * n, operands, 1.0)
    if operation == "divide":
        if any(n == 0 for n in operands[1:]):
            raise CalculationError("Division by zero")
        return reduce(lambda acc, n: acc / n, operands)
    raise CalculationError(f"Invalid operation: {operation}")


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class CalculatorTools(ToolHandler):
    def tool_specs(self) -> list[ToolSpec]:
        return [
            ToolSpec(
                name="calculate",
                description="Performs basic arithmetic operations",
                args_model=CalculateArgs,
                fn=self.calculate,
            ),
        ]

    def calculate(self, args: CalculateArgs) -> ToolResult:
        try:
            if args.input:
                parsed = parse_natural_language(args.input)
                if parsed is None:
                    raise CalculationError(
                        "Could not parse mathematical expression. Try formats like '25 + 6' or 'add 25 and 6'"
                    )
                operation, operands = parsed
            elif args.operation and args.operands:
                operation, operands = args.operation, args.operands
            else:
                raise CalculationError(
                    "Invalid input: Provide either 'input' for natural language or both 'operation' and 'operands'"
                )
            result = calculate(operation, operands)
        except CalculationError as e:
            return ToolResult.from_text(f"Calculation error: {e}", is_error=True)

        shown = ", ".join(format_number(n) for n in operands)
        return ToolResult.from_text(f"The result of {operation} on [{shown}] is {format_number(result)}")
