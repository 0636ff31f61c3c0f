import pytest

from api_tool_agent.errors import CalculationError
from api_tool_agent.tools.calculator import CalculatorTools, calculate, format_number, parse_natural_language


class TestParseNaturalLanguage:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("25 + 6", ("add", [25.0, 6.0])),
            ("What is 10 - 4?", ("subtract", [10.0, 4.0])),
            ("add 25 and 6", ("add", [25.0, 6.0])),
            ("subtract 5 from 10", ("subtract", [10.0, 5.0])),
            ("multiply 3 by 4", ("multiply", [3.0, 4.0])),
            ("divide 7 by 2", ("divide", [7.0, 2.0])),
            ("can you compute 7 times 6", ("multiply", [7.0, 6.0])),
            ("1.5 plus 2.25", ("add", [1.5, 2.25])),
            ("9 divided by 3", ("divide", [9.0, 3.0])),
        ],
    )
    def test_supported_phrases(self, text, expected):
        assert parse_natural_language(text) == expected

    def test_unparseable(self):
        assert parse_natural_language("hello there") is None


class TestCalculate:
    def test_operations(self):
        assert calculate("add", [1, 2, 3]) == 6
        assert calculate("subtract", [10, 3, 2]) == 5
        assert calculate("multiply", [2, 3, 4]) == 24
        assert calculate("divide", [12, 3, 2]) == 2

    def test_division_by_zero(self):
        with pytest.raises(CalculationError):
            calculate("divide", [1, 0])

    def test_invalid_operation(self):
        with pytest.raises(CalculationError):
            calculate("modulo", [1, 2])

    def test_format_number(self):
        assert format_number(31.0) == "31"
        assert format_number(3.5) == "3.5"


class TestCalculatorTool:
    def test_natural_language(self):
        result = CalculatorTools().handle("calculate", {"input": "add 25 and 6"})
        assert result.is_error is False
        assert result.text == "The result of add on [25, 6] is 31"

    def test_structured(self):
        result = CalculatorTools().handle("calculate", {"operation": "divide", "operands": [7, 2]})
        assert result.text == "The result of divide on [7, 2] is 3.5"

    def test_division_by_zero_is_error(self):
        result = CalculatorTools().handle("calculate", {"operation": "divide", "operands": [7, 0]})
        assert result.is_error is True
        assert "Division by zero" in result.text

    def test_unparseable_input(self):
        result = CalculatorTools().handle("calculate", {"input": "how are you"})
        assert result.is_error is True
        assert "Could not parse" in result.text

    def test_missing_input(self):
        result = CalculatorTools().handle("calculate", {"operation": "add"})
        assert result.is_error is True
        assert "Invalid input" in result.text

    def test_invalid_operation_rejected_by_schema(self):
        result = CalculatorTools().handle("calculate", {"operation": "pow", "operands": [2, 3]})
        assert result.is_error is True
        assert "Invalid arguments for calculate" in result.text
