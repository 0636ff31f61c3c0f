"""Exception types and error formatting shared across tools."""

from pydantic import ValidationError


class ConfigError(RuntimeError):
    """Required configuration is missing or empty."""


class CalculationError(ValueError):
    """An arithmetic request could not be parsed or evaluated."""


def describe_validation_error(error: ValidationError) -> str:
    """Render a pydantic ValidationError as a single readable line."""
    parts = []
    for err in error.errors():
        location = ".".join(str(p) for p in err["loc"]) or "value"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)
