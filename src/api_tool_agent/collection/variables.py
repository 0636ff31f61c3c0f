"""Template variable resolution for stored requests.

Placeholders use the Postman `{{name}}` syntax. Resolution always works on
a deep copy so stored templates are never modified.
"""

import re
from pathlib import Path

import yaml

from .base import NormalizedRequest

VARIABLE_PATTERN = re.compile(r"\{\{([^}]+)\}\}")


def substitute(text: str, variables: dict[str, str]) -> str:
    """Replace known placeholders in text; unknown ones are left verbatim."""

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name in variables:
            return str(variables[name])
        return match.group(0)

    return VARIABLE_PATTERN.sub(_replace, text)


def resolve(record: NormalizedRequest, variables: dict[str, str]) -> NormalizedRequest:
    """Return a resolved copy of record.

    The url, header values, param values and string bodies are scanned.
    Structured bodies are returned as copies without substitution.
    """
    resolved = record.model_copy(deep=True)
    resolved.url = substitute(resolved.url, variables)
    resolved.headers = {k: substitute(v, variables) for k, v in resolved.headers.items()}
    resolved.params = {k: substitute(v, variables) for k, v in resolved.params.items()}
    if isinstance(resolved.body, str):
        resolved.body = substitute(resolved.body, variables)
    return resolved


def load_variables(file_path: Path) -> dict[str, str]:
    """Load template variables from a YAML or JSON file.

    Accepts either a flat mapping or a Postman environment export
    (`{"values": [{"key": ..., "value": ..., "enabled": ...}]}`).
    """
    text = Path(file_path).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{file_path}: expected a mapping of variables")

    values = data.get("values")
    if isinstance(values, list):
        return {
            str(entry["key"]): _to_text(entry.get("value"))
            for entry in values
            if isinstance(entry, dict) and entry.get("key") and entry.get("enabled", True)
        }
    return {str(k): _to_text(v) for k, v in data.items()}


def _to_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)
