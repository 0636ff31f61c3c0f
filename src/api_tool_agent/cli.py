"""CLI entry point for api-tool-agent."""

import json
import logging
from pathlib import Path

import click
import yaml

from api_tool_agent import config
from api_tool_agent.collection.variables import load_variables
from api_tool_agent.tools.base import ToolResult
from api_tool_agent.tools.server import ToolServer

METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH"]


def _emit(result: ToolResult) -> None:
    """Print a tool result and exit non-zero when it is an error."""
    click.echo(result.text)
    if result.is_error:
        click.get_current_context().exit(1)


def _parse_pairs(values: tuple[str, ...], sep: str, param_hint: str) -> dict[str, str]:
    pairs = {}
    for value in values:
        key, found, rest = value.partition(sep)
        if not found or not key.strip():
            raise click.BadParameter(f"expected KEY{sep}VALUE, got {value!r}", param_hint=param_hint)
        pairs[key.strip()] = rest.strip()
    return pairs


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """API Tool Agent: call HTTP and Postman collection tools from the command line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
def tools():
    """List every available tool with its input schema."""
    click.echo(json.dumps(ToolServer().list_tools(), indent=2))


@main.command()
@click.argument("tool_name")
@click.option("--args", "args_json", default=None, help="Tool arguments as a JSON object.")
@click.option("--args-file", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Read tool arguments from a JSON or YAML file.")
def call(tool_name: str, args_json: str | None, args_file: Path | None):
    """Invoke any tool by name."""
    if args_json and args_file:
        raise click.UsageError("Use either --args or --args-file, not both.")
    if args_file:
        args = yaml.safe_load(args_file.read_text(encoding="utf-8")) or {}
    elif args_json:
        try:
            args = json.loads(args_json)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"invalid JSON: {e}", param_hint="--args") from e
    else:
        args = {}
    _emit(ToolServer().call_tool(tool_name, args))


@main.command()
@click.argument("url")
@click.option("-X", "--method", default="GET", type=click.Choice(METHODS, case_sensitive=False), help="HTTP method.")
@click.option("-H", "--header", "headers", multiple=True, help="Request header as 'Name: value'.")
@click.option("--param", "params", multiple=True, help="Query parameter as key=value.")
@click.option("-d", "--data", default=None, help="Request body.")
@click.option("--json-body", is_flag=True, help="Parse --data as JSON before sending.")
@click.option("--auth-type", type=click.Choice(["bearer", "api-key", "basic"]), default=None, help="Authentication type.")
@click.option("--token", default=None, help="Bearer token or API key.")
@click.option("--username", default=None, help="Username for basic auth.")
@click.option("--password", default=None, help="Password for basic auth.")
@click.option("--api-key-header", default=None, help="Header name for the API key.")
@click.option("--timeout", type=int, default=None, help="Request timeout in milliseconds.")
def request(url, method, headers, params, data, json_body, auth_type, token, username, password, api_key_header, timeout):
    """Send a one-off HTTP request."""
    body = data
    if data is not None and json_body:
        try:
            body = json.loads(data)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f"invalid JSON: {e}", param_hint="--data") from e

    args = {
        "url": url,
        "method": method.upper(),
        "headers": _parse_pairs(headers, ":", "--header"),
        "params": _parse_pairs(params, "=", "--param"),
        "body": body,
        "timeout": timeout,
        "authType": auth_type,
        "token": token,
        "username": username,
        "password": password,
        "apiKeyHeader": api_key_header,
    }
    _emit(ToolServer().call_tool("make-api-request", args))


@main.command("list")
@click.argument("collection_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def list_requests(collection_path: Path):
    """Import a Postman collection and list its requests."""
    server = ToolServer()
    imported = server.call_tool("import-postman-collection", {"filePath": str(collection_path)})
    if imported.is_error:
        _emit(imported)
        return
    _emit(server.call_tool("list-postman-requests", {}))


@main.command()
@click.argument("collection_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("request_name")
@click.option("--var", "variables", multiple=True, help="Template variable as key=value (overrides --env).")
@click.option("--env", "env_file", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Variables file: flat YAML/JSON mapping or Postman environment export.")
def run(collection_path: Path, request_name: str, variables: tuple[str, ...], env_file: Path | None):
    """Import a Postman collection and execute one request by name."""
    resolved = {}
    if env_file:
        try:
            resolved.update(load_variables(env_file))
        except (ValueError, yaml.YAMLError) as e:
            raise click.BadParameter(str(e), param_hint="--env") from e
    resolved.update(_parse_pairs(variables, "=", "--var"))

    server = ToolServer()
    imported = server.call_tool("import-postman-collection", {"filePath": str(collection_path)})
    if imported.is_error:
        _emit(imported)
        return
    _emit(server.call_tool("execute-postman-request", {"requestName": request_name, "variables": resolved}))
