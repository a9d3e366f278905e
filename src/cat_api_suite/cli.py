"""CLI entry point for cat-api-suite."""

import json

import click

from cat_api_suite.client.facade import ApiClient, echo_sink, null_sink
from cat_api_suite.client.models import RequestDescriptor
from cat_api_suite.config import ApiConfig
from cat_api_suite.errors import TransportError
from cat_api_suite.schema.catalog import CATALOG, get_schema
from cat_api_suite.schema.validator import validate


def _parse_params(pairs: tuple[str, ...]) -> dict[str, str]:
    params = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected key=value, got {pair!r}", param_hint="--param")
        params[key] = value
    return params


def _parse_data(data: str | None, method: str) -> dict | list | str | None:
    if data is None:
        return None
    if method == "GET":
        raise click.BadParameter("GET requests do not carry a body", param_hint="--data")
    try:
        body = json.loads(data)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"invalid JSON: {e}", param_hint="--data") from e
    if not isinstance(body, (dict, list, str)):
        raise click.BadParameter("expected a JSON object, array or string", param_hint="--data")
    return body


@click.group()
def main():
    """Cat API Suite — call TheCatAPI and check responses against known schemas."""
    pass


@main.command()
@click.argument("path")
@click.option("-p", "--param", "params", multiple=True, help="Query parameter as key=value (repeatable).")
@click.option("--method", default="GET", type=click.Choice(["GET", "POST", "PUT", "DELETE", "PATCH"]), help="HTTP method.")
@click.option("--data", default=None, help="JSON request body.")
@click.option("--schema", "schema_name", default=None, type=click.Choice(sorted(CATALOG)), help="Validate the body against a catalog schema.")
@click.option("--api-key", default=None, help="Override the configured API key.")
@click.option("-q", "--quiet", is_flag=True, help="Do not trace requests.")
def fetch(path: str, params: tuple[str, ...], method: str, data: str | None, schema_name: str | None, api_key: str | None, quiet: bool):
    """Send one request to PATH and print the response."""
    body = _parse_data(data, method)
    client = ApiClient(config=ApiConfig.from_env(), sink=null_sink if quiet else echo_sink, api_key=api_key)
    descriptor = RequestDescriptor(method=method, path=path, params=_parse_params(params), body=body)

    try:
        result = client.execute(descriptor)
    except TransportError as e:
        click.echo(f"Request failed: {e}", err=True)
        raise SystemExit(2)

    click.echo(f"{result.status} {result.status_text}".rstrip())
    if isinstance(result.body, (dict, list)):
        click.echo(json.dumps(result.body, indent=2, ensure_ascii=False))
    else:
        click.echo(result.body)

    if schema_name is None:
        return

    schema = get_schema(schema_name)
    # List bodies are checked element by element
    values = result.body if isinstance(result.body, list) and schema.tag != "array" else [result.body]
    errors = []
    for value in values:
        errors.extend(validate(value, schema).errors)

    if errors:
        click.echo(f"Schema '{schema_name}' mismatches ({len(errors)}):", err=True)
        for error in errors:
            click.echo(f"  - {error}", err=True)
        raise SystemExit(1)
    click.echo(f"Schema '{schema_name}': OK")


@main.command()
def schemas():
    """List the schemas available to --schema."""
    for name, schema in CATALOG.items():
        required = ", ".join(schema.required) or "-"
        click.echo(f"{name}\trequired: {required}")
