import json
import logging
import os
from typing import Any, Optional

import click
import httpx
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console

from .._config import Config
from .._services import RequestExecutor
from .._utils.constants import DOTENV_FILE, ENV_LOG_LEVEL
from ..models.errors import AnyConnError
from ..models.request import DataType, RequestOptions
from ..models.response import Result


def _parse_pairs(
    values: tuple[str, ...], separator: str, option: str
) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for value in values:
        key, found, rest = value.partition(separator)
        if not found or not key.strip():
            raise click.BadParameter(
                f"expected 'name{separator}value', got {value!r}", param_hint=option
            )
        pairs[key.strip()] = rest.strip() if separator == ":" else rest
    return pairs


def _print_result(result: Result, include_headers: bool) -> None:
    if include_headers:
        click.echo(f"HTTP {result.status_code}")
        for name, value in result.headers.items():
            click.echo(f"{name}: {value}")
        click.echo()

    data: Any = result.data
    if isinstance(data, bytes):
        stdout = click.get_binary_stream("stdout")
        stdout.write(data)
        stdout.flush()
    elif isinstance(data, str):
        click.echo(data)
    else:
        Console().print_json(json.dumps(data, ensure_ascii=False))


@click.command()
@click.argument("url")
@click.option(
    "--request",
    "-X",
    "method",
    type=click.Choice(["GET", "POST"], case_sensitive=False),
    default="GET",
    help="HTTP method",
)
@click.option("--header", "-H", "headers", multiple=True, help="Header as name:value")
@click.option("--data", "-d", "fields", multiple=True, help="Field as key=value")
@click.option(
    "--data-type",
    type=click.Choice([t.value for t in DataType]),
    default=DataType.JSON.value,
    help="Encoding of POST fields",
)
@click.option("--raw", default=None, help="Raw POST body, sent verbatim")
@click.option("--include", "-i", is_flag=True, help="Print status and headers")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(
    url: str,
    method: str,
    headers: tuple[str, ...],
    fields: tuple[str, ...],
    data_type: str,
    raw: Optional[str],
    include: bool,
    verbose: bool,
) -> None:
    """Send a single request to URL and print the decoded response."""
    load_dotenv(dotenv_path=os.path.join(os.getcwd(), DOTENV_FILE))
    try:
        config = Config.from_env()
    except ValidationError as e:
        raise click.ClickException(
            f"Invalid {ENV_LOG_LEVEL}: {os.environ.get(ENV_LOG_LEVEL)!r}"
        ) from e
    logging.basicConfig(level=logging.DEBUG if verbose else config.log_level)

    if raw is not None and fields:
        raise click.UsageError("--raw cannot be combined with --data")

    options = RequestOptions(
        url=url,
        method=method.upper(),
        header=_parse_pairs(headers, ":", "--header") or None,
        data=raw if raw is not None else (_parse_pairs(fields, "=", "--data") or None),
        data_type=DataType(data_type),
    )

    try:
        result = RequestExecutor(config).execute_sync(options)
    except (AnyConnError, httpx.TransportError) as e:
        raise click.ClickException(str(e) or type(e).__name__) from e

    _print_result(result, include)
