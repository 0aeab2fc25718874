"""CLI interface for the Jira Fields MCP Server."""

import logging
from typing import Literal, cast

import click
import dotenv

from jira_fields import __version__
from jira_fields.server import Server

# Configure logging
logger = logging.getLogger(__name__)


def _print_version(
    ctx: click.Context, param: click.Parameter, value: bool
) -> None:  # pragma: no cover - simple utility
    """Callback to print only the raw version and exit early."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(__version__)
    ctx.exit()


@click.command()
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the jira-fields version and exit (raw version only).",
)
@click.option(
    "--transport",
    envvar="TRANSPORT",
    default="stdio",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    help="Transport protocol (env: TRANSPORT) (stdio, sse, or streamable-http)",
)
@click.option(
    "--host",
    envvar="HOST",
    default="127.0.0.1",
    help="Host to bind (env: HOST) for sse and streamable-http transports",
)
@click.option(
    "--port",
    envvar="PORT",
    default=8000,
    type=int,
    help="Port to bind (env: PORT) for sse and streamable-http transports",
)
@click.option(
    "--catalog-root",
    envvar="JIRA_FIELDS_CATALOG_ROOT",
    default=None,
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=str),
    help="Directory of field catalog YAML files (env: JIRA_FIELDS_CATALOG_ROOT)",
)
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set the logging level",
)
def main(
    transport: str,
    host: str,
    port: int,
    catalog_root: str | None,
    log_level: str,
) -> None:
    """Run the Jira fields MCP server with configurable transport options.

    Examples:
        # Run with default STDIO transport
        jira-fields-server

        # Run with HTTP transport on custom host/port
        jira-fields-server --transport streamable-http --host 0.0.0.0 --port 9000

        # Serve catalogs regenerated from a live instance
        jira-fields-server --catalog-root ./catalogs --log-level DEBUG
    """
    # Root logger and its handlers follow --log-level
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))
    for handler in root_logger.handlers:
        handler.setLevel(getattr(logging, log_level))

    logger.debug(f"Set logging level to {log_level}")
    logger.debug(f"Starting MCP server with transport={transport}")

    match transport:
        case "stdio":
            logger.debug("Using STDIO transport")
        case _:
            logger.info(f"Using {transport} transport on {host}:{port}")

    server = Server(catalog_root=catalog_root)
    server.run(
        transport=cast(Literal["stdio", "sse", "streamable-http"], transport),
        host=host,
        port=port,
    )


def run() -> None:  # pragma: no cover - console script entry point
    # .env values feed the envvar-backed options above
    dotenv.load_dotenv(".env")
    main()


if __name__ == "__main__":
    run()
