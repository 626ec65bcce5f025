"""The entrypoint for the Padhang Theme MCP Server."""

from logging import Logger
from typing import Literal

import click
from fastmcp import FastMCP
from fastmcp.server.middleware.logging import LoggingMiddleware
from fastmcp.utilities.logging import configure_logging, get_logger

from padhang_theme.hooks.registry import HookRegistry
from padhang_theme.host.static import StaticHost
from padhang_theme.servers.theme import ThemeServer
from padhang_theme.settings import ThemeSettings
from padhang_theme.theme import PadhangTheme

configure_logging()

logger: Logger = get_logger(name=__name__)


def new_mcp_server(settings: ThemeSettings | None = None) -> FastMCP[None]:
    settings = settings or ThemeSettings.from_env()

    registry: HookRegistry = HookRegistry(logger=logger)
    host: StaticHost = StaticHost(site_url=settings.site.url, registry=registry, logger=logger)

    theme: PadhangTheme = PadhangTheme(host=host, settings=settings, registry=registry, logger=logger)
    _ = theme.register_hooks()

    logger.info(f"Serving theme for {settings.site.name or settings.site.url} with the {settings.fonts_kit.value} font kit")

    mcp: FastMCP[None] = FastMCP[None](
        name="Padhang Theme",
        middleware=[LoggingMiddleware(include_payloads=True, logger=logger)],
    )

    return ThemeServer(theme=theme, logger=logger).register_tools(fastmcp=mcp)


mcp: FastMCP[None] = new_mcp_server()


@click.command()
@click.option(
    "--mcp-transport",
    type=click.Choice(["stdio", "streamable-http"]),
    default="stdio",
    help="The transport to run the MCP server on",
)
def run_mcp(mcp_transport: Literal["stdio", "streamable-http"]):
    mcp.run(transport=mcp_transport)


if __name__ == "__main__":
    run_mcp()
