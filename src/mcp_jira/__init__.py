import os

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

from .logging_config import log_operation, setup_logger

# Component loggers ("mcp-jira.adf", "mcp-jira.registry", ...) propagate here
logger = setup_logger()


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default=None,
    help="Transport type (default: TRANSPORT env var or stdio)",
)
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to listen on for HTTP transports (default: PORT env var or 8000)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind for HTTP transports (default: HOST env var or 0.0.0.0)",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--jira-url",
    help="Jira URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-username", help="Jira account email")
@click.option("--jira-token", help="Jira API token")
@click.option(
    "--registry-url",
    help="Project registry URL used to resolve X-API-Key headers to Jira credentials",
)
@click.option(
    "--read-only",
    is_flag=True,
    default=False,
    help="Disable all write tools (same as READ_ONLY_MODE=true)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str | None,
    port: int | None,
    host: str | None,
    log_dir: str | None,
    log_to_file: bool,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    registry_url: str | None,
    read_only: bool,
) -> None:
    """MCP Jira Server - Jira Cloud tools for MCP with Markdown to ADF conversion

    Serves one Jira site from environment credentials, or many tenants whose
    credentials are looked up in a project registry by X-API-Key.
    """
    # Load environment variables from file if specified, otherwise try default .env
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    setup_logger(
        name="mcp-jira",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    with log_operation(logger, "application_startup", app_version=__version__):
        if env_file:
            logger.info(f"Loaded environment from file: {env_file}")

        # Command line arguments override the environment
        if jira_url:
            os.environ["JIRA_URL"] = jira_url
        if jira_username:
            os.environ["JIRA_USERNAME"] = jira_username
        if jira_token:
            os.environ["JIRA_API_TOKEN"] = jira_token
        if registry_url:
            os.environ["PROJECT_REGISTRY_URL"] = registry_url
        if read_only:
            os.environ["READ_ONLY_MODE"] = "true"

        final_transport = transport or os.getenv("TRANSPORT", "stdio").lower()
        if final_transport not in ("stdio", "sse", "streamable-http"):
            raise click.BadParameter(
                f"Unsupported transport '{final_transport}'", param_hint="TRANSPORT"
            )
        final_port = port if port is not None else int(os.getenv("PORT", "8000"))
        final_host = host or os.getenv("HOST", "0.0.0.0")

        from . import servers

        logger.info(f"Starting MCP Jira v{__version__} with {final_transport} transport")

    servers.run_server(transport=final_transport, port=final_port, host=final_host)


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
