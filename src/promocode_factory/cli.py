"""Command-line interface for PromoCode Factory.

This module provides the CLI commands for running the administration
service and inspecting its bootstrap data.
"""

import dataclasses
import json

import click

from promocode_factory.core.config import get_settings
from promocode_factory.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version="0.1.0", prog_name="PromoCode Factory")
def cli() -> None:
    """PromoCode Factory - employee and role administration service.

    Settings are read from PROMOCODE_* environment variables and .env files.
    """


@cli.command()
@click.option(
    "--host",
    type=str,
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the administration API server.

    The stores are held in process memory, so the server always runs a
    single worker.
    """
    import uvicorn

    settings = get_settings()

    bind_host = host if host is not None else settings.host
    bind_port = port if port is not None else settings.port

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting PromoCode Factory server",
        host=bind_host,
        port=bind_port,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "promocode_factory.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command("seed-data")
def seed_data() -> None:
    """Print the sample roles and employees loaded at startup as JSON."""
    from promocode_factory.infrastructure.persistence import build_seed_data

    seed = build_seed_data()
    payload = {
        "roles": [dataclasses.asdict(role) for role in seed.roles],
        "employees": [
            {**dataclasses.asdict(employee), "full_name": employee.full_name}
            for employee in seed.employees
        ],
    }
    click.echo(json.dumps(payload, indent=2, default=str, ensure_ascii=False))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
