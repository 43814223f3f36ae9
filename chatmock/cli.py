"""
Launch the mock chat completion server.

Usage:
    chatmock --port 8080
    chatmock --host 127.0.0.1 --log-level debug --reload
"""

import os

import click
import uvicorn

from chatmock.config import settings


@click.command()
@click.option(
    '--host',
    default=settings.host,
    show_default=True,
    help='Interface to listen on'
)
@click.option(
    '--port',
    default=settings.port,
    show_default=True,
    type=click.IntRange(1, 65535),
    help='Port to listen on'
)
@click.option(
    '--log-level',
    default=settings.log_level,
    show_default=True,
    type=click.Choice(['critical', 'error', 'warning', 'info', 'debug'], case_sensitive=False),
    help='Server log level'
)
@click.option(
    '--reload',
    is_flag=True,
    help='Restart the server when source files change (development only)'
)
def main(host: str, port: int, log_level: str, reload: bool):
    """Run the mock chat completion API."""
    # Must be set before uvicorn imports chatmock.main, which configures logging
    settings.log_level = log_level.lower()
    os.environ["LOG_LEVEL"] = settings.log_level

    click.echo(f"Mock chat completion API listening on {host}:{port}")
    uvicorn.run(
        "chatmock.main:app",
        host=host,
        port=port,
        log_level=log_level.lower(),
        reload=reload
    )


if __name__ == '__main__':
    main()
