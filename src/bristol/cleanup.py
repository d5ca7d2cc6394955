# SPDX-License-Identifier: MIT

import click
import typer

from bristol.logger import get_logger
from bristol.repository.error import StoreError
from bristol.state import AppState

logger = get_logger(__name__)


def flush_all(app_state: AppState) -> None:
    """Write every dirty repository; raises StoreError on the first failure."""
    app_state.configuration_repository.flush()
    app_state.id_map_repository.flush()
    app_state.entry_repository.flush()


def flush_and_sync(app_state: AppState) -> None:
    try:
        flush_all(app_state)
    except StoreError as e:
        logger.error("flush_on_close_failed", error=str(e))
        typer.echo(f"Error: {e}", err=True)


def register_cleanup(ctx: click.Context, app_state: AppState) -> None:
    ctx.call_on_close(lambda: flush_and_sync(app_state))
