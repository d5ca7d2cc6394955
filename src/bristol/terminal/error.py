# SPDX-License-Identifier: MIT

from contextlib import contextmanager
from typing import Iterator

import typer

from bristol.logger import get_logger
from bristol.repository.error import StoreError

logger = get_logger(__name__)


@contextmanager
def exit_on_store_error() -> Iterator[None]:
    """Report a failed read or write of the data files and exit with code 1."""
    try:
        yield
    except StoreError as e:
        logger.error("command_failed", error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
