# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from bristol.cleanup import register_cleanup
from bristol.initialize import initialize
from bristol.service.onboarding import (
    complete_onboarding,
    get_onboarding_pages,
    needs_onboarding,
)
from bristol.terminal import article, configuration, entry, reminder, view
from bristol.terminal.custom_typer import OrderedAliasedTyperGroup
from bristol.terminal.error import exit_on_store_error
from bristol.terminal.welcome import welcome
from bristol.view import state as view_state
from bristol.view.views.onboarding import onboarding_view

WELCOME_COMMAND = "welcome, w"

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Bristol - Bowel movement diary on the Bristol stool scale",
    no_args_is_help=True,
)
app.add_typer(entry.app, name="entry, e", help="Record, list and delete entries")
app.add_typer(view.app, name="view, v", help="Calendar, statistics and profile")
app.add_typer(article.app, name="article, a", help="Articles on digestive health")
app.add_typer(reminder.app, name="reminder, r", help="Daily reminder")
app.add_typer(configuration.app, name="config, c", help="Settings")
app.command(name=WELCOME_COMMAND)(welcome)


@app.callback()
def main_callback(
    ctx: typer.Context,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    Bristol - Bowel movement diary on the Bristol stool scale

    Global options that apply to all commands.
    """
    with exit_on_store_error():
        app_state = initialize()
    ctx.obj = app_state
    register_cleanup(ctx, app_state)

    if no_header:
        view_state.set_show_header(False)

    if ctx.invoked_subcommand != WELCOME_COMMAND:
        with exit_on_store_error():
            if needs_onboarding(app_state.configuration_repository):
                onboarding_view(get_onboarding_pages())
                complete_onboarding(app_state.configuration_repository)


def run() -> None:
    app()
