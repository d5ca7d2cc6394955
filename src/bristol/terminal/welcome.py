# SPDX-License-Identifier: MIT

import typer

from bristol.cleanup import flush_all
from bristol.service.onboarding import complete_onboarding, get_onboarding_pages
from bristol.state import get_app_state
from bristol.terminal.error import exit_on_store_error
from bristol.view.views.onboarding import onboarding_view


def welcome(ctx: typer.Context) -> None:
    """Show the introduction to bristol again."""
    app_state = get_app_state(ctx)

    onboarding_view(get_onboarding_pages())

    with exit_on_store_error():
        complete_onboarding(app_state.configuration_repository)
        flush_all(app_state)
