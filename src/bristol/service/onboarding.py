# SPDX-License-Identifier: MIT

from importlib.resources import files
from typing import cast

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from bristol.model.article import OnboardingPage
from bristol.repository.configuration import ConfigurationRepository


def get_onboarding_pages() -> list[OnboardingPage]:
    raw = files("bristol").joinpath("data/onboarding.yaml").read_text(encoding="utf-8")
    return cast(list[OnboardingPage], load(raw, Loader=Loader))


def needs_onboarding(configuration_repository: ConfigurationRepository) -> bool:
    return not configuration_repository.get_config()["onboarding_complete"]


def complete_onboarding(configuration_repository: ConfigurationRepository) -> None:
    configuration_repository.update_config(onboarding_complete=True)
