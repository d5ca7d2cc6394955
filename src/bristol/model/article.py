# SPDX-License-Identifier: MIT

from typing import TypedDict


class Article(TypedDict):
    title: str
    content: str
    category: str


class OnboardingPage(TypedDict):
    title: str
    description: str
