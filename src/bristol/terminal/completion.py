from bristol.color import STOOL_COLORS
from bristol.model.entry import VOLUMES
from bristol.service.article import get_categories
from bristol.service.metrics import WINDOWS


def complete_color(incomplete: str) -> list[str]:
    """Return canonical stool colors for shell completion."""
    return [
        color for color in STOOL_COLORS if color.lower().startswith(incomplete.lower())
    ]


def complete_volume(incomplete: str) -> list[str]:
    return [volume for volume in VOLUMES if volume.startswith(incomplete.lower())]


def complete_period(incomplete: str) -> list[str]:
    return [window for window in WINDOWS if window.startswith(incomplete.lower())]


def complete_category(incomplete: str) -> list[str]:
    """Return article categories for shell completion."""
    return [
        category
        for category in get_categories()
        if category.lower().startswith(incomplete.lower())
    ]
