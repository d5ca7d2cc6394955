# SPDX-License-Identifier: MIT

from bristol.color import DEFAULT_COLOR
from bristol.model.entry import Entry
from bristol.model.stool_form import DEFAULT_STOOL_FORM
from bristol.time import now_utc


def get_entry_template() -> Entry:
    now = now_utc()
    return {
        "id": None,
        "timestamp": now,
        "stool_form": DEFAULT_STOOL_FORM,
        "color": DEFAULT_COLOR,
        "volume": "medium",
        "has_pain": False,
        "has_blood": False,
        "has_mucus": False,
        "comment": None,
        "created": now,
    }
