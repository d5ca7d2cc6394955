# SPDX-License-Identifier: MIT

MIN_STOOL_FORM = 1
MAX_STOOL_FORM = 7
UNSPECIFIED_STOOL_FORM = 0
DEFAULT_STOOL_FORM = 4

STOOL_FORM_DESCRIPTIONS: dict[int, str] = {
    1: "Separate hard lumps",
    2: "Sausage-shaped, but lumpy",
    3: "Sausage-shaped, with cracks",
    4: "Smooth and soft",
    5: "Soft blobs",
    6: "Mushy",
    7: "Watery",
}


def is_specified_stool_form(stool_form: int) -> bool:
    return MIN_STOOL_FORM <= stool_form <= MAX_STOOL_FORM
