# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from bristol.model.entity_id import EntityId

Volume = Literal["small", "medium", "large"]

VOLUMES: list[Volume] = ["small", "medium", "large"]


class Entry(TypedDict):
    id: Optional[EntityId]
    timestamp: Optional[pendulum.DateTime]  # When the movement happened

    # 1-7 on the stool form scale, 0 when unspecified
    stool_form: int
    color: Optional[str]  # May hold a legacy synonym, see bristol.color
    volume: Optional[Volume]

    has_pain: bool
    has_blood: bool
    has_mucus: bool
    comment: Optional[str]

    created: pendulum.DateTime
