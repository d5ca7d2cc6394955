# SPDX-License-Identifier: MIT


class StoreError(Exception):
    """Raised when the on-disk store cannot be read or written."""

    pass
