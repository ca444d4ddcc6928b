"""Settings read from the environment.

Environment variables:
    IMAGE_FINDER_LIMIT: Default for --limit when the flag is not given
"""

import os
from typing import Optional

from .errors import UsageError

LIMIT_ENV_VAR = "IMAGE_FINDER_LIMIT"


def get_default_limit() -> Optional[int]:
    """Get the default result limit from the environment, or None if unset."""
    raw = os.environ.get(LIMIT_ENV_VAR, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if value < 0:
        raise UsageError(f"{LIMIT_ENV_VAR} must be a non-negative integer, got '{raw}'")
    return value
