"""Token lifetime parsing"""
import math
import re
from typing import Union

DEFAULT_EXPIRES_IN = 3600

_DURATION_RE = re.compile(r"^(\d+(?:\.\d+)?)([smhd])$", re.IGNORECASE)
_UNIT_SECONDS = {"s": 1, "m": 60, "h": 3600, "d": 86400}


def expires_in_seconds(value: Union[int, float, str, None]) -> int:
    """Convert a lifetime setting to whole seconds.

    Accepts a number of seconds (``3600``, ``"3600"``) or a string such as
    ``"15m"``, ``"2h"`` or ``"7D"``. Anything else falls back to one hour.
    """
    if isinstance(value, bool):
        return DEFAULT_EXPIRES_IN

    if isinstance(value, (int, float)):
        return _whole_seconds(value)

    if isinstance(value, str):
        text = value.strip()
        try:
            return _whole_seconds(float(text))
        except ValueError:
            pass

        match = _DURATION_RE.match(text)
        if not match:
            return DEFAULT_EXPIRES_IN
        amount = float(match.group(1))
        unit = match.group(2).lower()
        return round(amount * _UNIT_SECONDS[unit])

    return DEFAULT_EXPIRES_IN


def _whole_seconds(value: float) -> int:
    # nan/inf cannot be a lifetime
    if not math.isfinite(value):
        return DEFAULT_EXPIRES_IN
    return round(value)
