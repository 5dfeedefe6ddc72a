from __future__ import annotations

import re

from colorsupport._types import FORCE_ON, OFF, Directive

FORCE_COLOR_VAR = "FORCE_COLOR"

# Leading integer, as integer parsing of "2abc" yields 2.
_INT_PREFIX = re.compile(r"\s*([+-]?\d{1,16})")


def resolve_force_color(value: str | None) -> Directive | None:
    """Interpret the raw FORCE_COLOR value.

    Returns ``None`` when the variable is absent or holds text that is not a
    number, so an unreadable value never turns color on.
    """
    if value is None:
        return None
    if value in ("", "true", "1"):
        return FORCE_ON
    if value == "false":
        return OFF
    m = _INT_PREFIX.match(value)
    if m is None:
        return None
    level = int(m.group(1))
    return Directive(max(0, min(level, 3)))
