"""Command-line color switches.

Recognized, up to the first ``--`` terminator::

    --no-color, --no-colors, --color=false, --color=never   -> off
    --color, --colors, --color=true, --color=always         -> force on
    --color=256                                             -> level 2
    --color=16m, --color=full, --color=truecolor            -> level 3

The value after ``=`` is matched case-insensitively. The last recognized
switch before the terminator wins.
"""

from __future__ import annotations

from collections.abc import Sequence

from colorsupport._types import FORCE_ON, OFF, Directive

TERMINATOR = "--"

_BARE_FLAGS: dict[str, Directive] = {
    "--no-color": OFF,
    "--no-colors": OFF,
    "--color": FORCE_ON,
    "--colors": FORCE_ON,
}

_COLOR_VALUES: dict[str, Directive] = {
    "false": OFF,
    "never": OFF,
    "true": FORCE_ON,
    "always": FORCE_ON,
    "256": Directive(2),
    "16m": Directive(3),
    "full": Directive(3),
    "truecolor": Directive(3),
}


def _before_terminator(argv: Sequence[str]) -> Sequence[str]:
    try:
        return argv[: list(argv).index(TERMINATOR)]
    except ValueError:
        return argv


def _directive_for(token: str) -> Directive | None:
    if token in _BARE_FLAGS:
        return _BARE_FLAGS[token]
    name, sep, value = token.partition("=")
    if sep and name == "--color":
        return _COLOR_VALUES.get(value.lower())
    return None


def interpret_flags(argv: Sequence[str]) -> Directive | None:
    directive: Directive | None = None
    for token in _before_terminator(argv):
        found = _directive_for(token)
        if found is not None:
            directive = found
    return directive
