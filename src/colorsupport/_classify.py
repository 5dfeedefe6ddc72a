"""Base color level of a stream, as an ordered chain of rules.

Each rule looks at a :class:`ClassifierInput` and either decides a level or
returns ``None`` to pass to the next rule. :data:`RULES` lists them in
precedence order; the first decision wins. A forcing directive sets a floor
that no rule can go below, and disables the TTY gate.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import Callable, Mapping

from colorsupport._types import Directive

logger = logging.getLogger(__name__)

# Python >= 3.6 writes to the Windows console through WriteConsoleW, which
# passes escape sequences to consoles that understand them.
MIN_WINDOWS_RUNTIME: tuple[int, int] = (3, 6)

WINDOWS_256_BUILD = 10_586
WINDOWS_TRUECOLOR_BUILD = 14_931

TRUECOLOR_CI_VARS: tuple[str, ...] = ("GITHUB_ACTIONS", "GITEA_ACTIONS", "CIRCLECI")
BASIC_CI_VARS: tuple[str, ...] = ("TRAVIS", "APPVEYOR", "GITLAB_CI", "BUILDKITE", "DRONE")
BASIC_CI_NAMES: frozenset[str] = frozenset({"codeship"})

_FALSY_VALUES: frozenset[str] = frozenset({"", "0", "false"})

_TEAMCITY_COLOR_VERSION = re.compile(r"^(9\.(0*[1-9]\d*)\.|\d{2,}\.)")
_TERM_256 = re.compile(r"-256(color)?$", re.IGNORECASE)
_TERM_BASIC = re.compile(r"^screen|^xterm|^vt100|^vt220|^rxvt|color|ansi|cygwin|linux", re.IGNORECASE)
_LEADING_INT = re.compile(r"\s*(\d{1,16})")


@dataclasses.dataclass(frozen=True)
class ClassifierInput:
    is_tty: bool
    platform: str
    env: Mapping[str, str]
    os_release: str = ""
    runtime_version: str = ""
    forced: Directive | None = None

    @property
    def floor(self) -> int:
        return 0 if self.forced is None else self.forced.floor

    @property
    def term(self) -> str:
        return self.env.get("TERM", "")


Rule = Callable[[ClassifierInput], "int | None"]


def _leading_int(text: str) -> int | None:
    m = _LEADING_INT.match(text)
    return int(m.group(1)) if m else None


def _version_tuple(text: str) -> tuple[int, ...] | None:
    parts = []
    for piece in text.split(".")[:2]:
        n = _leading_int(piece)
        if n is None:
            return None
        parts.append(n)
    return tuple(parts) if parts else None


# ---------------------------------------------------------------------------
# Rules, in precedence order
# ---------------------------------------------------------------------------

def azure_pipelines(ctx: ClassifierInput) -> int | None:
    # Pipeline logs render ANSI even though the agent's output is a pipe.
    if "TF_BUILD" in ctx.env and "AGENT_NAME" in ctx.env:
        return 1
    return None


def tty_gate(ctx: ClassifierInput) -> int | None:
    if not ctx.is_tty and ctx.forced is None:
        return 0
    return None


def dumb_terminal(ctx: ClassifierInput) -> int | None:
    if ctx.term == "dumb":
        return ctx.floor
    return None


def windows_console(ctx: ClassifierInput) -> int | None:
    if ctx.platform != "win32":
        return None
    runtime = _version_tuple(ctx.runtime_version)
    if runtime is None or runtime < MIN_WINDOWS_RUNTIME:
        return 1
    parts = ctx.os_release.split(".")
    if len(parts) < 3:
        return 1
    major, build = _leading_int(parts[0]), _leading_int(parts[2])
    if major is None or build is None or major < 10 or build < WINDOWS_256_BUILD:
        return 1
    return 3 if build >= WINDOWS_TRUECOLOR_BUILD else 2


def ci_service(ctx: ClassifierInput) -> int | None:
    if ctx.env.get("CI", "").lower() in _FALSY_VALUES:
        return None
    if any(name in ctx.env for name in TRUECOLOR_CI_VARS):
        return 3
    if any(name in ctx.env for name in BASIC_CI_VARS) or ctx.env.get("CI_NAME") in BASIC_CI_NAMES:
        return 1
    return ctx.floor


def teamcity(ctx: ClassifierInput) -> int | None:
    version = ctx.env.get("TEAMCITY_VERSION")
    if version is None:
        return None
    return 1 if _TEAMCITY_COLOR_VERSION.match(version) else 0


def colorterm_truecolor(ctx: ClassifierInput) -> int | None:
    if ctx.env.get("COLORTERM") == "truecolor":
        return 3
    return None


def kitty(ctx: ClassifierInput) -> int | None:
    if ctx.term == "xterm-kitty":
        return 3
    return None


def terminal_program(ctx: ClassifierInput) -> int | None:
    program = ctx.env.get("TERM_PROGRAM")
    if program == "iTerm.app":
        major = _leading_int(ctx.env.get("TERM_PROGRAM_VERSION", "").split(".")[0])
        return 3 if major is not None and major >= 3 else 2
    if program == "Apple_Terminal":
        return 2
    return None


def term_256(ctx: ClassifierInput) -> int | None:
    if _TERM_256.search(ctx.term):
        return 2
    return None


def term_basic(ctx: ClassifierInput) -> int | None:
    if _TERM_BASIC.search(ctx.term):
        return 1
    return None


def colorterm_present(ctx: ClassifierInput) -> int | None:
    if "COLORTERM" in ctx.env:
        return 1
    return None


def fallback(ctx: ClassifierInput) -> int | None:
    return ctx.floor


RULES: tuple[Rule, ...] = (
    azure_pipelines,
    tty_gate,
    dumb_terminal,
    windows_console,
    ci_service,
    teamcity,
    colorterm_truecolor,
    kitty,
    terminal_program,
    term_256,
    term_basic,
    colorterm_present,
    fallback,
)


def classify(ctx: ClassifierInput) -> int:
    """Return the color level 0..3 for ``ctx``, never below its floor."""
    for rule in RULES:
        level = rule(ctx)
        if level is not None:
            logger.debug("rule %s decided level %d (floor %d)", rule.__name__, level, ctx.floor)
            return max(level, ctx.floor)
    return ctx.floor
