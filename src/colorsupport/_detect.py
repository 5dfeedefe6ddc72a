from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from colorsupport._classify import ClassifierInput, classify
from colorsupport._flags import interpret_flags
from colorsupport._force import FORCE_COLOR_VAR, resolve_force_color
from colorsupport._host import snapshot, stream_descriptor
from colorsupport._types import Directive, MaybeColorSupport, StreamDescriptor, translate_level

logger = logging.getLogger(__name__)

NO_COLOR_VAR = "NO_COLOR"


@dataclasses.dataclass(frozen=True)
class DetectOptions:
    sniff_flags: bool = True


def _forcing(force: Directive | None, flag: Directive | None) -> Directive | None:
    if force is None:
        return flag
    # An explicit flag level may still raise a FORCE_COLOR floor.
    if flag is not None and flag.level is not None and flag.level > force.floor:
        return flag
    return force


def detect_level(
    stream: StreamDescriptor,
    *,
    env: Mapping[str, str],
    argv: Sequence[str],
    platform: str,
    os_release: str = "",
    runtime_version: str = "",
    sniff_flags: bool = True,
) -> int:
    """Color level 0..3 for one stream, from explicit inputs only.

    Precedence, highest first: an ``off`` from FORCE_COLOR or a flag; a
    FORCE_COLOR directive; a flag directive; NO_COLOR; the classifier.
    Directives set a floor and switch off the TTY gate, the classifier may
    still raise the level above it.
    """
    force = resolve_force_color(env.get(FORCE_COLOR_VAR))
    flag = interpret_flags(argv) if sniff_flags else None
    logger.debug("directives: force_color=%r flag=%r sniff_flags=%s", force, flag, sniff_flags)

    if (force is not None and force.is_off) or (flag is not None and flag.is_off):
        return 0

    forced = _forcing(force, flag)
    if forced is None and NO_COLOR_VAR in env:
        logger.debug("%s is set, no color", NO_COLOR_VAR)
        return 0

    return classify(
        ClassifierInput(
            is_tty=stream.is_tty,
            platform=platform,
            env=env,
            os_release=os_release,
            runtime_version=runtime_version,
            forced=forced,
        )
    )


def create_color_support(
    stream: Any,
    options: DetectOptions | None = None,
    *,
    env: Mapping[str, str] | None = None,
    argv: Sequence[str] | None = None,
    platform: str | None = None,
    os_release: str | None = None,
    runtime_version: str | None = None,
) -> MaybeColorSupport:
    """Return the color support of ``stream``, or ``False``.

    ``stream`` is a :class:`StreamDescriptor` or any object with ``isatty()``.
    Inputs left as ``None`` are read from the running process on this call.
    """
    options = options or DetectOptions()
    host = snapshot(
        env=env, argv=argv, platform=platform, os_release=os_release, runtime_version=runtime_version
    )
    level = detect_level(
        stream_descriptor(stream),
        env=host.env,
        argv=host.argv,
        platform=host.platform,
        os_release=host.os_release,
        runtime_version=host.runtime_version,
        sniff_flags=options.sniff_flags,
    )
    return translate_level(level)
