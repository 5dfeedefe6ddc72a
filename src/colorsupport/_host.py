"""Read the running process: environment, argv, platform and stream TTY-ness.

Nothing here is cached; each call reads the process again, so changes to
``os.environ`` or ``sys.argv`` between calls are always seen.
"""

from __future__ import annotations

import dataclasses
import os
import platform as _platform
import sys
from collections.abc import Mapping, Sequence
from typing import Any

from colorsupport._types import StreamDescriptor


@dataclasses.dataclass(frozen=True)
class HostSnapshot:
    env: Mapping[str, str]
    argv: Sequence[str]
    platform: str
    os_release: str
    runtime_version: str


def _os_release(platform: str) -> str:
    # On Windows this is "major.minor.build", e.g. "10.0.19045".
    if platform == "win32":
        return _platform.version()
    return _platform.release()


def snapshot(
    *,
    env: Mapping[str, str] | None = None,
    argv: Sequence[str] | None = None,
    platform: str | None = None,
    os_release: str | None = None,
    runtime_version: str | None = None,
) -> HostSnapshot:
    """Fill every input not given explicitly from the running process."""
    if platform is None:
        platform = sys.platform
    return HostSnapshot(
        env=dict(os.environ) if env is None else env,
        argv=sys.argv[1:] if argv is None else argv,
        platform=platform,
        os_release=_os_release(platform) if os_release is None else os_release,
        runtime_version=_platform.python_version() if runtime_version is None else runtime_version,
    )


def stream_descriptor(stream: Any) -> StreamDescriptor:
    if isinstance(stream, StreamDescriptor):
        return stream
    if not hasattr(stream, "isatty"):
        return StreamDescriptor(is_tty=False)
    try:
        return StreamDescriptor(is_tty=bool(stream.isatty()))
    except (OSError, ValueError):
        # closed or detached stream
        return StreamDescriptor(is_tty=False)
