from __future__ import annotations

import dataclasses
import sys
from collections.abc import Mapping, Sequence
from typing import Any

from colorsupport._detect import DetectOptions, create_color_support
from colorsupport._host import snapshot
from colorsupport._types import MaybeColorSupport


@dataclasses.dataclass(frozen=True)
class ColorSupportResult:
    stdout: MaybeColorSupport
    stderr: MaybeColorSupport

    def to_json(self) -> dict[str, Any]:
        return {
            "stdout": self.stdout.to_json() if self.stdout else False,
            "stderr": self.stderr.to_json() if self.stderr else False,
        }


def supports_color(
    *,
    stdout: Any = None,
    stderr: Any = None,
    options: DetectOptions | None = None,
    env: Mapping[str, str] | None = None,
    argv: Sequence[str] | None = None,
    platform: str | None = None,
    os_release: str | None = None,
    runtime_version: str | None = None,
) -> ColorSupportResult:
    """Detect color support of both standard streams.

    Called with no arguments, this reads ``sys.stdout``, ``sys.stderr`` and
    the process environment as they are right now. Each call detects afresh;
    both streams are judged against the same snapshot.
    """
    host = snapshot(
        env=env, argv=argv, platform=platform, os_release=os_release, runtime_version=runtime_version
    )
    snapshot_kwargs = {f.name: getattr(host, f.name) for f in dataclasses.fields(host)}
    return ColorSupportResult(
        stdout=create_color_support(sys.stdout if stdout is None else stdout, options, **snapshot_kwargs),
        stderr=create_color_support(sys.stderr if stderr is None else stderr, options, **snapshot_kwargs),
    )
