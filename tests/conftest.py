"""Shared fixtures for colorsupport tests."""

from __future__ import annotations

import sys

import pytest

from colorsupport._detect import DetectOptions, create_color_support
from colorsupport._types import StreamDescriptor

TTY = StreamDescriptor(is_tty=True)
PIPE = StreamDescriptor(is_tty=False)

# Every variable the detector reads.
COLOR_ENV_VARS = (
    "FORCE_COLOR", "NO_COLOR", "TERM", "COLORTERM", "TERM_PROGRAM", "TERM_PROGRAM_VERSION",
    "CI", "CI_NAME", "GITHUB_ACTIONS", "GITEA_ACTIONS", "CIRCLECI", "TRAVIS", "APPVEYOR",
    "GITLAB_CI", "BUILDKITE", "DRONE", "TEAMCITY_VERSION", "TF_BUILD", "AGENT_NAME",
)


@pytest.fixture
def detect():
    """Detect with a clean Linux TTY unless told otherwise.

    Mirrors a fresh process: no environment, no argv, a terminal on stdout.
    """

    def _detect(
        env: dict[str, str] | None = None,
        argv: list[str] | None = None,
        *,
        is_tty: bool = True,
        platform: str = "linux",
        os_release: str = "6.1.0",
        runtime_version: str = "3.12.1",
        sniff_flags: bool = True,
    ):
        return create_color_support(
            TTY if is_tty else PIPE,
            DetectOptions(sniff_flags=sniff_flags),
            env=env or {},
            argv=argv or [],
            platform=platform,
            os_release=os_release,
            runtime_version=runtime_version,
        )

    return _detect


@pytest.fixture
def clean_process(monkeypatch):
    """Strip color variables from the real environment and empty sys.argv."""
    for name in COLOR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(sys, "argv", ["prog"])
    return monkeypatch


class FakeStream:
    def __init__(self, tty: bool) -> None:
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty


@pytest.fixture
def make_stream():
    """Factory for stream-like objects answering ``isatty()``."""
    return FakeStream
