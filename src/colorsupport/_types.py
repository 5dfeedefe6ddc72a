from __future__ import annotations

import dataclasses
from enum import IntEnum
from typing import Literal


class ColorLevel(IntEnum):
    NONE = 0
    BASIC = 1  # 16 colors
    ANSI256 = 2
    TRUECOLOR = 3  # 16 million colors


@dataclasses.dataclass(frozen=True)
class ColorSupport:
    """Capabilities of a stream that supports color.

    A stream without color support is represented by ``False`` instead of a
    record, so ``if support:`` is the whole check for most callers.
    """

    level: ColorLevel

    def __post_init__(self) -> None:
        if not 1 <= int(self.level) <= 3:
            raise ValueError(f"Invalid color level: {self.level!r}. Expected 1, 2 or 3.")
        object.__setattr__(self, "level", ColorLevel(int(self.level)))

    @property
    def has_basic(self) -> bool:
        return True

    @property
    def has_256(self) -> bool:
        return self.level >= ColorLevel.ANSI256

    @property
    def has_16m(self) -> bool:
        return self.level >= ColorLevel.TRUECOLOR

    def to_json(self) -> dict[str, int | bool]:
        return {
            "level": int(self.level),
            "has_basic": self.has_basic,
            "has_256": self.has_256,
            "has_16m": self.has_16m,
        }


MaybeColorSupport = ColorSupport | Literal[False]


@dataclasses.dataclass(frozen=True)
class Directive:
    """An override parsed from a flag or from FORCE_COLOR.

    ``level`` is 0 for "off", 1..3 for an explicit level and ``None`` for
    "force on" without a level. "No directive" is ``None`` at the call sites.
    """

    level: int | None = None

    def __post_init__(self) -> None:
        if self.level is not None and not 0 <= self.level <= 3:
            raise ValueError(f"Invalid directive level: {self.level!r}. Expected None or 0..3.")

    @property
    def is_off(self) -> bool:
        return self.level == 0

    @property
    def floor(self) -> int:
        return 1 if self.level is None else self.level


OFF = Directive(0)
FORCE_ON = Directive(None)


@dataclasses.dataclass(frozen=True)
class StreamDescriptor:
    is_tty: bool


def translate_level(level: int) -> MaybeColorSupport:
    if level <= 0:
        return False
    return ColorSupport(ColorLevel(min(level, 3)))
