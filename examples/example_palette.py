# example_palette.py
from __future__ import annotations

from colorsupport import ColorLevel, supports_color

PALETTES = {
    ColorLevel.BASIC: "16 colors",
    ColorLevel.ANSI256: "256 colors",
    ColorLevel.TRUECOLOR: "24-bit RGB",
}


def palette_for_stdout() -> str:
    support = supports_color().stdout
    if not support:
        return "plain text"
    return PALETTES[support.level]


if __name__ == "__main__":
    print(palette_for_stdout())
