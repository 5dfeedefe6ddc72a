# example_log_file.py
from __future__ import annotations

import sys

from colorsupport import DetectOptions, create_color_support


def should_color(stream) -> bool:
    # Flags on our own command line are for stdout, not for this stream.
    return bool(create_color_support(stream, DetectOptions(sniff_flags=False)))


if __name__ == "__main__":
    with open(sys.argv[1] if len(sys.argv) > 1 else "out.log", "w") as f:
        print(f"stderr colored: {should_color(sys.stderr)}")
        print(f"log file colored: {should_color(f)}")
