from __future__ import annotations

import argparse
import json
import logging
import sys

from colorsupport._facade import supports_color
from colorsupport._types import MaybeColorSupport

_STREAMS = ("stdout", "stderr")


def _describe(support: MaybeColorSupport) -> str:
    if not support:
        return "no color"
    caps = ["basic"]
    if support.has_256:
        caps.append("256")
    if support.has_16m:
        caps.append("16m")
    return f"level {int(support.level)} ({', '.join(caps)})"


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    p = argparse.ArgumentParser(
        prog="colorsupport",
        description="Report the ANSI color level of stdout and stderr.",
        epilog="Color switches such as --color=256 or --no-color are passed through "
        "and affect the result, exactly as they would for a program invoked with them.",
        allow_abbrev=False,
    )
    p.add_argument("--stream", choices=(*_STREAMS, "both"), default="both", help="Which stream(s) to report")
    p.add_argument("--json", action="store_true", help="Output results as JSON to stdout")
    p.add_argument("-v", "--verbose", action="store_true", help="Log which rule decided each level")
    args, _passthrough = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")

    # The full argv is sniffed, so "--" and everything after it keep their meaning.
    result = supports_color(argv=argv)
    selected = _STREAMS if args.stream == "both" else (args.stream,)

    if args.json:
        data = result.to_json()
        print(json.dumps({name: data[name] for name in selected}, indent=2))
    else:
        for name in selected:
            print(f"{name}: {_describe(getattr(result, name))}")

    return 0 if all(getattr(result, name) for name in selected) else 1
