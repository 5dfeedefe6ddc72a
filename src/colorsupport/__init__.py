from colorsupport._cli import main
from colorsupport._classify import RULES, ClassifierInput, classify
from colorsupport._detect import DetectOptions, create_color_support, detect_level
from colorsupport._facade import ColorSupportResult, supports_color
from colorsupport._flags import interpret_flags
from colorsupport._force import resolve_force_color
from colorsupport._host import HostSnapshot, snapshot, stream_descriptor
from colorsupport._types import (
    ColorLevel,
    ColorSupport,
    Directive,
    MaybeColorSupport,
    StreamDescriptor,
    translate_level,
)

__all__ = [
    "RULES",
    "ClassifierInput",
    "ColorLevel",
    "ColorSupport",
    "ColorSupportResult",
    "DetectOptions",
    "Directive",
    "HostSnapshot",
    "MaybeColorSupport",
    "StreamDescriptor",
    "classify",
    "create_color_support",
    "detect_level",
    "interpret_flags",
    "main",
    "resolve_force_color",
    "snapshot",
    "stream_descriptor",
    "supports_color",
    "translate_level",
]
