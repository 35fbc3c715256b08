# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
CSS Color 4 parsing.

Supported syntax:
- Hex: #rgb, #rgba, #rrggbb, #rrggbbaa
- rgb() / rgba(), legacy comma and modern space separated
- hsl() / hsla(), hwb()
- lab(), lch(), oklab(), oklch()
- color(<space> c0 c1 c2) for the RGB and XYZ spaces
- transparent, and named colors through a caller-supplied lookup

Any component may be ``none``. Function names and keywords are
case-insensitive. Comments are allowed wherever whitespace is.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import replace
from typing import Callable, Optional

from colorway.schema.color import AlphaColor
from colorway.schema.dynamic import DynamicColor
from colorway.schema.missing import Missing
from colorway.schema.rgba8 import Rgba8
from colorway.space.tag import ColorSpaceTag

logger = logging.getLogger(__name__)

NamedColorLookup = Callable[[str], Optional[tuple[int, int, int, int]]]


class ParseError(ValueError):
    """
    Raised for text that is not a valid color.

    Attributes:
        position: Character offset where parsing failed, if known
    """

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.position = position


# =============================================================================
# Tokens
# =============================================================================

_WS_RE = re.compile(r"(?:\s|/\*.*?\*/)*", re.DOTALL)
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)(?:[eE][+-]?\d+)?")
_IDENT_RE = re.compile(r"(?:--|-?[a-zA-Z_])[a-zA-Z0-9_-]*")
_HEX_RE = re.compile(r"[0-9a-fA-F]+")

_ANGLE_UNITS = {
    "deg": 1.0,
    "rad": 180.0 / math.pi,
    "grad": 0.9,
    "turn": 360.0,
}

# Percent reference ranges: (lightness max, a/b/chroma per percent)
_LAB_SCALES = {
    ColorSpaceTag.LAB: (100.0, 1.25),
    ColorSpaceTag.LCH: (100.0, 1.25),
    ColorSpaceTag.OKLAB: (1.0, 0.004),
    ColorSpaceTag.OKLCH: (1.0, 0.004),
}

# (kind, number, unit)
_Value = tuple[str, Optional[float], Optional[str]]


def _clamp(x: Optional[float], lo: float, hi: float) -> Optional[float]:
    if x is None:
        return None
    return min(max(x, lo), hi)


def _color_from_components(components: list[Optional[float]], cs: ColorSpaceTag) -> DynamicColor:
    missing = Missing.of(*(i for i, c in enumerate(components) if c is None))
    return DynamicColor(cs, tuple(0.0 if c is None else c for c in components), missing)


class _Parser:
    """Cursor over the input text."""

    def __init__(self, text: str) -> None:
        self.s = text
        self.ix = 0

    def error(self, message: str) -> ParseError:
        return ParseError(message, self.ix)

    def ws(self) -> bool:
        """Skip whitespace and comments; True if anything was skipped."""
        m = _WS_RE.match(self.s, self.ix)
        self.ix = m.end()
        if self.s.startswith("/*", self.ix):
            raise self.error("unclosed comment")
        return m.end() > m.start()

    def ch(self, c: str) -> bool:
        if self.s.startswith(c, self.ix):
            self.ix += len(c)
            return True
        return False

    def ident(self) -> Optional[str]:
        m = _IDENT_RE.match(self.s, self.ix)
        if m is None:
            return None
        self.ix = m.end()
        return m.group().lower()

    def at_end(self) -> bool:
        self.ws()
        return self.ix >= len(self.s)

    def value(self) -> Optional[_Value]:
        m = _NUMBER_RE.match(self.s, self.ix)
        if m is not None:
            self.ix = m.end()
            number = float(m.group())
            if self.ch("%"):
                return ("percent", number, None)
            unit = self.ident()
            if unit is not None:
                return ("dimension", number, unit)
            return ("number", number, None)
        name = self.ident()
        if name is not None:
            return ("symbol", None, name)
        return None

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    def component(self, scale: float, pct_scale: float) -> Optional[float]:
        self.ws()
        value = self.value()
        if value is not None:
            kind, number, unit = value
            if kind == "number":
                return number * scale
            if kind == "percent":
                return number * pct_scale
            if kind == "symbol" and unit == "none":
                return None
        raise self.error("unknown color component")

    def angle(self) -> Optional[float]:
        self.ws()
        value = self.value()
        if value is not None:
            kind, number, unit = value
            if kind == "number":
                return number
            if kind == "symbol" and unit == "none":
                return None
            if kind == "dimension":
                if unit not in _ANGLE_UNITS:
                    raise self.error(f"unknown angle unit {unit!r}")
                return number * _ANGLE_UNITS[unit]
        raise self.error("unknown angle")

    def comma(self, required: bool) -> None:
        self.ws()
        if required and not self.ch(","):
            raise self.error("expected comma to separate components")

    def alpha(self, legacy: bool = False) -> Optional[float]:
        """Parse an optional alpha; defaults to 1."""
        self.ws()
        if self.ch("," if legacy else "/"):
            return _clamp(self.component(1.0, 0.01), 0.0, 1.0)
        return 1.0

    def open(self) -> None:
        if not self.ch("("):
            raise self.error("expected arguments")

    def close(self) -> None:
        self.ws()
        if not self.ch(")"):
            raise self.error("expected closing parenthesis")

    # -------------------------------------------------------------------------
    # Functions
    # -------------------------------------------------------------------------

    def rgb(self) -> DynamicColor:
        self.open()
        r = _clamp(self.component(1.0 / 255.0, 0.01), 0.0, 1.0)
        self.ws()
        legacy = self.ch(",")
        g = _clamp(self.component(1.0 / 255.0, 0.01), 0.0, 1.0)
        self.comma(legacy)
        b = _clamp(self.component(1.0 / 255.0, 0.01), 0.0, 1.0)
        alpha = self.alpha(legacy)
        self.close()
        return _color_from_components([r, g, b, alpha], ColorSpaceTag.SRGB)

    def hsl(self) -> DynamicColor:
        self.open()
        h = self.angle()
        self.ws()
        legacy = self.ch(",")
        s = self.component(1.0, 1.0)
        self.comma(legacy)
        l = _clamp(self.component(1.0, 1.0), 0.0, 100.0)
        alpha = self.alpha(legacy)
        self.close()
        if s is not None:
            s = max(s, 0.0)
        return _color_from_components([h, s, l, alpha], ColorSpaceTag.HSL)

    def hwb(self) -> DynamicColor:
        self.open()
        h = self.angle()
        w = _clamp(self.component(1.0, 1.0), 0.0, 100.0)
        b = _clamp(self.component(1.0, 1.0), 0.0, 100.0)
        alpha = self.alpha()
        self.close()
        return _color_from_components([h, w, b, alpha], ColorSpaceTag.HWB)

    def lab(self, cs: ColorSpaceTag) -> DynamicColor:
        lmax, per_percent = _LAB_SCALES[cs]
        self.open()
        l = _clamp(self.component(1.0, 0.01 * lmax), 0.0, lmax)
        a = self.component(1.0, per_percent)
        b = self.component(1.0, per_percent)
        alpha = self.alpha()
        self.close()
        return _color_from_components([l, a, b, alpha], cs)

    def lch(self, cs: ColorSpaceTag) -> DynamicColor:
        lmax, per_percent = _LAB_SCALES[cs]
        self.open()
        l = _clamp(self.component(1.0, 0.01 * lmax), 0.0, lmax)
        c = self.component(1.0, per_percent)
        if c is not None:
            c = max(c, 0.0)
        h = self.angle()
        alpha = self.alpha()
        self.close()
        return _color_from_components([l, c, h, alpha], cs)

    def color(self) -> DynamicColor:
        self.open()
        self.ws()
        name = self.ident()
        if name is None:
            raise self.error("expected identifier for color space")
        try:
            cs = ColorSpaceTag.from_name(name)
        except ValueError:
            raise self.error(f"unknown color space {name!r}") from None
        if not cs.same_analogous(ColorSpaceTag.SRGB):
            raise self.error(f"color space {name!r} is not allowed in color()")
        c0 = self.component(1.0, 0.01)
        c1 = self.component(1.0, 0.01)
        c2 = self.component(1.0, 0.01)
        alpha = self.alpha()
        self.close()
        return _color_from_components([c0, c1, c2, alpha], cs)


# =============================================================================
# Entry point
# =============================================================================


def _parse_hex(digits: str) -> Rgba8:
    if not _HEX_RE.fullmatch(digits):
        raise ParseError("invalid hex digit")
    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)
    if len(digits) == 6:
        digits += "ff"
    if len(digits) != 8:
        raise ParseError("wrong number of hex digits")
    return Rgba8(*(int(digits[i:i + 2], 16) for i in range(0, 8, 2)))


def _parse(text: str, lookup: Optional[NamedColorLookup]) -> DynamicColor:
    stripped = text.strip()
    if stripped.startswith("#"):
        rgba = _parse_hex(stripped[1:])
        return DynamicColor.from_alpha_color(AlphaColor.from_rgba8(rgba))

    parser = _Parser(stripped)
    name = parser.ident()
    if name is None:
        raise parser.error("unknown color syntax")

    if name in ("rgb", "rgba"):
        color = parser.rgb()
    elif name in ("hsl", "hsla"):
        color = parser.hsl()
    elif name == "hwb":
        color = parser.hwb()
    elif name in ("lab", "oklab"):
        color = parser.lab(ColorSpaceTag.from_name(name))
    elif name in ("lch", "oklch"):
        color = parser.lch(ColorSpaceTag.from_name(name))
    elif name == "color":
        color = parser.color()
    elif name == "transparent":
        color = DynamicColor(ColorSpaceTag.SRGB, (0.0, 0.0, 0.0, 0.0))
    else:
        rgba = lookup(name) if lookup is not None else None
        if rgba is None:
            raise parser.error(f"unknown color identifier {name!r}")
        color = DynamicColor.from_alpha_color(AlphaColor.from_rgba8(Rgba8(*rgba)))
        color = replace(color, name=name)

    if not parser.at_end():
        raise parser.error("unexpected trailing characters")
    return color


def parse_color(text: str, *, lookup: Optional[NamedColorLookup] = None) -> DynamicColor:
    """
    Parse CSS color text.

    Args:
        text: A CSS Color 4 color value
        lookup: Resolves named colors to 8-bit ``(r, g, b, a)``, or None
            if the name is unknown

    Returns:
        The parsed color. Components written as ``none`` are missing.

    Raises:
        ParseError: If the text is not a supported color
    """
    try:
        return _parse(text, lookup)
    except ParseError as e:
        logger.debug("[Parse] Rejected %r: %s", text, e)
        raise
