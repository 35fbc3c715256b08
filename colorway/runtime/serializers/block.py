# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
Gradient stop block serializer.

Formats the stops produced by ``colorway.ramp.gradient`` as a CSS
``linear-gradient()``, a JSON object, or an XML block, for handing to a
renderer or stylesheet.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Iterable, Optional

from colorway.runtime.serializers.base import format_number
from colorway.runtime.serializers.css import to_css
from colorway.schema.color import PremulColor
from colorway.schema.dynamic import DynamicColor

Stop = tuple[float, PremulColor]


class BlockFormat(Enum):
    """Block format options."""

    CSS = "css"
    JSON = "json"
    XML = "xml"


def to_gradient_block(
    stops: Iterable[Stop],
    *,
    format: BlockFormat = BlockFormat.CSS,
    precision: Optional[int] = 4,
    tag_name: str = "gradient",
) -> str:
    """Serialize gradient stops as a block.

    Args:
        stops: ``(t, PremulColor)`` pairs, all in one color space
        format: Block format (CSS, JSON, or XML)
        precision: Decimal places for numbers (shortest exact form if None)
        tag_name: Wrapper key (JSON) or element name (XML)

    Returns:
        Formatted block string.

    Example (XML)::

        <gradient space="srgb" stops="2">
          <stop t="0" c0="1" c1="0" c2="0" alpha="1"/>
          <stop t="1" c0="0" c1="0" c2="1" alpha="1"/>
        </gradient>
    """
    stops = list(stops)
    if not stops:
        raise ValueError("A gradient needs at least one stop")
    cs = stops[0][1].cs
    for _, color in stops:
        if color.cs is not cs:
            raise ValueError(
                f"Stops mix color spaces: {cs.__name__} and {color.cs.__name__}"
            )

    if format == BlockFormat.CSS:
        return _to_css(stops, precision)
    elif format == BlockFormat.JSON:
        return _to_json(stops, precision, tag_name)
    else:
        return _to_xml(stops, precision, tag_name)


def _space_name(color: PremulColor) -> str:
    """CSS identifier of the stop space; untagged spaces are written as linear sRGB."""
    tag = color.cs.TAG
    if tag is None:
        return DynamicColor.from_alpha_color(color.un_premultiply()).cs.value
    return tag.value


def _round(value: float, precision: Optional[int]) -> float:
    return value if precision is None else round(value, precision)


def _to_css(stops: list[Stop], precision: Optional[int]) -> str:
    """Generate a CSS linear-gradient() interpolating in the stop space."""
    parts = [f"in {_space_name(stops[0][1])}"]
    for t, color in stops:
        css = to_css(DynamicColor.from_alpha_color(color.un_premultiply()), precision)
        parts.append(f"{css} {format_number(t * 100.0, precision)}%")
    return f"linear-gradient({', '.join(parts)})"


def _to_json(stops: list[Stop], precision: Optional[int], tag_name: str) -> str:
    """Generate JSON block with wrapper. Components stay premultiplied."""
    data = {
        "space": _space_name(stops[0][1]),
        "premultiplied": True,
        "stops": [
            {
                "t": _round(t, precision),
                "components": [_round(c, precision) for c in color.components],
            }
            for t, color in stops
        ],
    }
    return json.dumps({tag_name: data}, indent=2)


def _to_xml(stops: list[Stop], precision: Optional[int], tag_name: str) -> str:
    """Generate XML block. Components are un-premultiplied."""
    lines = [
        f'<{tag_name} space="{_space_name(stops[0][1])}" stops="{len(stops)}">'
    ]
    for t, color in stops:
        c0, c1, c2, alpha = color.un_premultiply().components
        lines.append(
            f'  <stop t="{format_number(t, precision)}" '
            f'c0="{format_number(c0, precision)}" '
            f'c1="{format_number(c1, precision)}" '
            f'c2="{format_number(c2, precision)}" '
            f'alpha="{format_number(alpha, precision)}"/>'
        )
    lines.append(f"</{tag_name}>")
    return "\n".join(lines)
