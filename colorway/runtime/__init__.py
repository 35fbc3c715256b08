# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
Text edges for Colorway.

Parsing CSS color text into ``DynamicColor`` and serializing colors and
gradient stops back out. The color engine itself never touches text.
"""

from colorway.runtime.parse import ParseError, parse_color
from colorway.runtime.serializers import (
    BlockFormat,
    rgba8_to_css,
    rgba8_to_hex,
    to_css,
    to_gradient_block,
)

__all__ = [
    "parse_color",
    "ParseError",
    "to_css",
    "rgba8_to_css",
    "rgba8_to_hex",
    "to_gradient_block",
    "BlockFormat",
]
