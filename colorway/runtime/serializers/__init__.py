# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
Serializers for Colorway values.

Each serializer formats colors or gradient stops for one consumer.
Serializers never alter the values they format.
"""

from colorway.runtime.serializers.base import format_number
from colorway.runtime.serializers.block import BlockFormat, to_gradient_block
from colorway.runtime.serializers.css import rgba8_to_css, rgba8_to_hex, to_css

__all__ = [
    "to_css",
    "rgba8_to_css",
    "rgba8_to_hex",
    "to_gradient_block",
    "BlockFormat",
    "format_number",
]
