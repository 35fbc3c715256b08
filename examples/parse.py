# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
Parse a CSS color and print it in a few forms.

Typical usage::

    python examples/parse.py 'oklab(0.5 0.2 0)'
    python examples/parse.py 'oklch(0.6 0.2 30)' --space display-p3
"""

import argparse
import sys

from colorway import ColorSpaceTag, ParseError, Srgb, parse_color
from colorway.runtime import rgba8_to_hex


if __name__ == '__main__':
    parser = argparse.ArgumentParser(
        description='Parse a CSS color and show it converted.'
    )
    parser.add_argument('color', help='CSS color text, e.g. "oklab(0.5 0.2 0)"')
    parser.add_argument(
        '--space', '-s',
        default='srgb',
        help='Color space to convert to (CSS name, default srgb)'
    )
    args = parser.parse_args()

    try:
        color = parse_color(args.color)
        target = ColorSpaceTag.from_name(args.space)
    except ParseError as e:
        print(f"Error parsing color: {e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"display: {color.to_css()}")
    print(f"debug:   {color!r}")
    print(f"{target.value}: {color.convert(target).to_css()}")
    print(f"hex:     {rgba8_to_hex(color.to_alpha_color(Srgb).to_rgba8())}")
