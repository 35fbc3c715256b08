# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""Base utilities for serializers."""

from typing import Optional


def format_number(value: float, precision: Optional[int] = None) -> str:
    """
    Format a component for CSS or markup output.

    With ``precision`` the value is rounded to that many decimals and
    trailing zeros are dropped; otherwise the shortest round-tripping
    representation is used.
    """
    if precision is None:
        text = repr(float(value))
    else:
        text = f"{value:.{precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        text = "0"
    return text
