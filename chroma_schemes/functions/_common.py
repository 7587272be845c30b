"""Argument helpers shared by the built-in colour functions."""

from typing import Any

from chroma_schemes.core.types import css_text


def percentage(value: Any) -> str:
    """0.2 -> '20%', 20 -> '20%', 1 -> '1%', '20%' -> '20%'.

    Only floats in (0, 1] are fractions; integers are always percentages.
    """
    if isinstance(value, float) and 0 < value <= 1:
        return f'{value * 100:g}%'
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f'{value:g}%'
    return css_text(value)
