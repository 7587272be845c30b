"""Lighten the colour by mixing in white.

Example:
    colours('default', 'link': 'blue' [visited: tint(20%)]);
    ->  color-mix(in srgb, #0e71b8, white 20%)
"""

from chroma_schemes.core.types import ColourLiteral, VariantFunction, css_text
from chroma_schemes.functions._common import percentage

function = VariantFunction(
    name='tint',
    help='Lighten by mixing in white: tint(weight=10%).',
)


@function.apply
def apply(base, weight='10%') -> ColourLiteral:
    return ColourLiteral(f'color-mix(in srgb, {css_text(base)}, white {percentage(weight)})')
