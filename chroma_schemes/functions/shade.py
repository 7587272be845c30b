"""Darken the colour by mixing in black.

Example:
    colours('default', 'link': 'blue' [hover: shade(20%)]);
    ->  color-mix(in srgb, #0e71b8, black 20%)
"""

from chroma_schemes.core.types import ColourLiteral, VariantFunction, css_text
from chroma_schemes.functions._common import percentage

function = VariantFunction(
    name='shade',
    help='Darken by mixing in black: shade(weight=10%).',
)


@function.apply
def apply(base, weight='10%') -> ColourLiteral:
    return ColourLiteral(f'color-mix(in srgb, {css_text(base)}, black {percentage(weight)})')
