"""Mix another colour into the colour.

Emits a CSS color-mix() expression; the blending itself is left to the
browser. `weight` is the share of the other colour (default 50%).

Example:
    colours('default', 'accent': 'blue' [muted: mix('grey', 30%)]);
    ->  color-mix(in srgb, #0e71b8, grey 30%)
"""

from chroma_schemes.core.types import ColourLiteral, VariantFunction, css_text
from chroma_schemes.functions._common import percentage

function = VariantFunction(
    name='mix',
    help='Mix another colour into the colour: mix(other, weight=50%).',
)


@function.apply
def apply(base, other, weight='50%') -> ColourLiteral:
    return ColourLiteral(f'color-mix(in srgb, {css_text(base)}, {css_text(other)} {percentage(weight)})')
