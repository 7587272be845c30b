"""Set the colour's opacity with CSS relative colour syntax.

Example:
    colours('default', 'overlay': 'black' [faded: alpha(0.5)]);
    ->  rgb(from black r g b / 0.5)
"""

from chroma_schemes.core.types import ColourLiteral, VariantFunction, css_text

function = VariantFunction(
    name='alpha',
    help='Set opacity: alpha(opacity), e.g. alpha(0.5) or alpha(50%).',
)


@function.apply
def apply(base, opacity) -> ColourLiteral:
    return ColourLiteral(f'rgb(from {css_text(base)} r g b / {css_text(opacity)})')
