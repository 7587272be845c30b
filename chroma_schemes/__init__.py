"""chroma-schemes: named colour schemes with inheritance, references and variants.

    from chroma_schemes import Chroma, ColourLiteral

    chroma = Chroma()
    chroma.add_colours('default', ('blue', ColourLiteral('#0e71b8')), ('link', 'blue'))
    chroma.define_colour_scheme('alt', 'Alternative', 'default')
    chroma.add_colours('alt', ('blue', ColourLiteral('#00f')))
    chroma.colour('link', 'alt')  # ColourLiteral('#00f')
"""

from chroma_schemes.api import (
    Chroma,
    add_colours,
    colour,
    default_chroma,
    define_colour_scheme,
    define_default_colour_scheme,
    is_colour_keyword,
    is_dangerous_colour_keyword_value,
    reset,
)
from chroma_schemes.core.errors import (
    ChromaError,
    ColourNotFoundError,
    CyclicInheritanceError,
    CyclicReferenceError,
    DangerousKeywordError,
    DuplicateSchemeError,
    FunctionNotFoundError,
    InvalidColourValueError,
    SchemeFileSyntaxError,
    SchemeNotFoundError,
)
from chroma_schemes.core.schemes import DEFAULT_SCHEME
from chroma_schemes.core.types import ColourLiteral, FunctionSpec, Keyword, VariantFunction
from chroma_schemes.core.variants import Catalogue

__all__ = [
    'DEFAULT_SCHEME',
    'Catalogue',
    'Chroma',
    'ChromaError',
    'ColourLiteral',
    'ColourNotFoundError',
    'CyclicInheritanceError',
    'CyclicReferenceError',
    'DangerousKeywordError',
    'DuplicateSchemeError',
    'FunctionNotFoundError',
    'FunctionSpec',
    'InvalidColourValueError',
    'Keyword',
    'SchemeFileSyntaxError',
    'SchemeNotFoundError',
    'VariantFunction',
    'add_colours',
    'colour',
    'default_chroma',
    'define_colour_scheme',
    'define_default_colour_scheme',
    'is_colour_keyword',
    'is_dangerous_colour_keyword_value',
    'reset',
]
