"""Colour keyword vocabulary and the compressed-output safety check.

Compressed output turns colour keywords into their shortest hex form. A few
keywords share a hex value with another spelling (gray/grey and friends), so
once compressed the original name can't be recovered. Those keywords must be
quoted to be stored faithfully.

The keyword table is Pillow's CSS named-colour map.
"""

from collections import defaultdict

from PIL import ImageColor

from chroma_schemes.core.errors import DangerousKeywordError
from chroma_schemes.core.types import ColourLiteral, Keyword


def _to_hex(name: str) -> str:
    r, g, b = ImageColor.getrgb(name)[:3]
    return f'#{r:02x}{g:02x}{b:02x}'


def compress_hex(hex_value: str) -> str:
    """Return the shortest hex spelling: '#778899' -> '#789'."""
    digits = hex_value.lstrip('#').lower()
    if len(digits) == 6 and digits[0::2] == digits[1::2]:
        return '#' + digits[0::2]
    return '#' + digits


KEYWORDS: dict[str, str] = {name.lower(): _to_hex(name) for name in list(ImageColor.colormap)}

_by_hex: dict[str, set[str]] = defaultdict(set)
for _name, _hex in KEYWORDS.items():
    _by_hex[_hex].add(_name)

# keyword -> the other keywords that compress to the same hex
AMBIGUOUS: dict[str, frozenset[str]] = {
    name: frozenset(group - {name}) for group in _by_hex.values() if len(group) > 1 for name in group
}
_AMBIGUOUS_HEX = {_hex for _hex, group in _by_hex.items() if len(group) > 1}


def _keyword_name(value: object) -> str | None:
    if isinstance(value, Keyword):
        return value.name.lower()
    if isinstance(value, str):
        return value.lower()
    return None


def is_keyword(value: object) -> bool:
    """True for a colour keyword token or a string naming one."""
    name = _keyword_name(value)
    return name is not None and name in KEYWORDS


def is_dangerous(value: object, output_is_compressed: bool = False) -> bool:
    """True when `value` would not survive compressed output unambiguously.

    Quoted strings are always safe. In compressed mode a literal whose hex
    matches an ambiguous keyword is dangerous too: the host has already
    replaced the keyword and its spelling is lost.
    """
    if isinstance(value, Keyword):
        return value.name.lower() in AMBIGUOUS
    if output_is_compressed and isinstance(value, ColourLiteral):
        try:
            return _to_hex(value.value) in _AMBIGUOUS_HEX
        except ValueError:
            return False
    return False


def check(keyword: str, is_quoted: bool, output_is_compressed: bool, at_definition: bool = True) -> None:
    """Raise DangerousKeywordError for an unquoted ambiguous keyword.

    At definition time this always fails, whatever the output mode; at output
    time only compressed output is affected.
    """
    name = keyword.lower()
    if is_quoted or name not in AMBIGUOUS:
        return
    if not (at_definition or output_is_compressed):
        return

    hex_value = compress_hex(KEYWORDS[name])
    if output_is_compressed:
        message = (
            f'The colour keyword {keyword} is converted into the hexadecimal value, {hex_value}, by compressed '
            f'output and it is not possible to determine if the original name was '
            f'{_spellings(name)}. To prevent this error, use quotes around the keyword.'
        )
    else:
        message = (
            f'The colour keyword {keyword} will be converted into a hexadecimal value when the "compressed" '
            f'output style is used and it will not be possible to determine if the original name was '
            f"{_spellings(name)}. To prevent this error, quote the keyword like this: '{keyword}'."
        )
    raise DangerousKeywordError(keyword, hex_value, message)


def _spellings(name: str) -> str:
    names = [name, *sorted(AMBIGUOUS[name])]
    return ', '.join(names[:-1]) + ' or ' + names[-1]
