"""Exceptions raised by chroma-schemes.

Every error names the offending scheme, colour, function or keyword in its
message and keeps them as attributes for callers that want to react.
"""


class ChromaError(Exception):
    """Base class for every chroma-schemes failure."""


class SchemeNotFoundError(ChromaError, LookupError):
    def __init__(self, scheme: str, message: str | None = None):
        self.scheme = scheme
        super().__init__(message or f'The colour scheme "{scheme}" was not found.')


class DuplicateSchemeError(ChromaError, ValueError):
    def __init__(self, scheme: str):
        self.scheme = scheme
        super().__init__(f'The colour scheme "{scheme}" already exists.')


class ColourNotFoundError(ChromaError, LookupError):
    """A colour name did not match any definition in the scheme ancestry.

    `referrer` is the colour being added or resolved when the missing colour
    was reached through a reference.
    """

    def __init__(self, colour: str, referrer: str | None = None, adding: bool = False):
        self.colour = colour
        self.referrer = referrer
        if referrer is None:
            message = f'The colour "{colour}" was not found.'
        elif adding:
            message = f'The colour "{colour}" was not found when adding the colour "{referrer}".'
        else:
            message = f'The colour "{colour}" was not found when resolving the colour "{referrer}".'
        super().__init__(message)


class InvalidColourValueError(ChromaError, TypeError):
    def __init__(self, value: object, colour: str):
        self.value = value
        self.colour = colour
        super().__init__(f'Unexpected value, "{value}", given for colour "{colour}".')


class FunctionNotFoundError(ChromaError, LookupError):
    def __init__(self, function: str, colour: str | None = None):
        self.function = function
        self.colour = colour
        message = f'The function "{function}" was not found'
        if colour is not None:
            message += f' when adding the colour "{colour}"'
        super().__init__(message + '.')


class DangerousKeywordError(ChromaError, ValueError):
    def __init__(self, keyword: str, hex_value: str, message: str):
        self.keyword = keyword
        self.hex_value = hex_value
        super().__init__(message)


class CyclicReferenceError(ChromaError, ValueError):
    def __init__(self, chain: list[tuple[str, str]]):
        self.chain = chain
        path = ' -> '.join(f'{scheme}.{colour}' for scheme, colour in chain)
        super().__init__(f'The colour "{chain[-1][1]}" references itself: {path}.')


class CyclicInheritanceError(ChromaError, ValueError):
    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__(f'The colour scheme "{chain[-1]}" inherits from itself: {" -> ".join(chain)}.')


class SchemeFileSyntaxError(ChromaError, ValueError):
    def __init__(self, message: str, line: int):
        self.line = line
        super().__init__(f'line {line}: {message}')
