"""Regex-tokenised parser for scheme files.

A scheme file is a list of Sass-flavoured statements:

    // comments are skipped
    default-scheme('Base', 'The base palette');
    scheme('alt', 'Alternative palette', 'default');
    colours('default',
      'blue': #0e71b8,
      'grey': 'lightslategray',
      'link': 'blue' [hover: shade(20%), faded: alpha(0.5)],
    );

Values are typed the way a stylesheet evaluator types them: hex and colour
function calls are colour literals, quoted text is a string, a bare word is
a keyword token and numbers stay numbers. Validating them is left to the
colour store.
"""

import re
from dataclasses import dataclass
from typing import Any

from chroma_schemes.core.errors import SchemeFileSyntaxError
from chroma_schemes.core.types import (
    ColourLiteral,
    ColoursDecl,
    DefaultSchemeDecl,
    FunctionSpec,
    Keyword,
    SchemeDecl,
    SchemeFile,
    Statement,
)

_TOKEN = re.compile(
    r"""
    (?P<newline>\n)
  | (?P<space>[ \t\r]+)
  | (?P<comment>//[^\n]*|/\*.*?\*/)
  | (?P<string>'(?:[^'\\\n]|\\.)*'|"(?:[^"\\\n]|\\.)*")
  | (?P<hex>\#[0-9a-fA-F]{3,8}\b)
  | (?P<call>(?:rgba?|hsla?|hwb|lab|lch|oklab|oklch|color)\([^()]*\))
  | (?P<number>-?(?:\d+(?:\.\d*)?|\.\d+)(?:%|[a-zA-Z]+)?)
  | (?P<ident>[A-Za-z_][\w-]*)
  | (?P<punct>[(),:;\[\]])
    """,
    re.VERBOSE | re.DOTALL,
)

_SCHEME = {'scheme', 'define-colour-scheme'}
_DEFAULT_SCHEME = {'default-scheme', 'define-default-colour-scheme'}
_COLOURS = {'colours', 'add-colours'}


@dataclass
class _Token:
    kind: str
    text: str
    line: int


def parse_scheme_file(path: str) -> SchemeFile:
    """Parse a scheme file from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    return parse_scheme_string(text)


def parse_scheme_string(text: str) -> SchemeFile:
    """Parse a scheme file from a string."""
    parser = _Parser(_tokenize(text))
    return SchemeFile(statements=parser.statements(), raw=text)


def _tokenize(text: str) -> list[_Token]:
    tokens = []
    line = 1
    pos = 0
    while pos < len(text):
        m = _TOKEN.match(text, pos)
        if m is None:
            raise SchemeFileSyntaxError(f'unexpected character {text[pos]!r}', line)
        kind = m.lastgroup
        value = m.group()
        if kind not in ('newline', 'space', 'comment'):
            tokens.append(_Token(kind, value, line))
        line += value.count('\n')
        pos = m.end()
    tokens.append(_Token('eof', '', line))
    return tokens


def _unquote(text: str) -> str:
    return re.sub(r'\\(.)', r'\1', text[1:-1])


class _Parser:
    def __init__(self, tokens: list[_Token]):
        self.tokens = tokens
        self.index = 0

    def peek(self) -> _Token:
        return self.tokens[self.index]

    def next(self) -> _Token:
        token = self.tokens[self.index]
        if token.kind != 'eof':
            self.index += 1
        return token

    def accept(self, text: str) -> bool:
        if self.peek().kind == 'punct' and self.peek().text == text:
            self.index += 1
            return True
        return False

    def expect(self, kind: str, text: str | None = None) -> _Token:
        token = self.next()
        if token.kind != kind or (text is not None and token.text != text):
            wanted = repr(text) if text is not None else kind
            got = repr(token.text) if token.text else 'end of file'
            raise SchemeFileSyntaxError(f'expected {wanted}, got {got}', token.line)
        return token

    def statements(self) -> list[Statement]:
        result: list[Statement] = []
        while self.peek().kind != 'eof':
            result.append(self.statement())
        return result

    def statement(self) -> Statement:
        head = self.expect('ident')
        self.expect('punct', '(')
        if head.text in _SCHEME:
            stmt: Statement = self._scheme(head)
        elif head.text in _DEFAULT_SCHEME:
            stmt = self._default_scheme(head)
        elif head.text in _COLOURS:
            stmt = self._colours(head)
        else:
            raise SchemeFileSyntaxError(f'unknown statement {head.text!r}', head.line)
        self.expect('punct', ')')
        self.accept(';')
        return stmt

    def _string_args(self, allowed: tuple[str, ...]) -> dict[str, str]:
        """Positional or `key: 'value'` string arguments, in `allowed` order."""
        args: dict[str, str] = {}
        position = 0
        while not (self.peek().kind == 'punct' and self.peek().text == ')'):
            token = self.peek()
            if token.kind == 'ident':
                self.next()
                self.expect('punct', ':')
                if token.text not in allowed:
                    raise SchemeFileSyntaxError(f'unknown argument {token.text!r}', token.line)
                key = token.text
            else:
                if position >= len(allowed):
                    raise SchemeFileSyntaxError('too many arguments', token.line)
                key = allowed[position]
                position += 1
            args[key] = _unquote(self.expect('string').text)
            if not self.accept(','):
                break
        return args

    def _scheme(self, head: _Token) -> SchemeDecl:
        args = self._string_args(('name', 'description', 'parent'))
        if 'name' not in args:
            raise SchemeFileSyntaxError('scheme() needs a name', head.line)
        return SchemeDecl(
            name=args['name'],
            description=args.get('description', ''),
            parent=args.get('parent'),
            line=head.line,
        )

    def _default_scheme(self, head: _Token) -> DefaultSchemeDecl:
        args = self._string_args(('name', 'description'))
        return DefaultSchemeDecl(name=args.get('name'), description=args.get('description'), line=head.line)

    def _colours(self, head: _Token) -> ColoursDecl:
        decl = ColoursDecl(scheme=_unquote(self.expect('string').text), line=head.line)
        while self.accept(','):
            if self.peek().kind != 'string':
                break  # trailing comma
            name = _unquote(self.next().text)
            self.expect('punct', ':')
            value = self.value()
            variants = self._variants() if self.accept('[') else []
            decl.entries.append((name, value, variants))
        return decl

    def _variants(self) -> list[FunctionSpec]:
        specs = []
        while not self.accept(']'):
            token = self.next()
            if token.kind == 'string':
                variant = _unquote(token.text)
            elif token.kind == 'ident':
                variant = token.text
            else:
                raise SchemeFileSyntaxError(f'expected a variant name, got {token.text!r}', token.line)
            self.expect('punct', ':')
            function = self.expect('ident').text
            self.expect('punct', '(')
            args = []
            while not self.accept(')'):
                args.append(self.value())
                if not self.accept(','):
                    self.expect('punct', ')')
                    break
            specs.append(FunctionSpec(variant=variant, function=function, args=tuple(args)))
            if not self.accept(','):
                self.expect('punct', ']')
                break
        return specs

    def value(self) -> Any:
        token = self.next()
        if token.kind in ('hex', 'call'):
            return ColourLiteral(token.text)
        if token.kind == 'string':
            return _unquote(token.text)
        if token.kind == 'ident':
            return Keyword(token.text)
        if token.kind == 'number':
            try:
                return float(token.text)
            except ValueError:
                return token.text  # has a unit, e.g. 20%
        raise SchemeFileSyntaxError(f'expected a value, got {token.text or "end of file"!r}', token.line)
