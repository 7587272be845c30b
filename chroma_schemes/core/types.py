"""Shared types for chroma-schemes: colour values, ColourDefinition, ColourScheme, VariantFunction."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class ColourLiteral:
    """An opaque colour value as the host evaluated it, e.g. '#0e71b8' or 'rgb(0 0 0 / 50%)'."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Keyword:
    """An unquoted colour keyword token, e.g. lightslategray."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Reference:
    """A stored reference to another colour, optionally scheme-qualified."""

    name: str
    scheme: str | None = None

    def __str__(self) -> str:
        return f'{self.scheme}.{self.name}' if self.scheme else self.name


# What a colour definition may hold after registration. Plain str is a quoted keyword.
StoredValue = Union[ColourLiteral, Keyword, Reference, str]
# What resolution hands back to the host.
ResolvedValue = Union[ColourLiteral, Keyword, str]


@dataclass(frozen=True)
class FunctionSpec:
    """A named variant of a colour: `function` applied to the resolved colour with `args`."""

    variant: str
    function: str
    args: tuple[Any, ...] = ()


@dataclass
class ColourDefinition:
    name: str
    value: StoredValue
    functions: dict[str, FunctionSpec] = field(default_factory=dict)
    referenced_by: set[str] = field(default_factory=set)  # 'scheme.colour' of dependents

    @property
    def is_reference(self) -> bool:
        return isinstance(self.value, Reference)


@dataclass
class ColourScheme:
    name: str
    description: str = ''
    parent: str | None = None
    colours: dict[str, ColourDefinition] = field(default_factory=dict)


@dataclass
class SchemeDecl:
    """scheme('name', 'description', 'parent') in a scheme file."""

    name: str
    description: str = ''
    parent: str | None = None
    line: int = 0


@dataclass
class DefaultSchemeDecl:
    """default-scheme(...) in a scheme file. None leaves the field unchanged."""

    name: str | None = None
    description: str | None = None
    line: int = 0


@dataclass
class ColoursDecl:
    """colours('scheme', 'name': value [variant: fn(args)], ...) in a scheme file."""

    scheme: str
    entries: list[tuple[str, Any, list[FunctionSpec]]] = field(default_factory=list)
    line: int = 0


Statement = Union[SchemeDecl, DefaultSchemeDecl, ColoursDecl]


@dataclass
class SchemeFile:
    """Parsed scheme file, statements in source order."""

    statements: list[Statement] = field(default_factory=list)
    raw: str = ''  # original file text


class VariantFunction:
    """A self-registering colour function.

    Usage in a function module:

        function = VariantFunction(name='shade', help='Mix with black')

        @function.apply
        def apply(base, weight='10%'):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._apply_fn: Callable | None = None

    def apply(self, fn: Callable) -> Callable:
        """Decorator to register the implementation."""
        self._apply_fn = fn
        return fn

    def invoke(self, base: ResolvedValue, *args: Any) -> Any:
        """Call the implementation with the base colour prepended to args."""
        if self._apply_fn is None:
            raise RuntimeError(f'Function {self.name} has no implementation')
        return self._apply_fn(base, *args)


def css_text(value: Any) -> str:
    """Render a resolved value (or function argument) as CSS text."""
    if isinstance(value, float):
        return f'{value:g}'
    return str(value)
