"""Public operations for the host evaluator.

`Chroma` bundles the scheme registry, colour store, resolver and function
catalogue. All state is process-wide and mutable; one re-entrant lock is
held around every registration and resolution so a multi-entry
add_colours() batch is never observed half-applied.

The module-level functions operate on a lazily created default instance.
"""

import logging
import threading
from collections.abc import Mapping
from typing import Any

from chroma_schemes import registry
from chroma_schemes.core import env, keywords
from chroma_schemes.core.errors import SchemeNotFoundError
from chroma_schemes.core.resolver import Resolver
from chroma_schemes.core.scheme_parser import parse_scheme_file, parse_scheme_string
from chroma_schemes.core.schemes import DEFAULT_SCHEME, SchemeRegistry
from chroma_schemes.core.store import ColourStore, Entry
from chroma_schemes.core.types import ColoursDecl, DefaultSchemeDecl, SchemeDecl, SchemeFile
from chroma_schemes.core.variants import Catalogue

log = logging.getLogger(__name__)


class Chroma:
    def __init__(self, catalogue: Catalogue | None = None, output_style: str | None = None):
        self.catalogue = catalogue if catalogue is not None else registry.default_catalogue()
        self.schemes = SchemeRegistry()
        self.store = ColourStore(self.schemes, self.catalogue)
        self.resolver = Resolver(self.store, self.catalogue)
        self._output_style = 'expanded'
        self.output_style = output_style or env.output_style()
        self._active = DEFAULT_SCHEME
        self._lock = threading.RLock()

    @property
    def output_style(self) -> str:
        return self._output_style

    @output_style.setter
    def output_style(self, style: str) -> None:
        if style not in env.OUTPUT_STYLES:
            raise ValueError(f'output style must be one of {", ".join(env.OUTPUT_STYLES)}, got {style!r}')
        self._output_style = style

    @property
    def output_is_compressed(self) -> bool:
        return self._output_style == 'compressed'

    @property
    def active_scheme(self) -> str:
        """Scheme used by colour() when no scheme is given."""
        return self.schemes.canonical(self._active)

    @active_scheme.setter
    def active_scheme(self, name: str) -> None:
        with self._lock:
            scheme = self.schemes.get_scheme(name)
            # The default is held by alias so it survives a rename
            self._active = DEFAULT_SCHEME if scheme is self.schemes.default else name

    def define_colour_scheme(self, name: str, description: str = '', parent: str | None = None) -> None:
        with self._lock:
            self.schemes.define_scheme(name, description, parent)

    def define_default_colour_scheme(self, name: str | None = None, description: str | None = None) -> None:
        with self._lock:
            self.schemes.redefine_default(name, description)

    def add_colours(self, scheme: str, *entries: Entry | Mapping[str, Any]) -> None:
        """Register colours in `scheme`.

        Entries are (name, value) or (name, value, function_specs) tuples, or a
        single mapping of name -> value / (value, function_specs).
        """
        if len(entries) == 1 and isinstance(entries[0], Mapping):
            entries = tuple(_from_mapping(entries[0]))
        with self._lock:
            self.store.add_colours(scheme, entries, output_is_compressed=self.output_is_compressed)

    def colour(self, name: str, *args: Any) -> Any:
        """colour(name, [scheme], [function], *function_args) -> resolved value.

        The first extra argument is a scheme when one of that name exists,
        otherwise a variant or catalogue function name.
        """
        with self._lock:
            scheme, function, function_args = self._split_args(name, args)
            return self.resolver.resolve(
                scheme,
                name,
                function,
                function_args,
                active=self._active,
                output_is_compressed=self.output_is_compressed,
            )

    def _split_args(self, name: str, args: tuple[Any, ...]) -> tuple[str | None, str | None, tuple[Any, ...]]:
        if not args:
            return None, None, ()
        first, *rest = args
        if first is None or (isinstance(first, str) and first in self.schemes):
            function = rest[0] if rest else None
            return first, function, tuple(rest[1:])
        if isinstance(first, str) and (
            first in self.catalogue or self.resolver.has_variant(self._active, name, first)
        ):
            return None, first, tuple(rest)
        # A missing colour is reported ahead of the unrecognised argument
        self.resolver.trace(self._active, name)
        raise SchemeNotFoundError(str(first))

    def is_colour_keyword(self, value: Any) -> bool:
        return keywords.is_keyword(value)

    def is_dangerous_colour_keyword_value(self, value: Any, output_is_compressed: bool | None = None) -> bool:
        if output_is_compressed is None:
            output_is_compressed = self.output_is_compressed
        return keywords.is_dangerous(value, output_is_compressed)

    def load(self, spec: SchemeFile) -> None:
        """Apply parsed scheme file statements in order."""
        with self._lock:
            for stmt in spec.statements:
                if isinstance(stmt, SchemeDecl):
                    self.define_colour_scheme(stmt.name, stmt.description, stmt.parent)
                elif isinstance(stmt, DefaultSchemeDecl):
                    self.define_default_colour_scheme(stmt.name, stmt.description)
                elif isinstance(stmt, ColoursDecl):
                    self.add_colours(stmt.scheme, *stmt.entries)
            log.debug('loaded %d statement(s)', len(spec.statements))

    def load_file(self, path: str) -> None:
        self.load(parse_scheme_file(path))

    def load_string(self, text: str) -> None:
        self.load(parse_scheme_string(text))


def _from_mapping(colours: Mapping[str, Any]) -> list[Entry]:
    entries: list[Entry] = []
    for name, value in colours.items():
        if isinstance(value, tuple) and len(value) == 2:
            entries.append((name, value[0], value[1]))
        else:
            entries.append((name, value))
    return entries


_default: Chroma | None = None


def default_chroma() -> Chroma:
    """The process-wide instance behind the module-level functions."""
    global _default
    if _default is None:
        _default = Chroma()
    return _default


def reset() -> None:
    """Drop the process-wide instance (tests, hot reload)."""
    global _default
    _default = None


def colour(name: str, *args: Any) -> Any:
    return default_chroma().colour(name, *args)


def define_colour_scheme(name: str, description: str = '', parent: str | None = None) -> None:
    default_chroma().define_colour_scheme(name, description, parent)


def define_default_colour_scheme(name: str | None = None, description: str | None = None) -> None:
    default_chroma().define_default_colour_scheme(name, description)


def add_colours(scheme: str, *entries: Entry | Mapping[str, Any]) -> None:
    default_chroma().add_colours(scheme, *entries)


def is_colour_keyword(value: Any) -> bool:
    return keywords.is_keyword(value)


def is_dangerous_colour_keyword_value(value: Any, output_is_compressed: bool | None = None) -> bool:
    return default_chroma().is_dangerous_colour_keyword_value(value, output_is_compressed)
