"""Colour definition store: per-scheme colour definitions and the reverse reference index.

Entries are registered in order so a later entry may reference an earlier
one from the same batch. Batches are not transactional: when an entry fails,
the entries before it stay registered.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from chroma_schemes.core import keywords
from chroma_schemes.core.errors import ColourNotFoundError, FunctionNotFoundError, InvalidColourValueError
from chroma_schemes.core.schemes import SchemeRegistry
from chroma_schemes.core.types import ColourDefinition, ColourLiteral, FunctionSpec, Keyword, Reference, StoredValue
from chroma_schemes.core.variants import Catalogue

log = logging.getLogger(__name__)

# (name, value) or (name, value, function_specs)
Entry = Sequence[Any]


class ColourStore:
    def __init__(self, schemes: SchemeRegistry, catalogue: Catalogue):
        self.schemes = schemes
        self.catalogue = catalogue

    def get_definition(self, scheme: str, colour: str) -> ColourDefinition | None:
        """Return the raw definition held by `scheme` itself (no inheritance)."""
        return self.schemes.get_scheme(scheme).colours.get(colour)

    def find(self, scheme: str, colour: str) -> tuple[str, ColourDefinition] | None:
        """Return (holder scheme, definition) for the closest definition in the ancestry."""
        for name in self.schemes.ancestry_of(scheme):
            definition = self.schemes.get_scheme(name).colours.get(colour)
            if definition is not None:
                return name, definition
        return None

    def parse_reference(self, text: str) -> Reference:
        """Split an optional registered-scheme qualifier off a colour name."""
        prefix, sep, rest = text.partition('.')
        if sep and rest and prefix in self.schemes:
            return Reference(name=rest, scheme=prefix)
        return Reference(name=text)

    def add_colours(self, scheme: str, entries: Iterable[Entry], output_is_compressed: bool = False) -> None:
        target = self.schemes.get_scheme(scheme)
        for entry in entries:
            name, value, specs = _unpack(entry)
            stored = self._accept_value(target.name, name, value, output_is_compressed)
            functions = {spec.variant: spec for spec in self._accept_functions(name, specs)}

            existing = target.colours.get(name)
            definition = ColourDefinition(name=name, value=stored, functions=functions)
            if existing is not None:
                definition.referenced_by = existing.referenced_by
                if isinstance(existing.value, Reference):
                    self._unlink(target.name, name, existing.value)
            target.colours[name] = definition

            if isinstance(stored, Reference):
                self._link(target.name, name, stored)
            log.debug('added colour %s.%s = %r', target.name, name, stored)

    def _accept_value(self, scheme: str, name: str, value: Any, output_is_compressed: bool) -> StoredValue:
        if isinstance(value, ColourLiteral):
            return value

        if isinstance(value, Keyword):
            if not keywords.is_keyword(value):
                raise InvalidColourValueError(value, name)
            keywords.check(value.name, is_quoted=False, output_is_compressed=output_is_compressed)
            return value

        if isinstance(value, str):
            ref = self.parse_reference(value)
            context = ref.scheme or scheme
            if self.find(context, ref.name) is not None:
                return ref
            if keywords.is_keyword(value):
                # Quoted keyword: kept as an opaque string
                return value
            raise ColourNotFoundError(value, referrer=name, adding=True)

        raise InvalidColourValueError(value, name)

    def _accept_functions(self, name: str, specs: Any) -> Iterator[FunctionSpec]:
        for spec in _function_specs(specs):
            if spec.function not in self.catalogue:
                raise FunctionNotFoundError(spec.function, name)
            yield spec

    def _target(self, scheme: str, name: str, ref: Reference) -> ColourDefinition | None:
        """The definition a reference held by `scheme.name` points at, as seen at add time."""
        context: str | None = ref.scheme or scheme
        if ref.scheme is None and ref.name == name:
            # Own name: the inherited definition is the target
            context = self.schemes.get_scheme(scheme).parent
            if context is None:
                return None
        found = self.find(context, ref.name)
        return found[1] if found is not None else None

    def _link(self, scheme: str, name: str, ref: Reference) -> None:
        target = self._target(scheme, name, ref)
        if target is not None:
            target.referenced_by.add(f'{scheme}.{name}')

    def _unlink(self, scheme: str, name: str, ref: Reference) -> None:
        target = self._target(scheme, name, ref)
        if target is not None:
            target.referenced_by.discard(f'{scheme}.{name}')

    def dependents_of(self, scheme: str, colour: str) -> set[str]:
        """Qualified names of the colours that reference `colour` as seen from `scheme`."""
        found = self.find(scheme, colour)
        return set(found[1].referenced_by) if found else set()


def _unpack(entry: Entry) -> tuple[str, Any, Any]:
    if len(entry) == 2:
        name, value = entry
        return name, value, None
    if len(entry) == 3:
        name, value, specs = entry
        return name, value, specs
    raise ValueError(f'Colour entries are (name, value) or (name, value, functions), got {entry!r}')


def _function_specs(specs: Any) -> Iterator[FunctionSpec]:
    if not specs:
        return
    if isinstance(specs, Mapping):
        specs = [(variant, *(fn if isinstance(fn, tuple) else (fn,))) for variant, fn in specs.items()]
    for spec in specs:
        if isinstance(spec, FunctionSpec):
            yield spec
            continue
        variant, function, *rest = spec
        if len(rest) == 1 and isinstance(rest[0], (list, tuple)):
            args = tuple(rest[0])
        else:
            args = tuple(rest)
        yield FunctionSpec(variant=variant, function=function, args=args)
