"""Reference resolver: colour name -> concrete value.

Resolution re-walks the live scheme hierarchy on every call. Nothing is
cached, so a scheme that overrides a colour changes the result for every
colour referencing it, variants included, as soon as the override exists.

Context rules:
  * the closest definition in the ancestry of the current scheme wins;
  * a qualified reference ('alt.blue') continues from the qualifier scheme;
  * an unqualified reference continues from the current scheme, so overrides
    made below the scheme that holds the reference are seen;
  * a reference to a colour's own name continues from the holder's parent
    (the inherited definition it overrides).
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from chroma_schemes.core import keywords
from chroma_schemes.core.errors import ColourNotFoundError, CyclicReferenceError
from chroma_schemes.core.schemes import DEFAULT_SCHEME
from chroma_schemes.core.store import ColourStore
from chroma_schemes.core.types import ColourDefinition, FunctionSpec, Keyword, Reference, ResolvedValue
from chroma_schemes.core.variants import Catalogue, apply_variant

log = logging.getLogger(__name__)


@dataclass
class Resolution:
    """A resolved base colour and the (holder scheme, definition) chain that produced it."""

    value: ResolvedValue
    chain: list[tuple[str, ColourDefinition]] = field(default_factory=list)

    def variant(self, name: str) -> FunctionSpec | None:
        """First variant called `name` along the reference chain."""
        for _holder, definition in self.chain:
            if name in definition.functions:
                return definition.functions[name]
        return None


class Resolver:
    def __init__(self, store: ColourStore, catalogue: Catalogue):
        self.store = store
        self.catalogue = catalogue

    def trace(self, scheme: str, colour: str) -> Resolution:
        """Follow references from `colour` in `scheme` until a concrete value."""
        schemes = self.store.schemes
        context = schemes.canonical(scheme)
        name = colour
        referrer: str | None = None
        visited: list[tuple[str, str]] = []
        chain: list[tuple[str, ColourDefinition]] = []

        while True:
            key = (context, name)
            if key in visited:
                raise CyclicReferenceError([*visited, key])
            visited.append(key)

            found = self.store.find(context, name)
            if found is None:
                raise ColourNotFoundError(name, referrer)
            holder, definition = found
            chain.append(found)

            value = definition.value
            if not isinstance(value, Reference):
                log.debug('resolved %s.%s -> %r via %d step(s)', scheme, colour, value, len(chain))
                return Resolution(value=value, chain=chain)

            if value.scheme is not None:
                context = schemes.canonical(value.scheme)
            elif value.name == definition.name:
                parent = schemes.get_scheme(holder).parent
                if parent is None:
                    raise CyclicReferenceError([*visited, (holder, name)])
                context = parent
            referrer = definition.name
            name = value.name

    def resolve(
        self,
        scheme: str | None,
        colour: str,
        function: str | None = None,
        args: Iterable[Any] = (),
        active: str | None = None,
        output_is_compressed: bool = False,
    ) -> Any:
        """Resolve `colour`, optionally applying a declared variant or a catalogue function.

        `scheme` wins over `active`; with neither, the default scheme is used.
        """
        context = scheme or active or DEFAULT_SCHEME
        resolution = self.trace(context, colour)
        value = resolution.value

        if isinstance(value, Keyword):
            keywords.check(value.name, is_quoted=False, output_is_compressed=output_is_compressed, at_definition=False)

        if function is None:
            return value

        spec = resolution.variant(function)
        if spec is not None:
            return apply_variant(self.catalogue, value, spec.function, (*spec.args, *args))
        return apply_variant(self.catalogue, value, function, args)

    def has_variant(self, scheme: str, colour: str, name: str) -> bool:
        """True when the colour (or a colour it references) declares variant `name`."""
        try:
            return self.trace(scheme, colour).variant(name) is not None
        except (ColourNotFoundError, CyclicReferenceError):
            return False
