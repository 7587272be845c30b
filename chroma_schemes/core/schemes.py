"""Scheme registry: scheme name -> ColourScheme, parent links and the default scheme.

The default scheme always exists. It is registered under DEFAULT_SCHEME and
stays reachable through that key even after it has been renamed.
"""

import logging
from collections.abc import Iterator

from chroma_schemes.core.errors import CyclicInheritanceError, DuplicateSchemeError, SchemeNotFoundError
from chroma_schemes.core.types import ColourScheme, Reference

log = logging.getLogger(__name__)

DEFAULT_SCHEME = 'default'


class SchemeRegistry:
    def __init__(self) -> None:
        self._default = ColourScheme(name=DEFAULT_SCHEME, description='Default')
        self._schemes: dict[str, ColourScheme] = {DEFAULT_SCHEME: self._default}

    @property
    def default(self) -> ColourScheme:
        return self._default

    def __contains__(self, name: object) -> bool:
        return name == DEFAULT_SCHEME or name in self._schemes

    def names(self) -> list[str]:
        """Scheme names in registration order."""
        return list(self._schemes)

    def canonical(self, name: str) -> str:
        """Map the DEFAULT_SCHEME alias to the default scheme's current name."""
        return self._default.name if name == DEFAULT_SCHEME else name

    def get_scheme(self, name: str) -> ColourScheme:
        if name == DEFAULT_SCHEME:
            return self._default
        try:
            return self._schemes[name]
        except KeyError:
            raise SchemeNotFoundError(name) from None

    def define_scheme(self, name: str, description: str = '', parent: str | None = None) -> ColourScheme:
        if parent is not None and parent not in self:
            raise SchemeNotFoundError(
                parent,
                f'Cannot set the parent of scheme "{name}" to "{parent}" because the colour scheme "{parent}" '
                f'was not found.',
            )
        if name in self:
            raise DuplicateSchemeError(name)

        scheme = ColourScheme(
            name=name,
            description=description,
            parent=self.canonical(parent) if parent is not None else None,
        )
        self._schemes[name] = scheme
        log.debug('defined colour scheme %r (parent=%r)', name, scheme.parent)
        return scheme

    def redefine_default(self, name: str | None = None, description: str | None = None) -> ColourScheme:
        """Update the default scheme's name and/or description in place.

        The new name is validated before anything changes.
        """
        scheme = self._default
        renaming = name is not None and name != scheme.name
        if renaming and name in self and name != DEFAULT_SCHEME:
            raise DuplicateSchemeError(name)
        if description is not None:
            scheme.description = description
        if renaming:
            self._rename(scheme, name)
        return scheme

    def _rename(self, scheme: ColourScheme, new: str) -> None:
        old = scheme.name
        # Rebuild to keep registration order with the new key in place
        self._schemes = {(new if key == old else key): value for key, value in self._schemes.items()}
        scheme.name = new

        old_prefix = f'{old}.'
        for other in self._schemes.values():
            if other.parent == old:
                other.parent = new
            for definition in other.colours.values():
                value = definition.value
                if isinstance(value, Reference) and value.scheme == old:
                    definition.value = Reference(name=value.name, scheme=new)
                definition.referenced_by = {
                    f'{new}.{ref[len(old_prefix):]}' if ref.startswith(old_prefix) else ref
                    for ref in definition.referenced_by
                }
        log.debug('renamed default colour scheme %r -> %r', old, new)

    def ancestry_of(self, name: str) -> Iterator[str]:
        """Yield `name` then each ancestor's name up to the root."""
        seen: list[str] = []
        current: str | None = self.get_scheme(name).name
        while current is not None:
            if current in seen:
                raise CyclicInheritanceError([*seen, current])
            seen.append(current)
            yield current
            current = self.get_scheme(current).parent
