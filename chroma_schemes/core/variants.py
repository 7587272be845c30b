"""Function catalogue and variant dispatch.

The catalogue is the set of colour functions the host evaluator knows about.
It is consulted twice: when a colour declares a variant (the function must
exist) and again when the variant is applied, since a long-lived host may
change its catalogue in between.
"""

from collections.abc import Callable, Iterable
from typing import Any

from chroma_schemes.core.errors import FunctionNotFoundError
from chroma_schemes.core.types import ResolvedValue, VariantFunction


class Catalogue:
    def __init__(self, functions: Iterable[VariantFunction] = ()):
        self._functions: dict[str, VariantFunction] = {}
        for fn in functions:
            self.register(fn)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __len__(self) -> int:
        return len(self._functions)

    def names(self) -> list[str]:
        return sorted(self._functions)

    def register(self, fn: VariantFunction) -> VariantFunction:
        self._functions[fn.name] = fn
        return fn

    def unregister(self, name: str) -> None:
        self._functions.pop(name, None)

    def function(self, name: str, help: str = '') -> Callable[[Callable], Callable]:
        """Decorator registering a plain callable under `name`."""

        def decorator(impl: Callable) -> Callable:
            fn = VariantFunction(name=name, help=help or (impl.__doc__ or '').strip())
            fn.apply(impl)
            self.register(fn)
            return impl

        return decorator

    def get(self, name: str) -> VariantFunction:
        try:
            return self._functions[name]
        except KeyError:
            raise FunctionNotFoundError(name) from None


def apply_variant(catalogue: Catalogue, base: ResolvedValue, function: str, args: Iterable[Any] = ()) -> Any:
    """Apply catalogue function `function` to the resolved `base` colour."""
    return catalogue.get(function).invoke(base, *args)
