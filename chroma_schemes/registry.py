"""Built-in colour functions: discovery and the default catalogue.

Every public module in chroma_schemes/functions/ exposing a module-level
`function` (a VariantFunction) is a built-in. Frozen binaries cannot list
package contents, so the module names below are the fallback.
"""

import importlib
import pkgutil

from chroma_schemes.core.types import VariantFunction
from chroma_schemes.core.variants import Catalogue

_builtins: dict[str, VariantFunction] = {}

# Keep in sync with functions/__init__.py
_FALLBACK_MODULES = ('alpha', 'mix', 'shade', 'tint')


def discover() -> dict[str, VariantFunction]:
    """Import the function modules once; return name -> VariantFunction."""
    if _builtins:
        return _builtins

    import chroma_schemes.functions as pkg

    names = [name for _finder, name, _ispkg in pkgutil.iter_modules(pkg.__path__) if not name.startswith('_')]
    for name in names or _FALLBACK_MODULES:
        fn = getattr(importlib.import_module(f'{pkg.__name__}.{name}'), 'function', None)
        if isinstance(fn, VariantFunction):
            _builtins[fn.name] = fn
    return _builtins


def default_catalogue() -> Catalogue:
    """A new catalogue of the built-ins; callers may extend it freely."""
    return Catalogue(discover().values())
