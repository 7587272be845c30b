"""Built-in colour functions for variants.

Every .py file in this package that defines a `function` object is
auto-registered by chroma_schemes.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the function files at runtime.
"""

# PyInstaller hidden imports: keep this list in sync with function modules
import chroma_schemes.functions.alpha as _alpha  # noqa: F401
import chroma_schemes.functions.mix as _mix  # noqa: F401
import chroma_schemes.functions.shade as _shade  # noqa: F401
import chroma_schemes.functions.tint as _tint  # noqa: F401
