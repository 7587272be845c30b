"""chroma_schemes.core: foundation layer.

Contains the colour types, keyword safety checks, scheme registry, colour
store, resolver, scheme file parser and report builder.
This module has NO dependencies on chroma_schemes.functions or
chroma_schemes.registry. Only stdlib and PIL are allowed here.
"""
