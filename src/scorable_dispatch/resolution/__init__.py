"""
Chained resolution scopes.

Key components:
- Resolver: lookup protocol (by kind and optional tag)
- ResolverScope: layer that defers unknown lookups to its parent
- BindingScope: layer over an explicit, immutable set of values
"""
from .resolver import NOT_FOUND, BindingScope, Resolver, ResolverScope, accepts

__all__ = [
    "NOT_FOUND",
    "BindingScope",
    "Resolver",
    "ResolverScope",
    "accepts",
]
