"""
Core abstractions for scope resolution.

A resolver answers "give me a value of this kind (optionally tagged)".
Scopes are layered: each layer resolves what it owns and defers the rest
to the enclosing resolver.
"""
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from ..exceptions import UnresolvedError


NOT_FOUND: Tuple[bool, Any] = (False, None)


def accepts(kind: type, value_type: type) -> bool:
    """Check whether a value of ``value_type`` satisfies a request for ``kind``."""
    return isinstance(kind, type) and issubclass(value_type, kind)


class Resolver(ABC):
    """
    Protocol for value lookup by kind and optional tag.
    
    Subclasses implement ``try_resolve``; ``resolve`` is the raising form.
    """
    
    @abstractmethod
    def try_resolve(self, kind: type, tag: Any = None) -> Tuple[bool, Any]:
        """
        Look up a value.
        
        :param kind: Requested class; any value whose class is a subclass matches
        :param tag: Optional name narrowing the lookup
        :return: ``(True, value)`` when found, ``(False, None)`` otherwise
        """
    
    def resolve(self, kind: type, tag: Any = None) -> Any:
        """
        Look up a value, raising when nothing in the chain supplies it.
        
        :raises: UnresolvedError
        """
        found, value = self.try_resolve(kind, tag)
        if not found:
            raise UnresolvedError(kind, tag)
        return value


class ResolverScope(Resolver):
    """
    A resolver layer with a back-reference to its enclosing resolver.
    
    The parent is only delegated to, never modified.
    """
    
    def __init__(self, parent: Optional[Resolver] = None):
        self._parent = parent
    
    @property
    def parent(self) -> Optional[Resolver]:
        return self._parent
    
    def try_resolve(self, kind: type, tag: Any = None) -> Tuple[bool, Any]:
        if self._parent is None:
            return NOT_FOUND
        return self._parent.try_resolve(kind, tag)


class BindingScope(ResolverScope):
    """
    Scope over an explicit, frozen set of bindings.
    
    Positional values answer untagged requests by type (first match wins).
    Named values answer tagged requests, and a tagged request nobody named
    falls back to the positional values.
    """
    
    def __init__(
        self,
        *values: Any,
        named: Optional[Mapping[str, Any]] = None,
        parent: Optional[Resolver] = None,
    ):
        super().__init__(parent)
        self._values = tuple(values)
        self._named = MappingProxyType(dict(named or {}))
    
    def try_resolve(self, kind: type, tag: Any = None) -> Tuple[bool, Any]:
        if tag is not None and tag in self._named:
            value = self._named[tag]
            if accepts(kind, type(value)):
                return True, value
        
        for value in self._values:
            if accepts(kind, type(value)):
                return True, value
        
        return super().try_resolve(kind, tag)
    
    def __repr__(self) -> str:
        return f"BindingScope({len(self._values)} values, {len(self._named)} named)"
