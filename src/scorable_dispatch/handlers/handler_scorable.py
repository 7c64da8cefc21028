"""
Scorable wrapping a handler callable.

Preparation binds the handler's parameters from the resolution scope: each
parameter is resolved by its annotation (the kind) and its name (the tag),
so a parameter ``city: str`` receives the text of a capture group named
``city``. A handler whose required parameters can't all be bound declines.
"""
import inspect
import logging
import typing
from dataclasses import dataclass
from types import MappingProxyType, NoneType, UnionType
from typing import Any, Callable, Mapping, Optional

from ..resolution import Resolver
from ..scorables import Scorable


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Binding:
    """A handler together with the arguments resolved for it."""
    handler: Callable
    arguments: Mapping[str, Any]
    
    def invoke(self) -> Any:
        return self.handler(**self.arguments)


def binding_sort_key(binding: Binding) -> int:
    """Sort key ranking bindings, smaller is better: more bound arguments wins."""
    return -len(binding.arguments)


def _kind_for(annotation: Any) -> type:
    """Map a parameter annotation to the class requested from the scope."""
    if annotation is inspect.Parameter.empty:
        return str
    
    if typing.get_origin(annotation) in (typing.Union, UnionType):
        members = [arg for arg in typing.get_args(annotation) if arg is not NoneType]
        if len(members) == 1:
            annotation = members[0]
    
    if annotation is Any:
        return object
    
    if isinstance(annotation, type):
        return annotation
    return object


class HandlerScorable(Scorable[Binding, Binding]):
    """
    Scorable that binds and invokes a handler.
    
    Unannotated parameters are requested as ``str``. Parameters with
    defaults are bound when the scope can supply them and left to their
    default otherwise. ``*args``/``**kwargs`` are ignored.
    """
    
    def __init__(self, handler: Callable):
        self._handler = handler
        self._parameters = [
            (parameter.name, _kind_for(parameter.annotation), parameter.default is not inspect.Parameter.empty)
            for parameter in inspect.signature(handler, eval_str=True).parameters.values()
            if parameter.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        ]
    
    @property
    def handler(self) -> Callable:
        return self._handler
    
    async def prepare(self, scope: Resolver) -> Optional[Binding]:
        arguments = {}
        for name, kind, optional in self._parameters:
            found, value = scope.try_resolve(kind, name)
            if found:
                arguments[name] = value
            elif not optional:
                logger.debug(f"Handler {self._name} declined: cannot bind {name!r}")
                return None
        
        return Binding(handler=self._handler, arguments=MappingProxyType(arguments))
    
    def score(self, state: Binding) -> Binding:
        return state
    
    def commit(self, state: Binding) -> Any:
        return state.invoke()
    
    @property
    def _name(self) -> str:
        return getattr(self._handler, "__qualname__", repr(self._handler))
    
    def __repr__(self) -> str:
        return f"HandlerScorable({self._name})"
