"""
Pattern registration for handlers.

Handlers declare the patterns they answer with the ``regex_pattern``
decorator; ``handler_candidates`` turns decorated functions and objects into
(pattern source, scorable) pairs for the dispatcher factory.
"""
import inspect
from typing import Any, Callable, Iterator, Tuple

from .handler_scorable import HandlerScorable


PATTERNS_ATTRIBUTE = "__regex_patterns__"


def regex_pattern(*sources: str) -> Callable:
    """
    Attach one or more pattern sources to a handler.
    
    The decorator can be stacked; patterns keep top-to-bottom order.
    
    Usage:
        @regex_pattern(r"^weather in (?P<city>\\w+)$")
        def weather(city: str): ...
    """
    if not sources:
        raise ValueError("At least one pattern must be provided")
    
    def decorator(func: Callable) -> Callable:
        existing = getattr(func, PATTERNS_ATTRIBUTE, ())
        setattr(func, PATTERNS_ATTRIBUTE, tuple(sources) + tuple(existing))
        return func
    
    return decorator


def patterns_for(func: Callable) -> Tuple[str, ...]:
    """Pattern sources declared directly on ``func`` (empty if none)."""
    return tuple(getattr(func, PATTERNS_ATTRIBUTE, ()))


def _inherited_patterns(cls: type, name: str) -> Tuple[str, ...]:
    """Patterns declared on ``name`` anywhere in the class hierarchy, most derived first."""
    sources = []
    for klass in cls.__mro__:
        member = vars(klass).get(name)
        if member is None:
            continue
        for source in patterns_for(inspect.unwrap(getattr(member, "__func__", member))):
            if source not in sources:
                sources.append(source)
    return tuple(sources)


def _method_names(cls: type) -> Iterator[str]:
    """Attribute names in definition order, most derived class first."""
    seen = set()
    for klass in cls.__mro__:
        for name in vars(klass):
            if name not in seen:
                seen.add(name)
                yield name


def handler_candidates(*targets: Any) -> Iterator[Tuple[str, HandlerScorable]]:
    """
    Yield (pattern source, scorable) pairs for decorated handlers.
    
    Each target is either a decorated function or an object whose methods
    carry patterns. A method inherits the patterns of the methods it
    overrides. One HandlerScorable is shared by all patterns of a handler.
    
    :param targets: Functions and/or handler objects
    :return: Iterator of candidate pairs, in declaration order
    """
    for target in targets:
        if inspect.isfunction(target) or inspect.ismethod(target):
            sources = patterns_for(target)
            if not sources:
                raise ValueError(f"{target!r} has no regex patterns")
            scorable = HandlerScorable(target)
            for source in sources:
                yield source, scorable
            continue
        
        if isinstance(target, type):
            raise ValueError(f"{target!r} is a class; pass an instance of it")
        
        cls = type(target)
        for name in _method_names(cls):
            sources = _inherited_patterns(cls, name)
            if not sources:
                continue
            scorable = HandlerScorable(getattr(target, name))
            for source in sources:
                yield source, scorable
