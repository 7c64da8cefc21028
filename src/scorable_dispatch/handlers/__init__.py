"""
Handler layer: binding handlers to scopes and registering their patterns.
"""
from .handler_scorable import Binding, HandlerScorable, binding_sort_key
from .registry import handler_candidates, patterns_for, regex_pattern

__all__ = [
    "Binding",
    "HandlerScorable",
    "binding_sort_key",
    "handler_candidates",
    "patterns_for",
    "regex_pattern",
]
