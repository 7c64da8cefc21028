"""
Regex-driven candidate scoring and dispatch.

Candidates pair a pattern with an inner scorable; the dispatcher picks the
longest matching pattern and lets the scorables sharing that pattern compete
for the message.
"""
from .app import RegexDispatchApp, configure_logging
from .config import DispatchConfig
from .config_loader import load_config_from_env
from .dispatcher_factory import build_dispatcher, group_by_pattern
from .exceptions import ConfigurationError, DispatchError, DispatchTimeoutError, UnresolvedError
from .handlers import Binding, HandlerScorable, binding_sort_key, handler_candidates, regex_pattern
from .matching import (
    Capture,
    Captures,
    MatchResult,
    MatchScope,
    MatchScorable,
    Pattern,
    compare_matches,
    compile_pattern,
    make_compiler,
    match_sort_key,
    normalized_score,
)
from .models import Message
from .resolution import BindingScope, Resolver, ResolverScope
from .schemas import DispatchOutcome
from .scorables import FoldScorable, Scorable, fold, map_score

__all__ = [
    "RegexDispatchApp",
    "configure_logging",
    "DispatchConfig",
    "load_config_from_env",
    "build_dispatcher",
    "group_by_pattern",
    "ConfigurationError",
    "DispatchError",
    "DispatchTimeoutError",
    "UnresolvedError",
    "Binding",
    "HandlerScorable",
    "binding_sort_key",
    "handler_candidates",
    "regex_pattern",
    "Capture",
    "Captures",
    "MatchResult",
    "MatchScope",
    "MatchScorable",
    "Pattern",
    "compare_matches",
    "compile_pattern",
    "make_compiler",
    "match_sort_key",
    "normalized_score",
    "Message",
    "BindingScope",
    "Resolver",
    "ResolverScope",
    "DispatchOutcome",
    "FoldScorable",
    "Scorable",
    "fold",
    "map_score",
]
