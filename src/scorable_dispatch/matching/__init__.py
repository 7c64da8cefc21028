"""
Regular expression matching layer.

Key components:
- Pattern, MatchResult, Capture, Captures: compiled patterns and match data
- MatchScope: resolution scope exposing a match to nested scorables
- MatchScorable: scorable that claims messages matching a pattern
- match_sort_key, compare_matches, normalized_score: ranking of matches
"""
from .pattern import (
    Capture,
    Captures,
    MatchResult,
    Pattern,
    PatternCompiler,
    compile_pattern,
    make_compiler,
)
from .match_scope import MatchScope
from .match_scorable import MatchScorable, MatchState
from .ordering import compare_matches, match_sort_key, normalized_score

__all__ = [
    "Capture",
    "Captures",
    "MatchResult",
    "Pattern",
    "PatternCompiler",
    "compile_pattern",
    "make_compiler",
    "MatchScope",
    "MatchScorable",
    "MatchState",
    "compare_matches",
    "match_sort_key",
    "normalized_score",
]
