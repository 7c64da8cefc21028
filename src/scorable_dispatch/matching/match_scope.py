"""
Resolution scope exposing a pattern match.

Layered over the scope a pattern was matched in, so handlers can ask for the
match's named captures, the pattern, the whole match, or its capture spans,
and still reach everything the enclosing scope provides.
"""
from typing import Any, Optional, Tuple

from ..resolution import Resolver, ResolverScope, accepts
from .pattern import Capture, Captures, MatchResult, Pattern


class MatchScope(ResolverScope):
    """
    Scope binding a Pattern and its MatchResult.
    
    Lookup order:
    1. A string tag naming a successful capture yields that capture (when
       ``Capture`` is acceptable) or its text (when ``str`` is acceptable)
    2. The Pattern
    3. The MatchResult
    4. The Captures sequence
    5. Whatever the parent resolves
    
    Named captures come first so a group can't be shadowed by the
    match-level bindings.
    """
    
    def __init__(self, pattern: Pattern, match: MatchResult, parent: Optional[Resolver]):
        super().__init__(parent)
        self._pattern = pattern
        self._match = match
    
    @property
    def pattern(self) -> Pattern:
        return self._pattern
    
    @property
    def match(self) -> MatchResult:
        return self._match
    
    def try_resolve(self, kind: type, tag: Any = None) -> Tuple[bool, Any]:
        if isinstance(tag, str):
            capture = self._match.group(tag)
            if capture is not None and capture.success:
                if accepts(kind, Capture):
                    return True, capture
                if accepts(kind, str):
                    return True, capture.value
        
        if accepts(kind, Pattern):
            return True, self._pattern
        
        if accepts(kind, MatchResult):
            return True, self._match
        
        if accepts(kind, Captures):
            return True, self._match.groups
        
        return super().try_resolve(kind, tag)
    
    def __repr__(self) -> str:
        return f"MatchScope({self._pattern.source!r})"
