"""
Scorable for a regular expression match against the message text.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..models import Message
from ..resolution import Resolver
from ..scorables import Scorable
from .match_scope import MatchScope
from .pattern import MatchResult, Pattern


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchState:
    """Prepared state of a MatchScorable."""
    scope: MatchScope
    match: MatchResult
    inner_state: Any


class MatchScorable(Scorable[MatchState, MatchResult]):
    """
    Scorable claiming messages whose text matches a pattern.
    
    A match alone is not a candidacy: the inner scorable is prepared against
    a MatchScope layered over the incoming scope and must accept it too.
    The score is the raw MatchResult; apply ``normalized_score`` for a scalar.
    """
    
    def __init__(self, pattern: Pattern, inner: Scorable):
        self._pattern = pattern
        self._inner = inner
    
    @property
    def pattern(self) -> Pattern:
        return self._pattern
    
    async def prepare(self, scope: Resolver) -> Optional[MatchState]:
        found, message = scope.try_resolve(Message)
        if not found:
            return None
        
        text = message.text
        if not text:
            return None
        
        match = self._pattern.match(text)
        if not match.success:
            return None
        
        match_scope = MatchScope(self._pattern, match, scope)
        inner_state = await self._inner.prepare(match_scope)
        if inner_state is None:
            logger.debug(f"Pattern {self._pattern.source!r} matched but inner scorable declined")
            return None
        
        return MatchState(scope=match_scope, match=match, inner_state=inner_state)
    
    def score(self, state: MatchState) -> MatchResult:
        return state.match
    
    def commit(self, state: MatchState) -> Any:
        return self._inner.commit(state.inner_state)
    
    def __repr__(self) -> str:
        return f"MatchScorable({self._pattern.source!r})"
