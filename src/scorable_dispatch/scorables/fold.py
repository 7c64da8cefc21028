"""
Best-of-N reduction over scorables.

Folding turns many competing scorables into one: every child is prepared,
the child whose score sorts first under the supplied key wins, and the folded
scorable scores and commits through the winner.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from ..resolution import Resolver
from .scorable import Scorable


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FoldState:
    """Winning child of a fold and the state it prepared."""
    index: int
    winner: Scorable
    state: Any
    score: Any


class FoldScorable(Scorable[FoldState, Any]):
    """
    Scorable choosing the best of its children.
    
    Children are prepared concurrently against the same scope. The winner is
    the participating child with the smallest ``key(score)``; exact ties go to
    the child that comes first in input order, regardless of which finished
    first. A lone participant wins without consulting the key. A child
    whose own preparation was cancelled does not participate.
    Cancelling the fold itself cancels every in-flight child.
    """
    
    def __init__(self, scorables: Iterable[Scorable], key: Callable[[Any], Any]):
        self._scorables = tuple(scorables)
        self._key = key
    
    @property
    def scorables(self) -> tuple:
        return self._scorables
    
    async def prepare(self, scope: Resolver) -> Optional[FoldState]:
        if not self._scorables:
            return None
        
        results = await asyncio.gather(
            *(scorable.prepare(scope) for scorable in self._scorables),
            return_exceptions=True,
        )
        
        prepared = []
        for index, (scorable, result) in enumerate(zip(self._scorables, results)):
            if isinstance(result, asyncio.CancelledError):
                logger.debug(f"Fold child {index} cancelled; not participating")
                continue
            if isinstance(result, BaseException):
                raise result
            if result is None:
                continue
            prepared.append(
                FoldState(index=index, winner=scorable, state=result, score=scorable.score(result))
            )
        
        if not prepared:
            return None
        
        if len(prepared) == 1:
            best = prepared[0]
        else:
            best = min(prepared, key=lambda candidate: self._key(candidate.score))
        logger.debug(
            f"Fold picked child {best.index} of {len(self._scorables)} "
            f"({len(prepared)} participating)"
        )
        return best
    
    def score(self, state: FoldState) -> Any:
        return state.score
    
    def commit(self, state: FoldState) -> Any:
        return state.winner.commit(state.state)
    
    def __repr__(self) -> str:
        return f"FoldScorable({len(self._scorables)} scorables)"


def fold(scorables: Iterable[Scorable], key: Callable[[Any], Any]) -> FoldScorable:
    """
    Fold scorables into one that picks the best-scoring participant.
    
    :param scorables: Competing scorables, in tie-break order
    :param key: Sort key over scores; smaller sorts better
    :return: FoldScorable
    """
    return FoldScorable(scorables, key)
