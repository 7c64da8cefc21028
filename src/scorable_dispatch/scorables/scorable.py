"""
Core abstraction for two-phase candidates.

A Scorable is prepared against a resolution scope (possibly declining),
scored so it can be compared with competing candidates, and committed if it
wins. The prepared state belongs to one prepare -> commit cycle.
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from ..resolution import Resolver


State = TypeVar("State")
Score = TypeVar("Score")


class Scorable(ABC, Generic[State, Score]):
    """
    Protocol for candidates competing to handle an input.
    
    Preparation is the only phase that may suspend. Returning ``None`` from
    ``prepare`` means "no candidacy" and is not an error; cancellation
    surfaces as ``asyncio.CancelledError``; anything else raised is a hard
    failure for the caller.
    """
    
    @abstractmethod
    async def prepare(self, scope: Resolver) -> Optional[State]:
        """
        Try to claim the input visible through ``scope``.
        
        :param scope: Resolver exposing the input and contextual bindings
        :return: Private state for ``score``/``commit``, or None to decline
        """
    
    @abstractmethod
    def score(self, state: State) -> Score:
        """Comparable quality of a successful preparation."""
    
    @abstractmethod
    def commit(self, state: State) -> Any:
        """Execute using the prepared state."""
