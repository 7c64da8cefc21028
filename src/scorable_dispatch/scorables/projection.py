"""
Score projection for scorables.

Wraps a scorable so callers see a derived score (for example a normalized
0-1 scalar instead of a raw match result) while preparation and commit are
unchanged.
"""
from typing import Any, Callable, Optional

from ..resolution import Resolver
from .scorable import Scorable


class ProjectedScorable(Scorable[Any, Any]):
    """Scorable that maps its inner scorable's score through ``project``."""
    
    def __init__(self, inner: Scorable, project: Callable[[Any], Any]):
        self._inner = inner
        self._project = project
    
    async def prepare(self, scope: Resolver) -> Optional[Any]:
        return await self._inner.prepare(scope)
    
    def score(self, state: Any) -> Any:
        return self._project(self._inner.score(state))
    
    def commit(self, state: Any) -> Any:
        return self._inner.commit(state)


def map_score(scorable: Scorable, project: Callable[[Any], Any]) -> ProjectedScorable:
    """Expose ``project(score)`` as the score of ``scorable``."""
    return ProjectedScorable(scorable, project)
