"""
Scorable abstraction and combinators.

- Scorable: prepare / score / commit protocol
- FoldScorable, fold: best-of-N selection under a sort key
- ProjectedScorable, map_score: derived scores
"""
from .scorable import Scorable
from .fold import FoldScorable, FoldState, fold
from .projection import ProjectedScorable, map_score

__all__ = [
    "Scorable",
    "FoldScorable",
    "FoldState",
    "fold",
    "ProjectedScorable",
    "map_score",
]
