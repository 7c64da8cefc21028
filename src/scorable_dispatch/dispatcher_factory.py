"""
Factory for the top-level dispatcher.

Groups candidates by pattern source, folds the handlers sharing a pattern so
they compete among themselves, and folds the per-pattern match scorables into
the single scorable the dispatcher prepares for every message.
"""
import logging
from typing import Any, Callable, Dict, Iterable, List, Tuple

from .handlers import binding_sort_key
from .matching import MatchScorable, PatternCompiler, compile_pattern, match_sort_key
from .scorables import FoldScorable, Scorable, fold


logger = logging.getLogger(__name__)


def group_by_pattern(candidates: Iterable[Tuple[str, Scorable]]) -> Dict[str, List[Scorable]]:
    """
    Group candidate scorables by pattern source string.
    
    Grouping is by literal source text: differently written but equivalent
    patterns stay separate. Patterns and scorables keep first-seen order.
    """
    groups: Dict[str, List[Scorable]] = {}
    for source, scorable in candidates:
        groups.setdefault(source, []).append(scorable)
    return groups


def build_dispatcher(
    candidates: Iterable[Tuple[str, Scorable]],
    compiler: PatternCompiler = compile_pattern,
    handler_key: Callable[[Any], Any] = binding_sort_key,
) -> FoldScorable:
    """
    Build the top-level dispatching scorable.
    
    :param candidates: (pattern source, inner scorable) pairs
    :param compiler: Turns a pattern source into a Pattern
    :param handler_key: Sort key over inner scores, used among scorables sharing a pattern;
        the default only suits HandlerScorable groups, whose scores are Bindings
    :return: Scorable picking the longest match, then the best handler for it
    """
    groups = group_by_pattern(candidates)
    
    scorables = [
        MatchScorable(compiler(source), fold(inner, handler_key))
        for source, inner in groups.items()
    ]
    
    logger.debug(
        f"Built dispatcher: {len(scorables)} patterns, "
        f"{sum(len(inner) for inner in groups.values())} candidates"
    )
    return fold(scorables, match_sort_key)
