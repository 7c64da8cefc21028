from dataclasses import dataclass
from typing import Any, Optional

from .matching import MatchResult


@dataclass
class DispatchOutcome:
    text: Optional[str]
    matched: bool
    pattern: Optional[str] = None
    match: Optional[MatchResult] = None
    score: Optional[float] = None
    result: Any = None
