"""
Compiled patterns and their match results.

A Pattern pairs a compiled matcher with its source string. The source string
is the pattern's identity: two patterns are equal when their sources are equal,
whatever the matcher object.
"""
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional


@dataclass(frozen=True)
class Capture:
    """
    One capture span of a match.
    
    Attributes:
        index: Group number (0 is the whole match)
        name: Group name, if the group is named
        value: Captured text ("" when the group did not participate)
        start: Start offset in the searched text (-1 when unsuccessful)
        end: End offset in the searched text (-1 when unsuccessful)
        success: Whether this group participated in the match
    """
    index: int
    name: Optional[str]
    value: str
    start: int
    end: int
    success: bool
    
    @property
    def length(self) -> int:
        return len(self.value)


class Captures(tuple):
    """Ordered capture spans of a match; index 0 is the whole match."""
    __slots__ = ()


@dataclass(frozen=True)
class MatchResult:
    """Immutable outcome of running a Pattern against a text."""
    success: bool
    groups: Captures = field(default_factory=Captures)
    named: Mapping[str, Capture] = field(default_factory=lambda: MappingProxyType({}))
    
    @classmethod
    def failed(cls) -> "MatchResult":
        return cls(success=False)
    
    @classmethod
    def from_match(cls, match) -> "MatchResult":
        """
        Build a result from an ``re.Match`` (or a compatible match object).
        
        :param match: Match object exposing ``span``, ``group`` and ``re``
        :return: Successful MatchResult
        """
        names = {index: name for name, index in match.re.groupindex.items()}
        groups = []
        for index in range(match.re.groups + 1):
            start, end = match.span(index)
            success = start != -1
            groups.append(
                Capture(
                    index=index,
                    name=names.get(index),
                    value=match.group(index) if success else "",
                    start=start,
                    end=end,
                    success=success,
                )
            )
        
        captures = Captures(groups)
        named = {name: captures[index] for name, index in match.re.groupindex.items()}
        return cls(success=True, groups=captures, named=MappingProxyType(named))
    
    @property
    def value(self) -> str:
        """Text of the whole match ("" for a failed match)."""
        if not self.success or not self.groups:
            return ""
        return self.groups[0].value
    
    @property
    def length(self) -> int:
        return len(self.value)
    
    def group(self, name: str) -> Optional[Capture]:
        """Look up a named capture, successful or not."""
        return self.named.get(name)


@dataclass(frozen=True)
class Pattern:
    """A compiled matcher plus its canonical source string."""
    source: str
    matcher: Any = field(compare=False, repr=False)
    
    def match(self, text: str) -> MatchResult:
        """
        Search ``text`` for the first occurrence of this pattern.
        
        :param text: Text to search
        :return: MatchResult (unsuccessful when nothing matched)
        """
        found = self.matcher.search(text)
        if found is None:
            return MatchResult.failed()
        return MatchResult.from_match(found)


PatternCompiler = Callable[[str], Pattern]


def compile_pattern(source: str, flags: int = 0) -> Pattern:
    """
    Default pattern compiler backed by the ``re`` module.
    
    Malformed sources raise ``re.error`` unchanged.
    """
    return Pattern(source=source, matcher=re.compile(source, flags))


def make_compiler(flags: int = 0) -> PatternCompiler:
    """Build a compiler callable that applies ``flags`` to every pattern."""
    def compiler(source: str) -> Pattern:
        return compile_pattern(source, flags)
    
    return compiler
