"""
Ordering and scalar scoring of match results.
"""
from typing import Tuple

from .pattern import MatchResult


def match_sort_key(match: MatchResult) -> Tuple[bool, int]:
    """
    Sort key ranking match results, smaller is better.
    
    Failed matches sort after every successful match; among successful
    matches the longer whole match sorts first. Equal keys are left to the
    caller's input order.
    """
    return (not match.success, -match.length)


def compare_matches(one: MatchResult, two: MatchResult) -> int:
    """Three-way comparison on ``match_sort_key`` (-1 means ``one`` is better)."""
    key_one = match_sort_key(one)
    key_two = match_sort_key(two)
    return (key_one > key_two) - (key_one < key_two)


def normalized_score(match: MatchResult) -> float:
    """
    Normalized 0-1 score for a match.
    
    Sums the lengths of all groups after group 0 and divides by the length of
    group 0. Meaningful only when the pattern matches the entire input, so
    that group 0 is the input and the other groups are its significant parts.
    
    :param match: Successful match with a non-empty whole match
    :return: Score (0.0 when the pattern has no capture groups)
    :raises: ValueError for failed or empty matches
    """
    if not match.success:
        raise ValueError("Cannot score a failed match")
    
    denominator = match.groups[0].length
    if denominator == 0:
        raise ValueError("Cannot score an empty match")
    
    numerator = sum(capture.length for capture in match.groups[1:])
    return numerator / denominator
