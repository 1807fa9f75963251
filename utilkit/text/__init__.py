"""Text utilities: fuzzy matching, base-N numerals, hex, string helpers."""

from utilkit.text.fuzzy_matcher import MatchResult, fuzzy_match, fuzzy_match_score, search_string
from utilkit.text.fuzzy_search import find_best_match, find_matches

__all__ = [
    "MatchResult",
    "find_best_match",
    "find_matches",
    "fuzzy_match",
    "fuzzy_match_score",
    "search_string",
]
