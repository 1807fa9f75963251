"""Character-subsequence fuzzy matching with heuristic scoring.

Based on https://gist.github.com/CDillinger/2aa02128f840bdca90340ce08ee71bc2
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

ADJACENCY_BONUS = 2  # consecutive matched characters
SEPARATOR_BONUS = 10  # match right after a separator (or at the very start)
CAMEL_BONUS = 10  # uppercase match right after a lowercase letter

LEADING_LETTER_PENALTY = -3  # per candidate char before the first match
MAX_LEADING_LETTER_PENALTY = -9
UNMATCHED_LETTER_PENALTY = -1

CONFIRMED_MATCH_BONUS = 1000

SEPARATORS = frozenset("_ ")

_WORD_SPLIT_RE = re.compile(r"[ ;,]")


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of a scored match. Unpacks as ``(is_match, score)``.

    ``indices`` lists the candidate positions committed to the match, in
    order, for callers that want to highlight them.
    """

    is_match: bool
    score: int
    indices: tuple[int, ...] = ()

    def __iter__(self) -> Iterator[bool | int]:
        yield self.is_match
        yield self.score


def _is_upper(char: str) -> bool:
    return char == char.upper() and char.lower() != char.upper()


def _is_lower(char: str) -> bool:
    return char == char.lower() and char.lower() != char.upper()


def fuzzy_match(candidate: str, pattern: str) -> bool:
    """Return ``True`` if every char of *pattern* appears in *candidate* in order.

    Comparison is case-insensitive. An empty pattern or an empty candidate
    never matches.
    """
    pattern_idx = 0
    pattern_len = len(pattern)
    for char in candidate:
        if pattern_idx == pattern_len:
            break
        if pattern[pattern_idx].lower() == char.lower():
            pattern_idx += 1

    return pattern_len != 0 and len(candidate) != 0 and pattern_idx == pattern_len


def fuzzy_match_score(candidate: str, pattern: str) -> MatchResult:
    """Match *pattern* against *candidate* and score the quality of the match.

    Matches that are contiguous, start after a separator (``_`` or space) or
    at the beginning, or land on a camel-case hump score higher. Characters
    skipped before the first match and characters left unmatched cost points.

    When several candidate positions could serve the same pattern character,
    the best-scoring one seen so far is held back and only committed once the
    scan moves past it. Ties go to the later position.

    The score is computed even when the pattern does not fully match.
    """
    score = 0
    pattern_idx = 0
    pattern_len = len(pattern)
    prev_matched = False
    prev_lower = False
    prev_separator = True  # first letter gets the separator bonus

    best_letter: str | None = None
    best_lower: str | None = None
    best_letter_idx: int | None = None
    best_letter_score = 0
    matched_indices: list[int] = []

    for str_idx, str_char in enumerate(candidate):
        pattern_char = pattern[pattern_idx] if pattern_idx != pattern_len else None
        pattern_lower = pattern_char.lower() if pattern_char is not None else None
        str_lower = str_char.lower()

        next_match = pattern_char is not None and pattern_lower == str_lower
        rematch = best_letter is not None and best_lower == str_lower

        advanced = next_match and best_letter is not None
        pattern_repeat = (
            best_letter is not None and pattern_char is not None and best_lower == pattern_lower
        )
        if advanced or pattern_repeat:
            score += best_letter_score
            matched_indices.append(best_letter_idx)  # type: ignore[arg-type]
            best_letter = None
            best_lower = None
            best_letter_idx = None
            best_letter_score = 0

        if next_match or rematch:
            new_score = 0

            # Penalties are negative, so max() picks the smaller penalty.
            if pattern_idx == 0:
                score += max(str_idx * LEADING_LETTER_PENALTY, MAX_LEADING_LETTER_PENALTY)

            if prev_matched:
                new_score += ADJACENCY_BONUS
            if prev_separator:
                new_score += SEPARATOR_BONUS
            if prev_lower and _is_upper(str_char):
                new_score += CAMEL_BONUS

            if next_match:
                pattern_idx += 1

            if new_score >= best_letter_score:
                # The displaced letter is now unmatched.
                if best_letter is not None:
                    score += UNMATCHED_LETTER_PENALTY

                best_letter = str_char
                best_lower = str_lower
                best_letter_idx = str_idx
                best_letter_score = new_score

            prev_matched = True
        else:
            score += UNMATCHED_LETTER_PENALTY
            prev_matched = False

        prev_lower = _is_lower(str_char)
        prev_separator = str_char in SEPARATORS

    if best_letter is not None:
        score += best_letter_score
        matched_indices.append(best_letter_idx)  # type: ignore[arg-type]

    is_match = pattern_len != 0 and len(candidate) != 0 and pattern_idx == pattern_len
    return MatchResult(is_match=is_match, score=score, indices=tuple(matched_indices))


def split_words(text: str) -> list[str]:
    """Split *text* on spaces, semicolons and commas, dropping empty tokens."""
    return [word for word in _WORD_SPLIT_RE.split(text) if word]


def search_string(candidate: str | None, pattern: str | None) -> int:
    """Score every word of *pattern* against every word of *candidate*.

    Each confirmed word match adds ``CONFIRMED_MATCH_BONUS``. Positive pair
    scores are added as well, even for pairs that did not fully match;
    negative pair scores are ignored.

    Returns 0 when either argument is ``None``, empty or whitespace-only.
    """
    if not pattern or pattern.isspace() or not candidate or candidate.isspace():
        return 0

    total = 0
    candidate_words = split_words(candidate)
    for pattern_word in split_words(pattern):
        for candidate_word in candidate_words:
            result = fuzzy_match_score(candidate_word.strip(), pattern_word.strip())
            if result.is_match:
                total += CONFIRMED_MATCH_BONUS
            if result.score > 0:
                total += result.score
    return total
