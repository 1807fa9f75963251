"""Rank candidate strings with the word-aggregated fuzzy scorer via rapidfuzz."""

from __future__ import annotations

from typing import Any

from rapidfuzz import process

from utilkit.text.fuzzy_matcher import search_string


def _search_scorer(query: str, choice: str, **_kwargs: Any) -> int:
    """Adapt ``search_string`` to rapidfuzz's ``scorer(query, choice)`` order."""
    return search_string(choice, query)


def find_best_match(
    query: str,
    candidates: list[str],
    *,
    threshold: int = 1,
) -> tuple[str, int] | None:
    """Find the highest scoring candidate for *query*.

    Returns ``(candidate, index)`` of the best match, or ``None`` if no
    candidate scores at or above *threshold*.
    """
    matches = find_matches(query, candidates, threshold=threshold, limit=1)
    if not matches:
        return None
    match, _score, index = matches[0]
    return match, index


def find_matches(
    query: str,
    candidates: list[str],
    *,
    threshold: int = 1,
    limit: int | None = 5,
) -> list[tuple[str, int, int]]:
    """Return up to *limit* candidates scoring at least *threshold*.

    Each element is ``(candidate, score, index)``, best first. Equal scores
    keep the order of *candidates*.
    """
    if not query or not candidates:
        return []

    results = process.extract(
        query,
        candidates,
        scorer=_search_scorer,
        score_cutoff=threshold,
        limit=None,
    )
    ranked = sorted(
        ((str(match), int(score), int(idx)) for match, score, idx in results),
        key=lambda item: (-item[1], item[2]),
    )
    if limit is not None:
        ranked = ranked[:limit]
    return ranked
