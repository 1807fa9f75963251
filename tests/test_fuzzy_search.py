"""Tests for ranking candidates with the word-aggregated scorer."""

from utilkit.text.fuzzy_search import find_best_match, find_matches


class TestFindBestMatch:
    def test_exact_word_wins(self) -> None:
        candidates = ["bar", "foo bar", "food"]
        result = find_best_match("foo", candidates)
        assert result == ("foo bar", 1)

    def test_camel_case_preferred(self) -> None:
        candidates = ["getbarclass", "getBarClass"]
        result = find_best_match("gbc", candidates)
        assert result is not None
        title, idx = result
        assert title == "getBarClass"
        assert idx == 1

    def test_no_match_below_threshold(self) -> None:
        assert find_best_match("foo", ["bar", "baz"]) is None

    def test_custom_threshold(self) -> None:
        assert find_best_match("foo", ["food"], threshold=2000) is None

    def test_empty_query(self) -> None:
        assert find_best_match("", ["task"]) is None

    def test_empty_candidates(self) -> None:
        assert find_best_match("query", []) is None


class TestFindMatches:
    def test_ranked_best_first(self) -> None:
        results = find_matches("foo", ["bar", "foo bar", "food"])
        assert results == [("foo bar", 1014, 1), ("food", 1013, 2)]

    def test_ties_keep_input_order(self) -> None:
        results = find_matches("a", ["a", "x", "a"])
        assert [idx for _title, _score, idx in results] == [0, 2]

    def test_limit(self) -> None:
        candidates = [f"task {i}" for i in range(20)]
        results = find_matches("task", candidates, limit=3)
        assert len(results) == 3

    def test_no_limit(self) -> None:
        candidates = [f"task {i}" for i in range(20)]
        assert len(find_matches("task", candidates, limit=None)) == 20

    def test_scores_are_ints(self) -> None:
        results = find_matches("foo", ["foo"])
        assert len(results) == 1
        _title, score, _idx = results[0]
        assert isinstance(score, int)
        assert score > 1000

    def test_empty_query(self) -> None:
        assert find_matches("", ["task"]) == []

    def test_empty_candidates(self) -> None:
        assert find_matches("query", []) == []
