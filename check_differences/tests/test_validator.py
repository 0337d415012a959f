"""
Tests for the Validator
=======================
"""

from check_differences.artifacts import ArtifactSet
from check_differences.models import Contradiction
from check_differences.schemas import ResultStatus
from check_differences.validator import filter_contradictions


ARTIFACTS = ArtifactSet.from_pairs([("a.go", "code"), ("b.md", "doc"), ("c.txt", "notes")])


class TestFilterContradictions:
    """Tests for membership filtering"""

    def test_keeps_in_set_and_preserves_order(self):
        candidates = [
            Contradiction("b.md", "a.go", "first"),
            Contradiction("a.go", "c.txt", "second"),
        ]
        result = filter_contradictions(candidates, ARTIFACTS)
        assert list(result.contradictions) == candidates
        assert result.discarded == ()
        assert result.status == ResultStatus.FOUND

    def test_drops_unknown_identifiers(self):
        candidates = [
            Contradiction("a.go", "external.md", "outside"),
            Contradiction("a.go", "b.md", "inside"),
        ]
        result = filter_contradictions(candidates, ARTIFACTS)
        assert [c.description for c in result.contradictions] == ["inside"]
        assert [c.description for c in result.discarded] == ["outside"]

    def test_no_path_normalization(self):
        result = filter_contradictions([Contradiction("./a.go", "b.md", "x")], ARTIFACTS)
        assert result.is_empty

    def test_all_discarded_is_partially_invalid(self):
        result = filter_contradictions([Contradiction("x.go", "y.md", "x")], ARTIFACTS)
        assert result.is_empty
        assert result.status == ResultStatus.PARTIALLY_INVALID

    def test_self_pair_passes_membership(self):
        result = filter_contradictions([Contradiction("a.go", "a.go", "self")], ARTIFACTS)
        assert len(result.contradictions) == 1

    def test_synthetic_passes(self):
        sentinel = Contradiction.sentinel(ARTIFACTS.identifiers, "failed")
        result = filter_contradictions([sentinel], ARTIFACTS)
        assert result.contradictions == (sentinel,)

    def test_idempotent(self):
        candidates = [
            Contradiction("a.go", "b.md", "one"),
            Contradiction("nope", "b.md", "two"),
        ]
        once = filter_contradictions(candidates, ARTIFACTS)
        twice = filter_contradictions(once.contradictions, ARTIFACTS)
        assert twice.contradictions == once.contradictions
        assert twice.discarded == ()

    def test_empty_candidates(self):
        result = filter_contradictions([], ARTIFACTS)
        assert result.status == ResultStatus.EMPTY
