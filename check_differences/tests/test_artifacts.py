"""
Tests for Artifact loading
==========================
"""

import pytest

from check_differences.artifacts import Artifact, ArtifactSet, load_artifacts
from check_differences.errors import MissingArtifactError


class TestArtifactSet:
    """Tests for the ordered artifact collection"""

    def test_preserves_supply_order(self):
        artifacts = ArtifactSet.from_pairs([("b.md", "doc"), ("a.go", "code")])
        assert artifacts.identifiers == ("b.md", "a.go")
        assert artifacts[0] == Artifact(identifier="b.md", content="doc")

    def test_membership_is_exact(self):
        artifacts = ArtifactSet.from_pairs([("./a.go", ""), ("b.md", "")])
        assert "./a.go" in artifacts
        assert "a.go" not in artifacts

    def test_rejects_duplicate_identifiers(self):
        with pytest.raises(ValueError):
            ArtifactSet.from_pairs([("a.go", "x"), ("a.go", "y")])

    def test_artifacts_are_immutable(self):
        artifact = Artifact(identifier="a.go", content="x")
        with pytest.raises(AttributeError):
            artifact.content = "y"


class TestLoadArtifacts:
    """Tests for reading files from disk"""

    def test_reads_content_with_identifiers_as_given(self, write_files):
        write_files("src/a.go", "doc/b.md")
        artifacts = load_artifacts(["src/a.go", "doc/b.md"])
        assert artifacts.identifiers == ("src/a.go", "doc/b.md")
        assert artifacts[0].content == "content\n"

    def test_missing_file_raises(self, write_files):
        write_files("a.go")
        with pytest.raises(MissingArtifactError) as exc:
            load_artifacts(["a.go", "missing.md"])
        assert exc.value.identifier == "missing.md"
        assert "missing.md" in str(exc.value)

    def test_directory_is_not_an_artifact(self, tmp_path, write_files):
        write_files("a.go")
        (tmp_path / "docs").mkdir()
        with pytest.raises(MissingArtifactError):
            load_artifacts(["a.go", "docs"])
