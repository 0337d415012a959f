"""
Artifacts
=========

Input files supplied for comparison.

An Artifact is an (identifier, content) pair. The identifier is the path
exactly as given by the caller and is never normalized: it is echoed back
verbatim in the report.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Tuple

from .errors import MissingArtifactError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Artifact:
    """Single input file"""
    identifier: str
    content: str


class ArtifactSet:
    """
    Ordered, immutable collection of artifacts.

    Supply order is kept: backends use it for prompt sections and the
    rule-based backend uses the first artifacts as its canned subjects.
    """

    def __init__(self, artifacts: Iterable[Artifact]):
        self._artifacts: Tuple[Artifact, ...] = tuple(artifacts)

        seen = set()
        for artifact in self._artifacts:
            if artifact.identifier in seen:
                raise ValueError(f"Duplicate artifact identifier: {artifact.identifier}")
            seen.add(artifact.identifier)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "ArtifactSet":
        """Build from (identifier, content) pairs"""
        return cls(Artifact(identifier=i, content=c) for i, c in pairs)

    @property
    def identifiers(self) -> Tuple[str, ...]:
        return tuple(a.identifier for a in self._artifacts)

    def __iter__(self) -> Iterator[Artifact]:
        return iter(self._artifacts)

    def __len__(self) -> int:
        return len(self._artifacts)

    def __getitem__(self, index: int) -> Artifact:
        return self._artifacts[index]

    def __contains__(self, identifier: object) -> bool:
        return any(a.identifier == identifier for a in self._artifacts)

    def __repr__(self) -> str:
        return f"ArtifactSet({list(self.identifiers)!r})"


def load_artifacts(paths: Iterable[str]) -> ArtifactSet:
    """
    Read files into an ArtifactSet.

    Every path is checked before any content is read, so a missing file
    aborts the run without partial work.

    Args:
        paths: File paths as supplied on the command line

    Returns:
        ArtifactSet in supply order

    Raises:
        MissingArtifactError: If a path is not a readable file
        ValueError: If a path is given twice
    """
    paths = list(paths)

    for path in paths:
        if not Path(path).is_file():
            raise MissingArtifactError(f"file '{path}' not found", identifier=path)

    artifacts = []
    for path in paths:
        try:
            content = Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise MissingArtifactError(
                f"file '{path}' could not be read: {e}", identifier=path
            ) from e
        logger.debug(f"Loaded {path} ({len(content)} chars)")
        artifacts.append(Artifact(identifier=path, content=content))

    return ArtifactSet(artifacts)
