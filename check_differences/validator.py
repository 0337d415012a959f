"""
Validator
=========

Keeps only contradictions whose both files belong to the input set.
"""

import logging
from typing import Iterable

from .artifacts import ArtifactSet
from .models import AnalysisResult, Contradiction

logger = logging.getLogger(__name__)


def is_valid(contradiction: Contradiction, known: frozenset) -> bool:
    """Exact membership check; synthetic placeholders always pass"""
    if contradiction.synthetic:
        return True
    return contradiction.subject in known and contradiction.object in known


def filter_contradictions(
    candidates: Iterable[Contradiction],
    artifacts: ArtifactSet
) -> AnalysisResult:
    """
    Split candidates into kept and discarded, preserving order.

    Args:
        candidates: Parsed contradictions
        artifacts: The set the backend was asked about

    Returns:
        AnalysisResult with kept contradictions and discarded candidates
    """
    known = frozenset(artifacts.identifiers)
    kept = []
    discarded = []

    for candidate in candidates:
        if is_valid(candidate, known):
            kept.append(candidate)
        else:
            discarded.append(candidate)
            logger.warning(
                f"Discarding contradiction with unknown file: "
                f"{candidate.subject!r} vs {candidate.object!r}"
            )

    return AnalysisResult(contradictions=tuple(kept), discarded=tuple(discarded))
