"""
Result Models
=============

Internal representation of contradictions and analysis results.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from .schemas import ResultStatus


# Synthetic descriptions
ANALYSIS_FAILED_MESSAGE = "an error occurred while analyzing contradictions"
UNPARSEABLE_MESSAGE = "contradictions were found but their details could not be parsed"


@dataclass(frozen=True)
class Contradiction:
    """
    Inconsistency between two input files.

    ``synthetic`` marks a placeholder produced on failure paths: its subject
    lists every input identifier and its object is empty.
    """
    subject: str
    object: str
    description: str
    synthetic: bool = False

    @classmethod
    def sentinel(cls, identifiers: Iterable[str], description: str) -> "Contradiction":
        """Placeholder contradiction that references the whole input set"""
        return cls(
            subject=",".join(identifiers),
            object="",
            description=description,
            synthetic=True
        )

    def to_line(self) -> str:
        """Render as a single report line; line breaks in the description collapse to spaces"""
        description = " ".join(self.description.split())
        if self.synthetic:
            return f"{self.subject}:{description}"
        return f"{self.subject},{self.object}:{description}"


@dataclass(frozen=True)
class AnalysisResult:
    """
    Validated outcome of one analysis.

    ``contradictions`` are the ones to report, ``discarded`` the candidates
    the validator rejected because they referenced unknown files.
    """
    contradictions: Tuple[Contradiction, ...] = ()
    discarded: Tuple[Contradiction, ...] = ()

    @classmethod
    def failed(cls, identifiers: Iterable[str], description: str = ANALYSIS_FAILED_MESSAGE) -> "AnalysisResult":
        return cls(contradictions=(Contradiction.sentinel(identifiers, description),))

    @property
    def is_empty(self) -> bool:
        return not self.contradictions

    @property
    def status(self) -> ResultStatus:
        if self.contradictions:
            return ResultStatus.FOUND
        if self.discarded:
            return ResultStatus.PARTIALLY_INVALID
        return ResultStatus.EMPTY
