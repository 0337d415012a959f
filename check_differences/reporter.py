"""
Reporter
========

Renders an AnalysisResult into report text and an exit signal.
"""

from dataclasses import dataclass

from .models import AnalysisResult
from .schemas import ExitSignal


@dataclass(frozen=True)
class Report:
    """Final output of a run"""
    text: str
    signal: ExitSignal


def render(result: AnalysisResult) -> Report:
    """One ``file1,file2:description`` line per contradiction, no trailing newline"""
    if result.is_empty:
        return Report(text="", signal=ExitSignal.SUCCESS)

    text = "\n".join(c.to_line() for c in result.contradictions)
    return Report(text=text, signal=ExitSignal.FAILURE)
