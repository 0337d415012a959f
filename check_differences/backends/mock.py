"""
Rule-Based Backend
==================

Deterministic stand-in for an LLM, used for tests and dry runs.

If any input path contains ``incorrect`` it answers with a fixed set of
canned contradictions about the first files; otherwise it answers with
nothing. The content is not real analysis.
"""

import logging

from .base import ReasoningBackend
from ..artifacts import ArtifactSet
from ..schemas import OutputFormat

logger = logging.getLogger(__name__)


INCORRECT_MARKER = "incorrect"

CANNED_CONTRADICTIONS = [
    "add function does not convert its arguments to numbers",
    "multiply function is not described in the documentation",
    "optional third argument (operation type) is not described in the documentation",
]

CANNED_THIRD_FILE_CONTRADICTION = "feature descriptions do not match between the files"


class RuleBasedBackend(ReasoningBackend):
    """Canned answers keyed on the ``incorrect`` path marker"""

    name = "mock"
    output_format = OutputFormat.LINE

    async def complete(self, artifacts: ArtifactSet) -> str:
        if not any(INCORRECT_MARKER in identifier for identifier in artifacts.identifiers):
            return ""

        if len(artifacts) < 2:
            return ""

        file1 = artifacts[0].identifier
        file2 = artifacts[1].identifier

        lines = [f"{file1},{file2}:{text}" for text in CANNED_CONTRADICTIONS]

        if len(artifacts) > 2:
            file3 = artifacts[2].identifier
            lines.append(f"{file1},{file3}:{CANNED_THIRD_FILE_CONTRADICTION}")

        logger.debug(f"Mock backend produced {len(lines)} canned line(s)")
        return "\n".join(lines)
