"""
Backend Base Types
==================

Common interface for all reasoning backends.
"""

import logging
from abc import ABC, abstractmethod

from ..artifacts import ArtifactSet
from ..errors import ConfigurationError, TransportError
from ..models import AnalysisResult
from ..parser import parse_response
from ..schemas import FailurePolicy, OutputFormat
from ..validator import filter_contradictions

logger = logging.getLogger(__name__)


def unavailable_result(
    artifacts: ArtifactSet,
    policy: FailurePolicy,
    reason: str
) -> AnalysisResult:
    """
    Result for a backend whose credential or tool is missing.

    fail-closed reports a synthetic contradiction so the run exits 1;
    fail-open reports nothing.
    """
    if policy == FailurePolicy.FAIL_OPEN:
        logger.warning(f"Backend unavailable ({reason}); fail-open, reporting no contradictions")
        return AnalysisResult()

    logger.error(f"Backend unavailable ({reason}); fail-closed, reporting failure")
    return AnalysisResult.failed(artifacts.identifiers)


class ReasoningBackend(ABC):
    """
    Strategy interface for a reasoning backend.

    Subclasses MUST set ``name`` and ``output_format`` as class attributes
    and implement complete(). The raw text returned by complete() is parsed
    and validated here, never inside the backend.
    """

    name: str
    output_format: OutputFormat

    def __init__(self, failure_policy: FailurePolicy = FailurePolicy.FAIL_CLOSED):
        self.failure_policy = failure_policy

    @abstractmethod
    async def complete(self, artifacts: ArtifactSet) -> str:
        """
        Return the backend's raw answer for an artifact set.

        Raises:
            ConfigurationError: If the credential or tool is missing
            TransportError: If the call itself fails
        """

    async def close(self):
        """Release backend resources"""
        pass

    async def analyze(self, artifacts: ArtifactSet) -> AnalysisResult:
        """
        Run the backend and normalize its answer.

        Args:
            artifacts: Files to compare

        Returns:
            Validated AnalysisResult
        """
        try:
            raw = await self.complete(artifacts)
        except ConfigurationError as e:
            return unavailable_result(artifacts, self.failure_policy, str(e))
        except TransportError as e:
            logger.error(f"{self.name} backend failed: {e}")
            return AnalysisResult.failed(artifacts.identifiers)

        candidates = parse_response(raw, self.output_format, artifacts.identifiers)
        result = filter_contradictions(candidates, artifacts)
        logger.info(
            f"{self.name} backend: {len(result.contradictions)} contradiction(s), "
            f"{len(result.discarded)} discarded"
        )
        return result
