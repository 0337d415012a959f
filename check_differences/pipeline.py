"""
Analysis Pipeline
=================

artifacts -> backend selection -> backend.analyze -> discard policy -> report
"""

import asyncio
import logging
from typing import Iterable

from .artifacts import ArtifactSet, load_artifacts
from .backends import select_backend, unavailable_result
from .config import Settings
from .errors import ConfigurationError, UsageError
from .models import AnalysisResult, Contradiction, UNPARSEABLE_MESSAGE
from .reporter import Report, render
from .schemas import DiscardPolicy, ResultStatus

logger = logging.getLogger(__name__)


MIN_ARTIFACTS = 2


def apply_discard_policy(
    result: AnalysisResult,
    artifacts: ArtifactSet,
    policy: DiscardPolicy
) -> AnalysisResult:
    """Decide what a result whose every candidate was discarded means"""
    if result.status != ResultStatus.PARTIALLY_INVALID:
        return result

    if policy == DiscardPolicy.FAIL:
        logger.warning(
            f"All {len(result.discarded)} reported contradiction(s) referenced unknown files; "
            f"reporting failure"
        )
        return AnalysisResult(
            contradictions=(Contradiction.sentinel(artifacts.identifiers, UNPARSEABLE_MESSAGE),),
            discarded=result.discarded
        )

    logger.warning(
        f"All {len(result.discarded)} reported contradiction(s) referenced unknown files; "
        f"treating as no contradictions"
    )
    return result


async def run_analysis(artifacts: ArtifactSet, settings: Settings) -> AnalysisResult:
    """
    Analyze one artifact set with the configured backend.

    Args:
        artifacts: Files to compare (at least two)
        settings: Loaded settings

    Returns:
        Validated AnalysisResult

    Raises:
        UsageError: If fewer than two artifacts are supplied
    """
    if len(artifacts) < MIN_ARTIFACTS:
        raise UsageError(f"at least {MIN_ARTIFACTS} files are required to compare")

    try:
        backend = select_backend(settings)
    except ConfigurationError as e:
        return unavailable_result(artifacts, settings.failure_policy, str(e))

    try:
        result = await backend.analyze(artifacts)
    finally:
        await backend.close()

    return apply_discard_policy(result, artifacts, settings.discard_policy)


def check_files(paths: Iterable[str], settings: Settings) -> Report:
    """
    Load files, analyze them and render the report.

    Raises:
        UsageError: If fewer than two files or a duplicated file is given
        MissingArtifactError: If a file cannot be read
    """
    paths = list(paths)
    if len(paths) < MIN_ARTIFACTS:
        raise UsageError(f"at least {MIN_ARTIFACTS} files are required to compare")

    try:
        artifacts = load_artifacts(paths)
    except ValueError as e:
        raise UsageError(str(e)) from e

    result = asyncio.run(run_analysis(artifacts, settings))
    return render(result)
