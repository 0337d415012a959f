"""
Response Parser
===============

Turns a backend's raw free-form answer into candidate contradictions.

Two independent strategies:
- JSON: fenced ```json block or a bare {...} object matching StructuredResponse
- Line: ``file1,file2:description`` lines, matched only against known
  identifier pairs (no generic comma splitting)

parse_response() composes them: JSON first when the backend was asked for
JSON, line matching otherwise or when JSON decoding fails. If nothing is
recovered but the text plainly talks about contradictions, a single
synthetic contradiction is returned so the finding is not lost.
"""

import re
import logging
from typing import List, Optional, Sequence, Tuple

from pydantic import ValidationError

from .errors import ParseError
from .models import Contradiction, UNPARSEABLE_MESSAGE
from .schemas import OutputFormat, StructuredResponse

logger = logging.getLogger(__name__)


# First fenced block, non-greedy across the closing fence
_CODE_BLOCK_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```")

# Words that mean the backend reported something
CUE_WORDS = (
    "contradiction",
    "mismatch",
    "inconsistent",
    "inconsistency",
    "矛盾",
    "不一致",
)

# Phrases that mean the backend reported nothing
NEGATION_PHRASES = (
    "no contradiction",
    "no mismatch",
    "no inconsistenc",
    "矛盾はありません",
    "矛盾は見つかりませんでした",
    "矛盾なし",
)


# =============================================================================
# JSON Strategy
# =============================================================================

def extract_json(text: str) -> Optional[str]:
    """
    Locate the JSON payload in an LLM answer.

    Returns the contents of the first fenced code block, or the whole
    trimmed text when it is wrapped in braces, else None.
    """
    match = _CODE_BLOCK_RE.search(text)
    if match:
        return match.group(1).strip()

    text = text.strip()
    if text.startswith("{") and text.endswith("}"):
        return text

    return None


def parse_json_response(raw: str) -> Tuple[List[Contradiction], str]:
    """
    Decode a JSON-contract answer.

    Returns:
        Tuple of (candidates, summary)

    Raises:
        ParseError: If no JSON object is found or it does not match the schema
    """
    payload = extract_json(raw)
    if payload is None:
        raise ParseError("No JSON object found in response")

    try:
        structured = StructuredResponse.model_validate_json(payload)
    except ValidationError as e:
        raise ParseError(f"Invalid JSON response: {e.error_count()} error(s)") from e

    candidates = [
        Contradiction(subject=err.file1, object=err.file2, description=err.description)
        for err in structured.errors
    ]
    return candidates, structured.summary


# =============================================================================
# Line Strategy
# =============================================================================

def _match_line(line: str, pairs: Sequence[Tuple[str, str]]) -> Optional[Contradiction]:
    """Find the known ``id1,id2:`` token in a line, earliest and longest first"""
    best = None
    for subject, obj in pairs:
        token = f"{subject},{obj}:"
        pos = line.find(token)
        if pos < 0:
            continue
        key = (pos, -len(token))
        if best is None or key < best[0]:
            best = (key, subject, obj, pos + len(token))

    if best is None:
        return None

    _, subject, obj, end = best
    return Contradiction(subject=subject, object=obj, description=line[end:].strip())


def parse_line_response(raw: str, identifiers: Sequence[str]) -> List[Contradiction]:
    """
    Extract ``file1,file2:description`` lines.

    A line counts only if it contains the token built from an ordered pair
    of known identifiers. Everything else is dropped.
    """
    pairs = [(a, b) for a in identifiers for b in identifiers if a != b]
    candidates = []

    for line in raw.splitlines():
        contradiction = _match_line(line, pairs)
        if contradiction is not None:
            candidates.append(contradiction)

    return candidates


# =============================================================================
# Composition
# =============================================================================

def mentions_contradiction(raw: str) -> bool:
    """Heuristic: does free text claim that something contradicts?"""
    text = raw.strip().lower()
    for phrase in NEGATION_PHRASES:
        text = text.replace(phrase, " ")
    return any(word in text for word in CUE_WORDS)


def parse_response(
    raw: str,
    output_format: OutputFormat,
    identifiers: Sequence[str]
) -> List[Contradiction]:
    """
    Parse a backend answer into candidate contradictions.

    Args:
        raw: Unmodified backend output
        output_format: Contract the backend was asked to follow
        identifiers: Identifiers of the artifact set, in supply order

    Returns:
        Candidate contradictions (not yet validated), possibly empty
    """
    raw = raw or ""

    if output_format == OutputFormat.JSON:
        try:
            candidates, summary = parse_json_response(raw)
            if summary:
                logger.info(f"Analysis summary: {summary}")
            logger.debug(f"JSON strategy recovered {len(candidates)} candidate(s)")
            return candidates
        except ParseError as e:
            logger.warning(f"JSON parse failed ({e}), falling back to line matching")

    candidates = parse_line_response(raw, identifiers)
    if candidates:
        logger.debug(f"Line strategy recovered {len(candidates)} candidate(s)")
        return candidates

    if mentions_contradiction(raw):
        logger.warning("Response mentions contradictions but none could be parsed")
        return [Contradiction.sentinel(identifiers, UNPARSEABLE_MESSAGE)]

    return []
