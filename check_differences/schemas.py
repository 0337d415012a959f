"""
Schemas for Check Differences
=============================

Enums shared by configuration and pipeline, plus the pydantic schema of the
structured (JSON) answer requested from remote backends.
"""

from typing import List
from pydantic import BaseModel, Field
from enum import Enum, IntEnum


# =============================================================================
# ENUMS
# =============================================================================

class LLMMode(str, Enum):
    """Reasoning backend selection"""
    MOCK = "mock"       # Rule-based, deterministic
    OPENAI = "openai"   # Remote chat-completions API
    CLI = "cli"         # Local helper command


class OutputFormat(str, Enum):
    """
    Output contract requested from a backend.

    - LINE: one ``file1,file2:description`` line per contradiction
    - JSON: ``{"summary": ..., "errors": [{"file1", "file2", "description"}]}``
    """
    LINE = "line"
    JSON = "json"


class FailurePolicy(str, Enum):
    """
    What to report when a backend's credential or tool is unavailable.

    - FAIL_CLOSED: report a synthetic contradiction (exit 1)
    - FAIL_OPEN: report nothing (exit 0)
    """
    FAIL_CLOSED = "fail-closed"
    FAIL_OPEN = "fail-open"


class DiscardPolicy(str, Enum):
    """
    What to report when every contradiction a backend found referenced
    files outside the input set.

    - IGNORE: treat as no contradictions
    - FAIL: report a synthetic contradiction
    """
    IGNORE = "ignore"
    FAIL = "fail"


class ResultStatus(str, Enum):
    """Outcome of validation"""
    EMPTY = "empty"
    FOUND = "found"
    PARTIALLY_INVALID = "partially_invalid"  # Backend found something, nothing survived validation


class ExitSignal(IntEnum):
    """Process exit code"""
    SUCCESS = 0
    FAILURE = 1


# =============================================================================
# STRUCTURED LLM RESPONSE
# =============================================================================

class StructuredError(BaseModel):
    """Single contradiction in the JSON output contract"""
    file1: str = Field("", description="Path of the first file")
    file2: str = Field("", description="Path of the second file")
    description: str = Field("", description="What contradicts")


class StructuredResponse(BaseModel):
    """JSON output contract of remote backends"""
    summary: str = Field("", description="Overall assessment")
    errors: List[StructuredError] = Field(default_factory=list)
