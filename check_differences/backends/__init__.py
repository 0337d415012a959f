"""
Backends Module
===============

Interchangeable reasoning backends.

Architecture:
- RuleBasedBackend (mock): canned answers, no I/O
- RemoteAPIBackend (openai): chat-completions API, JSON output contract
- ExternalCLIBackend (cli): local helper command, line output contract

Usage:
    from check_differences.backends import select_backend

    backend = select_backend(settings)
    result = await backend.analyze(artifacts)
"""

from .base import ReasoningBackend, unavailable_result
from .mock import RuleBasedBackend
from .remote import RemoteAPIBackend
from .external_cli import ExternalCLIBackend
from .factory import select_backend, list_modes

__all__ = [
    # Base
    "ReasoningBackend",
    "unavailable_result",
    # Backends
    "RuleBasedBackend",
    "RemoteAPIBackend",
    "ExternalCLIBackend",
    # Factory
    "select_backend",
    "list_modes",
]
