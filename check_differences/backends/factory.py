"""
Backend Factory
===============

Selects the reasoning backend for the configured mode.
"""

import shutil
import logging
from typing import Callable, Dict

from .base import ReasoningBackend
from .mock import RuleBasedBackend
from .remote import RemoteAPIBackend
from .external_cli import ExternalCLIBackend
from ..config import Settings
from ..errors import ConfigurationError
from ..schemas import LLMMode

logger = logging.getLogger(__name__)


def _build_mock(settings: Settings) -> ReasoningBackend:
    return RuleBasedBackend(failure_policy=settings.failure_policy)


def _build_remote(settings: Settings) -> ReasoningBackend:
    if not settings.openai_api_key:
        raise ConfigurationError("LLM_MODE=openai but OPENAI_API_KEY is not set")
    return RemoteAPIBackend(settings)


def _build_cli(settings: Settings) -> ReasoningBackend:
    command = settings.external_tool_command
    if shutil.which(command) is None:
        raise ConfigurationError(f"External tool '{command}' not found on PATH")
    return ExternalCLIBackend(settings)


# Mode to backend builder mapping
_builders: Dict[LLMMode, Callable[[Settings], ReasoningBackend]] = {
    LLMMode.MOCK: _build_mock,
    LLMMode.OPENAI: _build_remote,
    LLMMode.CLI: _build_cli,
}


def select_backend(settings: Settings) -> ReasoningBackend:
    """
    Get the backend for the configured mode.

    Args:
        settings: Loaded settings

    Returns:
        ReasoningBackend instance

    Raises:
        ConfigurationError: If the mode's credential or tool is missing
    """
    mode = settings.resolved_mode()
    backend = _builders[mode](settings)
    logger.info(f"Using {backend.name} backend")
    return backend


def list_modes() -> list:
    """List all selectable modes"""
    return [mode.value for mode in _builders]
