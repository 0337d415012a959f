"""
External CLI Backend
====================

Delegates the comparison to a local helper command (default: ``claude -p``).

The prompt is written to a scratch file that is fed to the command on
stdin; the command's stdout is the raw answer, expected in the line
format. The scratch file is removed as soon as the command exits.
"""

import os
import asyncio
import logging
import subprocess
import tempfile
from typing import List, Optional

from .base import ReasoningBackend
from ..artifacts import ArtifactSet
from ..config import Settings
from ..errors import ConfigurationError, TransportError
from ..llm_client import safe_log_content
from ..prompts import build_prompt, build_system_prompt
from ..schemas import OutputFormat

logger = logging.getLogger(__name__)


class ExternalCLIBackend(ReasoningBackend):
    """Backend that shells out to a helper command"""

    name = "cli"
    output_format = OutputFormat.LINE

    def __init__(self, settings: Settings):
        super().__init__(failure_policy=settings.failure_policy)
        self.argv: List[str] = settings.external_tool_argv()
        self.timeout: Optional[int] = settings.external_tool_timeout
        self.locale = settings.response_locale

    def build_input(self, artifacts: ArtifactSet) -> str:
        """Full text handed to the command"""
        return (
            build_system_prompt(self.locale)
            + "\n\n"
            + build_prompt(artifacts, self.output_format)
        )

    def _run(self, prompt_path: str) -> subprocess.CompletedProcess:
        with open(prompt_path, "r", encoding="utf-8") as stdin:
            return subprocess.run(
                self.argv,
                stdin=stdin,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )

    async def complete(self, artifacts: ArtifactSet) -> str:
        prompt = self.build_input(artifacts)

        with tempfile.NamedTemporaryFile(
            "w", suffix=".txt", prefix="check_differences_", encoding="utf-8", delete=False
        ) as scratch:
            scratch.write(prompt)
            prompt_path = scratch.name

        logger.debug(f"Executing: {self.argv[0]} ... (prompt file {prompt_path})")

        try:
            result = await asyncio.to_thread(self._run, prompt_path)
        except FileNotFoundError:
            raise ConfigurationError(f"External tool '{self.argv[0]}' not found")
        except subprocess.TimeoutExpired:
            raise TransportError(f"External tool timed out after {self.timeout}s")
        except OSError as e:
            raise TransportError(f"External tool could not be started: {e}") from e
        finally:
            os.unlink(prompt_path)

        if result.returncode != 0:
            error = result.stderr.strip() or result.stdout.strip() or "CLI failed"
            raise TransportError(f"External tool exited with {result.returncode}: {error[:200]}")

        logger.info(f"External tool response: {safe_log_content(result.stdout)}")
        return result.stdout
