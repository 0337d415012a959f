"""
Remote API Backend
==================

Delegates the comparison to an OpenAI-compatible chat-completions API and
asks for the JSON output contract.
"""

import logging
from typing import Optional

import httpx

from .base import ReasoningBackend
from ..artifacts import ArtifactSet
from ..config import Settings
from ..errors import ConfigurationError, TransportError
from ..llm_client import ChatCompletionClient, safe_log_content
from ..prompts import build_prompt, build_system_prompt
from ..schemas import OutputFormat

logger = logging.getLogger(__name__)


class RemoteAPIBackend(ReasoningBackend):
    """Chat-completions backend (temperature 0, bounded output)"""

    name = "openai"
    output_format = OutputFormat.JSON

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        super().__init__(failure_policy=settings.failure_policy)
        self.locale = settings.response_locale
        self.max_tokens = settings.llm_max_tokens
        self.temperature = settings.llm_temperature
        self.client = ChatCompletionClient(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
            timeout=settings.llm_timeout,
            transport=transport
        )

    async def close(self):
        await self.client.close()

    async def complete(self, artifacts: ArtifactSet) -> str:
        if not self.client.api_key:
            raise ConfigurationError("OPENAI_API_KEY is not set")

        messages = [
            {"role": "system", "content": build_system_prompt(self.locale)},
            {"role": "user", "content": build_prompt(artifacts, self.output_format)},
        ]

        logger.info(f"Sending {len(artifacts)} file(s) to {self.client.model}")
        result = await self.client.call(
            messages=messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens
        )

        if not result.success:
            raise TransportError(result.error or "chat completion failed")

        logger.info(
            f"Received response ({result.input_tokens} prompt / {result.output_tokens} completion tokens): "
            f"{safe_log_content(result.content)}"
        )
        return result.content
