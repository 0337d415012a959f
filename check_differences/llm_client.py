"""
Chat Completions Client
=======================

Async HTTP client for OpenAI-compatible chat-completions APIs.
Used by the remote backend.
"""

import httpx
import hashlib
import logging
from typing import Optional, Dict, Any, List
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def safe_log_content(content: str, max_chars: int = 120) -> str:
    """
    Create a safe log representation of content.

    Args:
        content: Content to log
        max_chars: Maximum characters to show

    Returns:
        Safe log string with length and hash
    """
    if not content:
        return "(empty)"

    content_hash = hashlib.sha256(content.encode()).hexdigest()[:12]
    preview = content[:max_chars].replace('\n', ' ')

    return f"len={len(content)} hash={content_hash} preview='{preview}...'"


@dataclass
class LLMCallResult:
    """Result from an LLM API call"""
    content: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    success: bool = True
    error: Optional[str] = None


class ChatCompletionClient:
    """
    Async client for ``POST {base_url}/chat/completions``.

    Never raises for API problems: failures come back as an LLMCallResult
    with ``success=False`` and an error message.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: str = "https://api.openai.com/v1",
        timeout: int = 120,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client"""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def close(self):
        """Close the HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def call(
        self,
        messages: List[Dict[str, str]],
        temperature: float = 0,
        max_tokens: int = 1000
    ) -> LLMCallResult:
        """
        Make a chat-completions call.

        Args:
            messages: List of message dicts with role and content
            temperature: Sampling temperature (0 = deterministic)
            max_tokens: Maximum response tokens

        Returns:
            LLMCallResult with content or error
        """
        if not self.api_key:
            return LLMCallResult(
                content="",
                model=self.model,
                success=False,
                error="API key not configured"
            )

        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        }

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            client = await self._get_client()
            response = await client.post(
                f"{self.base_url}/chat/completions",
                json=payload,
                headers=headers
            )
            response.raise_for_status()
            data = response.json()

            # Extract content
            try:
                content = data["choices"][0]["message"]["content"]
            except (KeyError, IndexError, TypeError) as e:
                logger.error(f"Chat completion response missing content: {e}")
                return LLMCallResult(
                    content="",
                    model=self.model,
                    success=False,
                    error=f"Response missing content: {e}"
                )

            if content is None:
                logger.warning("Chat completion returned null content")
                content = ""

            usage = data.get("usage") or {}

            return LLMCallResult(
                content=content,
                model=self.model,
                input_tokens=usage.get("prompt_tokens", 0),
                output_tokens=usage.get("completion_tokens", 0),
                success=True
            )

        except httpx.HTTPStatusError as e:
            logger.error(f"Chat completion API error: {e.response.status_code}")
            return LLMCallResult(
                content="",
                model=self.model,
                success=False,
                error=f"HTTP {e.response.status_code}: {e.response.text[:200]}"
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Chat completion request failed: {e}")
            return LLMCallResult(
                content="",
                model=self.model,
                success=False,
                error=str(e)
            )
