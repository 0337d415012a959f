"""
Configuration for Check Differences
===================================

Environment variables:
- LLM_MODE: mock|openai|cli (default: mock)
- OPENAI_API_KEY: API key for the openai mode
- OPENAI_MODEL: Model to use (default: gpt-4o)
- OPENAI_BASE_URL: API root (default: https://api.openai.com/v1)
- LLM_MAX_TOKENS / LLM_TEMPERATURE / LLM_TIMEOUT: request controls
- RESPONSE_LOCALE: Reply language hint, falls back to LANG (default: ja_JP.UTF-8)
- USE_EXTERNAL_TOOL: Use the local helper command instead of the mock backend
- EXTERNAL_TOOL_COMMAND: Helper command (default: claude)
- EXTERNAL_TOOL_ARGS: Extra helper arguments, shell-quoted (default: -p)
- EXTERNAL_TOOL_TIMEOUT: Optional helper timeout in seconds
- FAILURE_POLICY: fail-closed|fail-open (default: fail-closed)
- DISCARD_POLICY: ignore|fail (default: ignore)
- LOG_LEVEL: Logging level for stderr logs (default: WARNING)
"""

import shlex
from typing import Optional, List
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from functools import lru_cache

from .schemas import LLMMode, FailurePolicy, DiscardPolicy


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # Backend selection
    llm_mode: LLMMode = LLMMode.MOCK
    use_external_tool: bool = False

    # OpenAI-compatible remote API
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o"
    openai_base_url: str = "https://api.openai.com/v1"

    # Request controls
    llm_max_tokens: int = 1000
    llm_temperature: float = 0
    llm_timeout: int = 120

    # Reply language (LANG is honored when RESPONSE_LOCALE is unset)
    response_locale: str = Field(
        "ja_JP.UTF-8",
        validation_alias=AliasChoices("response_locale", "lang"),
    )

    # External helper command
    external_tool_command: str = "claude"
    external_tool_args: str = "-p"
    external_tool_timeout: Optional[int] = None

    # Policies
    failure_policy: FailurePolicy = FailurePolicy.FAIL_CLOSED
    discard_policy: DiscardPolicy = DiscardPolicy.IGNORE

    log_level: str = "WARNING"

    class Config:
        env_prefix = ""
        case_sensitive = False
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    def resolved_mode(self) -> LLMMode:
        """Effective mode once USE_EXTERNAL_TOOL is taken into account"""
        if self.use_external_tool and self.llm_mode == LLMMode.MOCK:
            return LLMMode.CLI
        return self.llm_mode

    def external_tool_argv(self) -> List[str]:
        """Helper command line, without the prompt"""
        return [self.external_tool_command, *shlex.split(self.external_tool_args)]

    def validate_llm_config(self) -> List[str]:
        """Validate LLM configuration, return list of warnings"""
        warnings = []

        mode = self.resolved_mode()
        if mode == LLMMode.OPENAI and not self.openai_api_key:
            warnings.append("LLM_MODE=openai but OPENAI_API_KEY not set")

        if self.use_external_tool and self.llm_mode == LLMMode.OPENAI:
            warnings.append("USE_EXTERNAL_TOOL=true is ignored because LLM_MODE=openai")

        return warnings


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
