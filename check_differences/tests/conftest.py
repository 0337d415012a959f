"""
Shared fixtures
===============

Every test runs with a clean checker environment in a temporary working
directory, so no real API key, .env file or cached settings leak in.
"""

import pytest

from check_differences.config import Settings, get_settings


CHECKER_ENV_VARS = [
    "LLM_MODE",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_BASE_URL",
    "LLM_MAX_TOKENS",
    "LLM_TEMPERATURE",
    "LLM_TIMEOUT",
    "RESPONSE_LOCALE",
    "USE_EXTERNAL_TOOL",
    "EXTERNAL_TOOL_COMMAND",
    "EXTERNAL_TOOL_ARGS",
    "EXTERNAL_TOOL_TIMEOUT",
    "FAILURE_POLICY",
    "DISCARD_POLICY",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Clear checker variables and cached settings"""
    for name in CHECKER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_settings():
    """Build Settings without reading a .env file"""
    def _make(**overrides):
        return Settings(_env_file=None, **overrides)
    return _make


@pytest.fixture
def write_files(tmp_path):
    """Create files (relative to the working directory) and return their paths"""
    def _write(*names, content="content\n"):
        paths = []
        for name in names:
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            paths.append(name)
        return paths
    return _write
