"""Application settings loaded from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Symvora symptom checker configuration."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Server
    # Loopback by default; there is no transport-level auth in front of the tools.
    symvora_host: str = "127.0.0.1"
    symvora_port: int = 8001
    symvora_log_level: str = "info"
    symvora_allow_insecure_bind: bool = False

    # Diagnosis LLM
    llm_provider: Literal["deepseek", "openai", "anthropic", "mock"] = "deepseek"
    deepseek_api_key: str = ""
    deepseek_model: str = "deepseek-chat"
    deepseek_base_url: str = "https://api.deepseek.com"
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    llm_timeout_seconds: float = 30.0

    # History
    seed_sample_history: bool = True


def get_settings() -> Settings:
    """Create and return a Settings instance."""
    return Settings()
