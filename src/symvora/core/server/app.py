"""Symvora symptom checker MCP server — application factory.

This module provides:
- create_app() for testability (integration tests create fresh server instances)
- Module-level `mcp` variable for FastMCP discovery
"""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from symvora.core.accounts import AccountService
from symvora.core.accounts.in_memory import InMemoryAccountService
from symvora.core.config.settings import get_settings
from symvora.core.history.store import HistoryStore
from symvora.core.llm.client import DiagnosisClient, DiagnosisService
from symvora.core.llm.provider import create_provider
from symvora.core.notifications.center import NotificationCenter
from symvora.core.preferences.manager import PreferencesManager
from symvora.core.session.state import SessionState
from symvora.domains.symptoms.flow.accounts import AccountFlow
from symvora.domains.symptoms.flow.screen_flow import ScreenFlow
from symvora.domains.symptoms.flow.submission import SymptomCheckController
from symvora.domains.symptoms.prompts.symptom_prompts import register_symptom_prompts
from symvora.domains.symptoms.resources.history import register_history_resources
from symvora.domains.symptoms.tools.account_tools import register_account_tools
from symvora.domains.symptoms.tools.history_tools import register_history_tools
from symvora.domains.symptoms.tools.navigation_tools import register_navigation_tools
from symvora.domains.symptoms.tools.preference_tools import register_preference_tools
from symvora.domains.symptoms.tools.symptom_tools import register_symptom_tools

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def _select_provider(settings) -> tuple[str, str, str]:
    """Returns: (provider_name, api_key, model)"""
    if settings.llm_provider == "mock":
        return "mock", "", ""
    if settings.llm_provider == "deepseek":
        api_key, model = settings.deepseek_api_key, settings.deepseek_model
    elif settings.llm_provider == "openai":
        api_key, model = settings.openai_api_key, settings.openai_model
    elif settings.llm_provider == "anthropic":
        api_key, model = settings.anthropic_api_key, settings.anthropic_model
    else:  # pragma: no cover
        raise ValueError(f"Unknown LLM provider: {settings.llm_provider!r}")

    if not api_key:
        logger.warning(
            "No API key configured for provider '%s'; falling back to mock provider",
            settings.llm_provider,
        )
        return "mock", "", ""
    return settings.llm_provider, api_key, model


def create_app(
    *,
    diagnosis_override: DiagnosisService | None = None,
    accounts_override: AccountService | None = None,
) -> FastMCP:
    """Create and configure the Symvora MCP server.

    This is the main application factory. It:
    1. Creates the process-wide state (session, history, notifications, preferences)
    2. Creates the diagnosis client over the configured LLM provider
    3. Creates the account backend
    4. Wires the screen, submission and account flows
    5. Registers all tools, resources, and prompts
    """
    settings = get_settings()

    # --- Process-wide state, created once and passed to every consumer ---
    session = SessionState()
    history = HistoryStore()
    notifications = NotificationCenter()
    preferences = PreferencesManager()

    # --- Diagnosis collaborator ---
    if diagnosis_override is not None:
        diagnosis = diagnosis_override
        provider_name = "override"
    else:
        provider_name, api_key, model = _select_provider(settings)
        provider = create_provider(
            provider_name=provider_name,
            api_key=api_key,
            model=model,
            base_url=settings.deepseek_base_url if provider_name == "deepseek" else "",
            timeout=settings.llm_timeout_seconds,
        )
        diagnosis = DiagnosisClient(provider=provider)
    logger.info("Diagnosis provider: %s", provider_name)

    # --- Account collaborator ---
    if accounts_override is not None:
        accounts = accounts_override
    else:
        accounts = InMemoryAccountService()
        logger.info("Using in-memory account service")

    # --- Flows ---
    screen_flow = ScreenFlow(
        session, history, seed_sample_history=settings.seed_sample_history
    )
    account_flow = AccountFlow(accounts, session, notifications)
    symptom_checks = SymptomCheckController(diagnosis, history, notifications)

    @asynccontextmanager
    async def lifespan(_server: FastMCP):
        # Auto-login a user the account backend still remembers.
        await account_flow.restore_session()
        yield

    # --- Server instance ---
    server = FastMCP(
        "Symvora Symptom Checker",
        instructions=(
            "Symvora symptom checker. Sign up or log in, describe symptoms to "
            "get general, non-diagnostic advice from an LLM, and browse or "
            "search your symptom history. Results are informational only and "
            "never a substitute for a healthcare professional."
        ),
        lifespan=lifespan,
    )

    # --- Register tools ---
    @server.tool
    def health_check() -> dict:
        """Check server health and return basic status information."""
        return {
            "status": "ok",
            "server": "Symvora Symptom Checker",
            "version": VERSION,
            "diagnosis_provider": provider_name,
            "authenticated": session.is_authenticated(),
            "history_entries": len(history),
        }

    @server.tool
    def notifications_feed(keep: bool = False) -> str:
        """Show pending notifications (validation messages, errors, confirmations).

        Args:
            keep: Leave the notifications pending instead of clearing them.
        """
        pending = notifications.peek() if keep else notifications.drain()
        return json.dumps({"notifications": [n.to_dict() for n in pending]})

    register_navigation_tools(server, screen_flow, session)
    register_account_tools(server, account_flow, screen_flow, session, notifications)
    register_symptom_tools(server, symptom_checks, screen_flow, notifications)
    register_history_tools(server, history, screen_flow)
    register_preference_tools(server, preferences, screen_flow, notifications)
    logger.info("Symptom checker tools registered")

    # --- Register resources ---
    register_history_resources(server, history, session)

    # --- Register prompts ---
    register_symptom_prompts(server)

    return server


# Module-level instance for FastMCP discovery (`fastmcp run .../app.py:mcp`).
# Lazy: only created when this attribute is accessed (not when tests import create_app).
def __getattr__(name: str):
    if name == "mcp":
        global mcp  # noqa: PLW0603
        mcp = create_app()
        return mcp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
