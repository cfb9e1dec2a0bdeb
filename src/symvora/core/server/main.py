"""Symvora server entry point — ``python -m symvora.core.server.main``."""

from __future__ import annotations

import logging
from ipaddress import ip_address

from symvora.core.config.settings import get_settings
from symvora.core.server.app import create_app


def _is_loopback_host(host: str) -> bool:
    if host in {"localhost"}:
        return True
    try:
        return ip_address(host).is_loopback
    except ValueError:
        return False


def run() -> None:
    """Start the Symvora MCP server with Streamable HTTP transport."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.symvora_log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger = logging.getLogger(__name__)
    if not settings.symvora_allow_insecure_bind and not _is_loopback_host(settings.symvora_host):
        raise RuntimeError(
            "Refusing to bind Symvora server to a non-loopback host without an auth layer. "
            "Set SYMVORA_ALLOW_INSECURE_BIND=true to override (unsafe)."
        )
    logger.info(
        "Starting Symvora server on %s:%d",
        settings.symvora_host,
        settings.symvora_port,
    )

    mcp = create_app()
    mcp.run(
        transport="streamable-http",
        host=settings.symvora_host,
        port=settings.symvora_port,
    )


if __name__ == "__main__":
    run()
