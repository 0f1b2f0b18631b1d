"""HTTP client helpers for the catalog CLI."""
from __future__ import annotations

import httpx


def create_client(
    *,
    timeout: float = 30.0,
    user_agent: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Instantiate an HTTPX client for catalog requests."""

    headers = {"User-Agent": user_agent} if user_agent else None
    return httpx.Client(timeout=timeout, headers=headers, follow_redirects=True, transport=transport)
