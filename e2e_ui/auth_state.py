"""
Stored authentication state reused between runs.

Playwright can dump a context's cookies and localStorage to JSON and seed a
new context from that file. A run that saved state after logging in lets
the next run start authenticated; the login-state probe still decides
whether that state is valid.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from playwright.async_api import BrowserContext

logger = logging.getLogger(__name__)


async def save_auth_state(context: BrowserContext, path: Path) -> Path:
    """Save cookies and localStorage of ``context`` to ``path``.

    Args:
        context: Browser context after a successful login
        path: Target JSON file; parent directories are created

    Returns:
        The path written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    await context.storage_state(path=str(path))
    logger.info("Saved auth state to %s", path)
    return path


def storage_state_for(path: Optional[Path]) -> Optional[str]:
    """Return ``path`` as a string if a stored state exists there, else None."""
    if path is None:
        return None
    if not path.exists():
        logger.warning("Stored auth state does not exist, ignoring: %s", path)
        return None
    return str(path)


def clear_auth_state(path: Optional[Path]) -> bool:
    """Delete a stored auth state. Returns True if a file was removed."""
    if path is None or not path.exists():
        return False
    path.unlink()
    logger.info("Cleared auth state: %s", path)
    return True
