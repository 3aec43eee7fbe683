"""Composition root for the simulated host.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Logging setup
- Capability service instantiation
- Session creation and lifecycle
"""

import logging
import sys
import tempfile
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from hostmock.adapters.editor import (
    CommandsService,
    DebugService,
    LanguagesService,
    WindowService,
)
from hostmock.adapters.workspace import WorkspaceService
from hostmock.config import Settings, load_settings
from hostmock.core.tests_service import TestsService
from hostmock.session import HostSession


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    # Map string level to logging constant
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def bootstrap(
    settings: Settings | None = None, configure_logs: bool = True
) -> HostSession:
    """Load configuration, wire the capability services and return a session.

    Steps:
    1. Load configuration from environment (unless given)
    2. Configure logging
    3. Resolve the workspace root
    4. Instantiate capability services
    5. Build the session facade

    Args:
        settings: Pre-built settings; loaded from the environment if None.
        configure_logs: Whether to install the root logging configuration.

    Returns:
        A new, open HostSession.
    """
    # Step 1: Load configuration
    if settings is None:
        settings = load_settings()

    # Step 2: Configure logging
    if configure_logs:
        log_level = "DEBUG" if settings.debug else settings.log_level
        configure_logging(log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    # Step 3: Workspace root
    if settings.workspace_root:
        workspace_root = Path(settings.workspace_root).resolve()
        workspace_root.mkdir(parents=True, exist_ok=True)
        owns_root = False
    else:
        workspace_root = Path(tempfile.mkdtemp(prefix="hostmock-"))
        owns_root = settings.cleanup_workspace_root
    logger.info(f"Workspace root: {workspace_root}")

    # Step 4 + 5: Capability services and facade
    session = HostSession(
        workspace_root=workspace_root,
        tests=TestsService(),
        workspace=WorkspaceService(encoding=settings.file_encoding),
        window=WindowService(),
        debug=DebugService(),
        commands=CommandsService(),
        languages=LanguagesService(),
        owns_workspace_root=owns_root,
    )
    logger.info("Host session ready")
    return session


@asynccontextmanager
async def session_scope(
    settings: Settings | None = None, configure_logs: bool = True
) -> AsyncIterator[HostSession]:
    """Yield a fresh session and close it when the block exits."""
    session = bootstrap(settings, configure_logs=configure_logs)
    try:
        yield session
    finally:
        await session.close()
