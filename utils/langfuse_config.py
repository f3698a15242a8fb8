"""
Global Langfuse configuration.

Initializes the Langfuse client once per process when tracing is enabled.

How it works:
1. config/settings.py loads .env into os.environ via load_dotenv()
2. Langfuse SDK auto-discovers credentials from os.environ
3. CallbackHandler() can be used anywhere without passing credentials

Usage:
    from utils.langfuse_config import get_langfuse_handler

    handler = get_langfuse_handler()
    config = {"callbacks": [handler] if handler else []}
"""

import logging
from typing import Optional

from langfuse import Langfuse
from langfuse.langchain import CallbackHandler

from config.settings import settings

logger = logging.getLogger(__name__)

_initialized = False


def is_langfuse_enabled() -> bool:
    """
    Check if Langfuse observability is enabled.

    Returns:
        bool: True if enabled and configured, False otherwise
    """
    if not settings.LANGFUSE_ENABLED:
        return False

    if not settings.LANGFUSE_PUBLIC_KEY or not settings.LANGFUSE_SECRET_KEY:
        logger.warning("LANGFUSE_ENABLED=true but credentials missing in .env")
        return False

    return True


def init_langfuse() -> bool:
    """
    Initialize the Langfuse singleton if tracing is enabled.

    Returns:
        True if Langfuse is ready to receive traces
    """
    global _initialized
    if _initialized:
        return True
    if not is_langfuse_enabled():
        logger.info("Langfuse observability disabled")
        return False

    try:
        # Credentials auto-discovered from os.environ
        Langfuse()
    except Exception as e:
        logger.error(f"Failed to initialize Langfuse: {e}")
        return False

    _initialized = True
    logger.info(f"Langfuse initialized (host: {settings.LANGFUSE_HOST})")
    return True


def get_langfuse_handler() -> Optional[CallbackHandler]:
    """Get a Langfuse callback handler if observability is enabled."""
    if not init_langfuse():
        return None

    try:
        return CallbackHandler()
    except Exception as e:
        logger.warning(f"Failed to create Langfuse handler: {e}")
        return None
