"""
i18n context logger.

Provides logging interface for the i18n context with automatic [i18n] prefix.
All i18n modules should import from this module, not from loguru directly.
"""

from typing import Optional, Sequence

from loguru import logger

CONTEXT_PREFIX = "[i18n]"


# Wrapper functions with automatic [i18n] prefix


def _log_info(message: str) -> None:
    """Log info message with [i18n] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [i18n] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [i18n] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [i18n] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level i18n-specific logging helpers


def log_negotiation(
    requested: str, default: Optional[str], available: Sequence[str], negotiated: Sequence[str]
) -> None:
    """Log the outcome of a locale negotiation."""
    _log_debug(
        f"Negotiated {requested!r} (default: {default!r}) against {sorted(available)} "
        f"-> {list(negotiated)}"
    )
    if not negotiated:
        _log_warning(f"No supported locale found for {requested!r}; all lookups will fail")
