"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resume_html.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, locale: str = None, verbose: bool = False) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        locale: Requested locale override, recorded in the provenance header
        verbose: Show DEBUG messages on the console

    Returns:
        Path to log file

    Example:
        from resume_html.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir)
        _log_info("Starting render...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Locale override": locale or "(from resume meta)"},
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(resume_name: str, resume_path: Path, output_path: Path) -> None:
    """Log start of a file render with context."""
    _log_info(f"Starting render: {resume_name}")
    _log_debug(f"  Source: {resume_path}")
    _log_debug(f"  Output: {output_path}")


def log_render_result(resume_name: str, result, elapsed_time: float) -> None:
    """
    Log render result.

    Args:
        resume_name: Resume identifier (file stem)
        result: RenderResult from render_resume()
        elapsed_time: Time taken to render
    """
    if result.success:
        _log_success(f"{resume_name}: rendered {result.size_bytes} bytes ({elapsed_time:.2f}s)")
        if result.output_path:
            _log_info(f"  Output: {result.output_path}")
    else:
        _log_error(f"Failed to render {resume_name} ({elapsed_time:.2f}s)")
        if result.error:
            _log_error(f"  Error: {result.error}")
