"""
Importing context logger.

Provides logging interface for importing context with automatic [import] prefix.
All importing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

import pdfplumber
import PyPDF2
from loguru import logger

from quill import __version__
from quill.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[import]"


def setup_importing_logger(log_dir: Path, source: str = "", console_level: str = "INFO") -> Path:
    """
    Setup logger for importing context.

    The provenance header records the extraction library versions, since
    extracted text (and so every heuristic downstream) depends on them.

    Args:
        log_dir: Directory for this import session
        source: Name of the PDF being imported (recorded in provenance)
        console_level: Minimum level shown on the console

    Returns:
        Path to log file
    """
    provenance = {
        "quill": __version__,
        "pdfplumber": pdfplumber.__version__,
        "PyPDF2": PyPDF2.__version__,
    }
    if source:
        provenance["Source"] = source

    return _setup_logger(
        context_name="import",
        log_dir=log_dir,
        extra_provenance=provenance,
        console_level=console_level,
    )


# Wrapper functions with automatic [import] prefix


def _log_info(message: str) -> None:
    """Log info message with [import] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [import] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [import] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [import] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [import] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level import-specific logging helpers


def log_import_start(source: str, size_bytes: int) -> None:
    """Log start of an import."""
    _log_info(f"Starting import of {source} ({size_bytes} bytes)")


def log_import_result(source: str, record, elapsed_time: float) -> None:
    """
    Log a finished import with per-section counts.

    Args:
        source: Name of the imported PDF
        record: ExtractedRecord produced by the pipeline
        elapsed_time: Time taken in seconds
    """
    _log_success(f"{source}: import finished ({elapsed_time:.2f}s)")
    _log_info(
        f"  Sections: {len(record.experiences)} experience, {len(record.education)} education, "
        f"{len(record.projects)} projects, {len(record.skills)} skills"
    )

    if not record.has_minimal_data():
        _log_warning(
            f"{source}: limited information extracted (no name, email or skills); "
            "most fields will need to be filled in manually"
        )
