"""
Session logging for import runs.

One session = one log directory holding `<context>.log`. Every record written
to the file carries the `source` extra (the PDF being imported), so a session
that imports several files can still be read file by file. Bind it with
`logger.contextualize(source=...)` around the work.

Context-specific wrappers should be defined in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {extra[source]} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"

# Placeholder for records logged outside any import
NO_SOURCE = "-"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    console_level: str = "INFO",
) -> Path:
    """
    Route loguru to a session log file and the console.

    The file sink takes everything from DEBUG up; the console only shows
    console_level and above, on stderr so stdout stays free for command
    output (e.g. JSON printed by the CLI).

    Args:
        context_name: Context identifier, used as the log file stem (e.g., "import")
        log_dir: Directory for this logging session (created if missing)
        extra_provenance: Additional key-value pairs for the provenance header
        console_level: Minimum level shown on the console

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="import",
            log_dir=Path("outs/logs/import_20261019_101500"),
            extra_provenance={"Source": "resume.pdf"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.configure(extra={"source": NO_SOURCE})

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level.upper(), colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """
    Write the session header: how the process was started plus extra_context.

    Args:
        extra_context: Additional key-value pairs to log
    """
    header = {
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        **(extra_context or {}),
    }

    width = max(len(key) for key in header)
    logger.info("=" * 80)
    for key, value in header.items():
        logger.info(f"{key:<{width}} : {value}")
    logger.info("=" * 80)
