from enum import Enum
from logging import getLogger, DEBUG, INFO, Logger
from rich.logging import RichHandler


class Constants(Enum):
    LOGGER = "artifact_flattener"
    SOURCE_DIR = "."
    DEST_DIR = "./claude_files"
    SUMMARY = "summary.md"
    LIST_SEPARATOR = ","


DEFAULT_IGNORED_DIRS = (
    ".git",
    ".idea",
    ".vscode",
    "node_modules",
    "target",
    "build",
    "dist",
    "__pycache__",
)


def get_logger() -> Logger:
    """Get configured logger with RichHandler."""
    logger = getLogger(Constants.LOGGER.value)
    if not logger.handlers:
        logger.setLevel(INFO)
        logger.addHandler(
            RichHandler(
                show_time=False,
            )
        )
    return logger


def set_verbose(verbose: bool) -> None:
    get_logger().setLevel(DEBUG if verbose else INFO)
