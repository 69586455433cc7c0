from pathlib import Path
from typing import Any
import tomllib

from pydantic import ValidationError

from schemas import ConfigFile


def read_config_file(path: Path) -> tuple[ConfigFile | None, str | None]:
    """Read and validate a TOML configuration file."""
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except OSError as exc:
        return None, f"Failed to read config file {path}: {exc}"
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        return None, f"Failed to parse config file {path}: {exc}"
    try:
        return ConfigFile(**data), None
    except ValidationError as exc:
        return None, f"Invalid config file {path}: {exc}"


def config_file_options(config_file: ConfigFile) -> dict[str, Any]:
    return config_file.model_dump(exclude_none=True)
