from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from config import Constants, get_logger

LOGGER = get_logger()


def clean_entries(entries: tuple[str, ...]) -> tuple[str, ...]:
    """Strip whitespace and drop empty entries, keeping order."""
    return tuple(entry.strip() for entry in entries if entry.strip())


class CollectConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    source_dir: Path = Path(Constants.SOURCE_DIR.value)
    dest_dir: Path = Path(Constants.DEST_DIR.value)
    additional_ignored_dirs: tuple[str, ...] = ()
    target_dirs: tuple[str, ...] = ()
    included_extensions: tuple[str, ...] = ()
    excluded_extensions: tuple[str, ...] = ()

    @field_validator("additional_ignored_dirs", "target_dirs")
    @classmethod
    def clean_dirs(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return clean_entries(value)

    @field_validator("included_extensions", "excluded_extensions")
    @classmethod
    def clean_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(entry.lower() for entry in clean_entries(value))


class PresetConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    ignored_dirs: tuple[str, ...]
    included_extensions: tuple[str, ...]
    excluded_extensions: tuple[str, ...] = ()
    target_dirs: tuple[str, ...]


class ConfigFile(BaseModel):
    model_config = ConfigDict(extra="forbid")
    source_dir: Path | None = None
    dest_dir: Path | None = None
    additional_ignored_dirs: list[str] | None = None
    target_dirs: list[str] | None = None
    excluded_extensions: list[str] | None = None
    included_extensions: list[str] | None = None


def build_collect_config(options: dict[str, Any]) -> CollectConfig | None:
    try:
        return CollectConfig(**options)
    except ValidationError as exc:
        LOGGER.error(f"Invalid collect options: {exc}")
        return None
