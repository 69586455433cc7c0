from pathlib import Path
from typing import Any

from config import Constants
from config_file import config_file_options, read_config_file
from presets import get_preset, preset_options
from schemas import CollectConfig, build_collect_config


def split_list(value: str | None) -> tuple[str, ...] | None:
    """Split a comma-separated option; None means the option was not given."""
    if value is None:
        return None
    return tuple(part for part in value.split(Constants.LIST_SEPARATOR.value) if part.strip())


def cli_options(
    source_dir: Path | None = None,
    dest_dir: Path | None = None,
    ignore: str | None = None,
    targets: str | None = None,
    include: str | None = None,
    exclude: str | None = None
) -> dict[str, Any]:
    options = {
        "source_dir": source_dir,
        "dest_dir": dest_dir,
        "additional_ignored_dirs": split_list(ignore),
        "target_dirs": split_list(targets),
        "included_extensions": split_list(include),
        "excluded_extensions": split_list(exclude),
    }
    return {key: value for key, value in options.items() if value is not None}


def layer_options(*layers: dict[str, Any]) -> dict[str, Any]:
    """Merge option layers; later layers replace only the fields they set."""
    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)
    return merged


def resolve_config(
    overrides: dict[str, Any],
    preset_name: str | None = None,
    config_path: Path | None = None
) -> tuple[CollectConfig | None, str | None]:
    """Build the run configuration from preset, config file and CLI overrides."""
    layers: list[dict[str, Any]] = []
    if preset_name:
        preset, error = get_preset(preset_name)
        if error:
            return None, error
        layers.append(preset_options(preset))
    if config_path:
        config_file, error = read_config_file(config_path)
        if error:
            return None, error
        layers.append(config_file_options(config_file))
    layers.append(overrides)
    config = build_collect_config(layer_options(*layers))
    if not config:
        return None, "Invalid configuration."
    if not config.source_dir.is_dir():
        return None, f"Source directory {config.source_dir} does not exist or is not a directory."
    return config, None
