from pathlib import Path

from rich.console import Console
from rich.table import Table
from typer import Exit

from config import get_logger, set_verbose
from presets import PRESETS
from runner import run_collection
from settings import cli_options, resolve_config

LOGGER = get_logger()
CONSOLE = Console()


def handle_collect(
    source_dir: Path | None,
    dest_dir: Path | None,
    ignore: str | None,
    targets: str | None,
    include: str | None,
    exclude: str | None,
    preset: str | None,
    config_path: Path | None,
    summary: bool,
    verbose: bool
) -> None:
    set_verbose(verbose)
    overrides = cli_options(
        source_dir=source_dir,
        dest_dir=dest_dir,
        ignore=ignore,
        targets=targets,
        include=include,
        exclude=exclude,
    )
    config, error = resolve_config(overrides, preset_name=preset, config_path=config_path)
    if error:
        LOGGER.error(error)
        raise Exit(code=1)
    try:
        run_collection(config, summary=summary)
    except OSError as exc:
        LOGGER.error(f"Failed to write to {config.dest_dir}: {exc}")
        raise Exit(code=1)


def build_presets_table() -> Table:
    table = Table(title="Presets")
    table.add_column("Name", style="bold cyan", no_wrap=True)
    table.add_column("Ignored directories")
    table.add_column("Included extensions")
    table.add_column("Excluded extensions")
    table.add_column("Target directories")
    for name, preset in sorted(PRESETS.items()):
        table.add_row(
            name,
            ", ".join(preset.ignored_dirs),
            ", ".join(preset.included_extensions),
            ", ".join(preset.excluded_extensions) or "-",
            ", ".join(preset.target_dirs),
        )
    return table


def handle_presets() -> None:
    CONSOLE.print(build_presets_table())
