from pathlib import Path

from typer import Option, Typer

from cli_handlers import handle_collect, handle_presets

APP = Typer(help="Flatten a source tree into a single directory of files.")


@APP.command()
def collect(
    source_dir: Path | None = Option(None, "--source-dir", "-s", help="Source directory to process files from."),
    dest_dir: Path | None = Option(None, "--dest-dir", "-d", help="Destination directory to copy processed files to."),
    ignore: str | None = Option(None, "--ignore", "-i", help="Comma-separated list of directories to ignore."),
    targets: str | None = Option(None, "--targets", "-t", help="Comma-separated list of directories to restrict traversal to."),
    include: str | None = Option(None, "--include", help="Comma-separated list of extensions to include."),
    exclude: str | None = Option(None, "--exclude", help="Comma-separated list of extensions to exclude."),
    preset: str | None = Option(None, "--preset", "-p", help="Named preset to start from."),
    config: Path | None = Option(None, "--config", "-c", help="TOML configuration file."),
    summary: bool = Option(True, "--summary/--no-summary", help="Write summary.md next to the files."),
    verbose: bool = Option(False, "--verbose", "-v", help="Log every processed file."),
) -> None:
    """Collect matching files and write them flat into the destination directory."""
    handle_collect(
        source_dir=source_dir,
        dest_dir=dest_dir,
        ignore=ignore,
        targets=targets,
        include=include,
        exclude=exclude,
        preset=preset,
        config_path=config,
        summary=summary,
        verbose=verbose,
    )


@APP.command()
def presets() -> None:
    """List the built-in presets."""
    handle_presets()


if __name__ == "__main__":
    APP()
