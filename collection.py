from pathlib import Path
from os.path import normpath

from tqdm import tqdm

from artifacts import Artifact, load_artifact
from config import DEFAULT_IGNORED_DIRS, get_logger
from path_filter import build_path_filter, is_ignored
from schemas import CollectConfig
from traversal import iter_candidates

LOGGER = get_logger()


def resolve_root(path: Path) -> Path:
    return Path(normpath(path.absolute()))


def resolve_ignored_dirs(config: CollectConfig) -> tuple[str, ...]:
    """Defaults, user additions and the destination directory, without duplicates."""
    source_root = resolve_root(config.source_dir)
    dest_root = resolve_root(config.dest_dir)
    names = [*DEFAULT_IGNORED_DIRS, *config.additional_ignored_dirs]
    if dest_root.name:
        names.append(dest_root.name)
    if dest_root != source_root and dest_root.is_relative_to(source_root):
        names.append(dest_root.relative_to(source_root).as_posix())
    return tuple(dict.fromkeys(names))


def relative_to_root(path: Path, source_root: Path) -> Path | None:
    try:
        return path.relative_to(source_root)
    except ValueError as exc:
        LOGGER.warning(f"Failed to process {path}: {exc}")
        return None


def collect_artifacts(config: CollectConfig) -> list[Artifact]:
    """Collect every accepted file under the source root as an artifact."""
    source_root = resolve_root(config.source_dir)
    ignored_dirs = resolve_ignored_dirs(config)
    accepts = build_path_filter(
        ignored_dirs,
        config.included_extensions,
        config.excluded_extensions,
    )

    def prune(directory: Path) -> bool:
        directory = resolve_root(directory)
        return (
            directory.is_relative_to(source_root)
            and is_ignored(directory.relative_to(source_root), ignored_dirs)
        )

    LOGGER.info(f"Starting artifact collection from {source_root}")
    LOGGER.debug(f"Ignored directories: {', '.join(ignored_dirs)}")

    artifacts: list[Artifact] = []
    candidates = iter_candidates(source_root, config.target_dirs, prune)
    for path in tqdm(candidates, desc="Collecting files", unit="file", disable=None):
        relative_path = relative_to_root(path, source_root)
        if relative_path is None or not accepts(relative_path):
            continue
        LOGGER.debug(f"Processing file: {path}")
        try:
            artifacts.append(load_artifact(path, relative_path))
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.warning(f"Failed to process {path}: {exc}")
            continue

    LOGGER.info(f"Artifact collection completed. Total artifacts: {len(artifacts)}")
    return artifacts
