from pathlib import Path
from os import walk
from os.path import normpath
from typing import Callable, Iterable, Iterator

from config import get_logger

LOGGER = get_logger()


def walk_files(
    root: Path,
    prune: Callable[[Path], bool] | None = None
) -> Iterator[Path]:
    """Recursively yield regular files under root, following directory symlinks."""
    for dirpath, dirnames, filenames in walk(root, followlinks=True):
        dirpath = Path(dirpath)
        if prune is not None:
            dirnames[:] = [d for d in dirnames if not prune(dirpath / d)]
        for filename in filenames:
            path = dirpath / filename
            if path.is_file():
                yield path


def iter_roots(source_root: Path, target_dirs: Iterable[str]) -> Iterator[Path]:
    targets = tuple(target_dirs)
    if not targets:
        yield source_root
        return
    for target in targets:
        root = source_root / target
        if root.is_dir():
            yield root
        elif root.exists():
            LOGGER.debug(f"Target {root} is not a directory, skipping.")
        else:
            LOGGER.debug(f"Target directory {root} does not exist, skipping.")


def iter_candidates(
    source_root: Path,
    target_dirs: Iterable[str],
    prune: Callable[[Path], bool] | None = None
) -> Iterator[Path]:
    """Yield each file under the source root or its target directories exactly once."""
    visited: set[Path] = set()
    for root in iter_roots(source_root, target_dirs):
        for path in walk_files(root, prune):
            key = Path(normpath(path.absolute()))
            if key in visited:
                continue
            visited.add(key)
            yield key
