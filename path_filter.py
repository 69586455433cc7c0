from pathlib import Path
from typing import Callable, Iterable

PathPredicate = Callable[[Path], bool]


def file_extension(path: Path) -> str | None:
    """Return the lower-cased extension without its dot, or None."""
    suffix = path.suffix
    if not suffix:
        return None
    return suffix[1:].lower()


def ignored_parts(ignored_dirs: Iterable[str]) -> list[tuple[str, ...]]:
    parts = [Path(name).parts for name in ignored_dirs]
    return [p for p in parts if p]


def is_ignored(relative_path: Path, ignored_dirs: Iterable[str]) -> bool:
    """Check if a path relative to the source root lies under an ignored directory."""
    path_parts = relative_path.parts
    return any(
        path_parts[:len(parts)] == parts
        for parts in ignored_parts(ignored_dirs)
    )


def is_excluded(path: Path, excluded_extensions: Iterable[str]) -> bool:
    excluded = set(excluded_extensions)
    if not excluded:
        return False
    extension = file_extension(path)
    return extension is not None and extension in excluded


def is_included(path: Path, included_extensions: Iterable[str]) -> bool:
    included = set(included_extensions)
    if not included:
        return True
    extension = file_extension(path)
    return extension is not None and extension in included


def build_path_filter(
    ignored_dirs: Iterable[str],
    included_extensions: Iterable[str],
    excluded_extensions: Iterable[str]
) -> PathPredicate:
    """Compose the three filters into one accept/reject predicate over relative paths."""
    ignored = tuple(ignored_dirs)
    included = tuple(ext.lower() for ext in included_extensions)
    excluded = tuple(ext.lower() for ext in excluded_extensions)

    def accepts(relative_path: Path) -> bool:
        return (
            not is_ignored(relative_path, ignored)
            and not is_excluded(relative_path, excluded)
            and is_included(relative_path, included)
        )

    return accepts
