from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Artifact(BaseModel):
    model_config = ConfigDict(frozen=True)
    original_path: Path
    derived_name: str
    content: str


def flatten_name(relative_path: Path) -> str:
    """Flatten a relative path into one filename by replacing separators with underscores."""
    return "_".join(relative_path.parts)


def read_text_exact(path: Path) -> str:
    """Read a file as UTF-8 text without newline translation."""
    with path.open(encoding="utf-8", newline="") as handle:
        return handle.read()


def load_artifact(path: Path, relative_path: Path) -> Artifact:
    """Read a file and build its artifact.

    Raises OSError or UnicodeDecodeError when the content cannot be read as text.
    """
    return Artifact(
        original_path=path,
        derived_name=flatten_name(relative_path),
        content=read_text_exact(path),
    )
