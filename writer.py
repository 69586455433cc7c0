from pathlib import Path
import re

from tqdm import tqdm

from artifacts import Artifact
from config import Constants, get_logger

LOGGER = get_logger()

BACKTICK_RUN = re.compile(r"`+")


def write_artifact(artifact: Artifact, dest_dir: Path) -> Path:
    dest_path = dest_dir / artifact.derived_name
    dest_path.write_text(artifact.content, encoding="utf-8", newline="")
    return dest_path


def write_all(artifacts: list[Artifact], dest_dir: Path) -> int:
    """Write every artifact into dest_dir; any OSError aborts the batch."""
    dest_dir.mkdir(parents=True, exist_ok=True)
    for artifact in tqdm(artifacts, desc="Writing files", unit="file", disable=None):
        write_artifact(artifact, dest_dir)
    return len(artifacts)


def code_fence(content: str) -> str:
    """Return a backtick fence longer than any backtick run in content."""
    longest = max((len(run) for run in BACKTICK_RUN.findall(content)), default=0)
    return "`" * max(3, longest + 1)


def render_summary(artifacts: list[Artifact]) -> str:
    parts = ["# Artifact Summary\n\n"]
    for artifact in artifacts:
        fence = code_fence(artifact.content)
        parts.append(f"## {artifact.derived_name}\n")
        parts.append(f"Original path: {artifact.original_path}\n")
        parts.append(f"\n{fence}\n{artifact.content}\n{fence}\n\n")
    return "".join(parts)


def write_summary(
    artifacts: list[Artifact],
    dest_dir: Path,
    filename: str = Constants.SUMMARY.value
) -> Path:
    """Write a Markdown document listing each artifact's name, provenance and content."""
    dest_dir.mkdir(parents=True, exist_ok=True)
    summary_path = dest_dir / filename
    summary_path.write_text(render_summary(artifacts), encoding="utf-8")
    return summary_path
