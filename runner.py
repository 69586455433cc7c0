import time

from collection import collect_artifacts
from config import get_logger
from schemas import CollectConfig
from writer import write_all, write_summary

LOGGER = get_logger()


def log_run_summary(
    start_time: float,
    artifact_count: int,
    file_count: int,
    dest_dir: str
) -> None:
    elapsed = time.time() - start_time
    elapsed_str = time.strftime("%H:%M:%S", time.gmtime(elapsed))
    LOGGER.info(
        f"✓ Flattening complete! Wrote {artifact_count} artifacts as {file_count} files to {dest_dir} in {elapsed_str}."
    )


def run_collection(config: CollectConfig, summary: bool = True) -> int:
    """Collect artifacts and write them flat into the destination directory."""
    start_time = time.time()
    LOGGER.info(f"Flattening files from {config.source_dir} into {config.dest_dir}")
    artifacts = collect_artifacts(config)
    if not artifacts:
        LOGGER.warning("No files matched the configured filters.")
    written = write_all(artifacts, config.dest_dir)
    if summary:
        summary_path = write_summary(artifacts, config.dest_dir)
        LOGGER.info(f"Summary written to {summary_path}")
    file_count = len({artifact.derived_name for artifact in artifacts})
    log_run_summary(start_time, written, file_count, str(config.dest_dir))
    return written
