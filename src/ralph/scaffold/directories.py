"""Idempotent creation of the Ralph directory tree."""

import os

from ralph.scaffold.action_result import ActionResult, Outcome


def ensure_directory(relative_path, config, logger) -> ActionResult:
    """Create ``relative_path`` under the destination root unless it exists."""
    path = config.destination_path(relative_path)

    if os.path.isdir(path):
        logger.info(f"Directory already exists: {relative_path}")
        return ActionResult(Outcome.SKIPPED_EXISTING, relative_path)

    if config.dry_run:
        logger.dry_run(f"Would create directory: {relative_path}")
        return ActionResult(Outcome.WOULD_CREATE, relative_path)

    os.makedirs(path, exist_ok=True)
    logger.success(f"Created directory: {relative_path}")
    return ActionResult(Outcome.CREATED, relative_path)


def scaffold_directories(directories, config, logger):
    logger.info("Creating Ralph directory structure...")
    return [ensure_directory(d, config, logger) for d in directories]
