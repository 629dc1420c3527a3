"""Git repository initialization for scaffolded projects."""

import os

from ralph.scaffold.action_result import ActionResult, Outcome

GIT_DIR = ".git"


def ensure_repository(config, logger) -> ActionResult | None:
    """Initialize a git repository at the destination root if none exists.

    Returns None when --no-git bypasses the check entirely. An existing
    repository is never re-initialized.
    """
    if config.no_git:
        logger.info("Skipping git initialization (--no-git flag)")
        return None

    if os.path.isdir(config.destination_path(GIT_DIR)):
        logger.info("Existing git repository detected, skipping git init")
        return ActionResult(Outcome.SKIPPED_EXISTING, GIT_DIR)

    if config.dry_run:
        logger.dry_run("Would initialize git repository")
        return ActionResult(Outcome.WOULD_CREATE, GIT_DIR)

    # GitPython probes for the git executable on import.
    from git import Repo

    Repo.init(config.destination_root)
    logger.success("Initialized git repository")
    return ActionResult(Outcome.CREATED, GIT_DIR)


def commit_all(repo_dir, message, logger):
    """Stage everything in the working tree and commit it."""
    from git import Repo

    repo = Repo(repo_dir)
    repo.git.add(A=True)
    commit = repo.index.commit(message)
    logger.success(f"Committed: {message}")
    return commit.hexsha
