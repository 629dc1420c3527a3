"""Run configuration shared by the init and setup commands."""

import os
from dataclasses import dataclass

RALPH_HOME_ENV = "RALPH_HOME"
DEFAULT_RALPH_HOME = os.path.join("~", ".ralph")


def ralph_home() -> str:
    """Return the Ralph installation root from $RALPH_HOME, or ~/.ralph."""
    return os.path.expanduser(os.environ.get(RALPH_HOME_ENV) or DEFAULT_RALPH_HOME)


def default_template_root() -> str:
    return os.path.join(ralph_home(), "templates")


@dataclass(frozen=True)
class RunConfig:
    """All options for one scaffolding run. Built once, never mutated."""

    template_root: str
    destination_root: str
    force: bool = False
    dry_run: bool = False
    no_git: bool = False
    import_source: str | None = None

    def template_path(self, relative_path: str) -> str:
        return os.path.join(self.template_root, relative_path)

    def destination_path(self, relative_path: str) -> str:
        return os.path.join(self.destination_root, relative_path)


def require_template_root(template_root: str, logger) -> None:
    """Abort the run if the template root directory does not exist."""
    if not os.path.isdir(template_root):
        logger.error(f"Ralph templates not found at {template_root}")
        logger.error("Please run the Ralph installer first: ./install.sh")
        raise SystemExit(1)


def require_import_source(import_source: str | None, logger) -> None:
    """Abort the run if an import source was requested but does not exist."""
    if import_source is None:
        return
    if not os.path.isfile(import_source):
        logger.error(f"Import file not found: {import_source}")
        raise SystemExit(1)
