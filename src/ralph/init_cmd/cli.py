"""Click command for in-place Ralph initialization."""

import os

import click

from ralph.click_command import CONTEXT_SETTINGS, RalphCommand
from ralph.init_cmd.init_command import InitCommand
from ralph.logger import RalphLogger
from ralph.run_config import RunConfig, default_template_root

INIT_EPILOG = """\b
Examples:
    # Initialize Ralph in current directory
    cd my-existing-project
    ralph-init

\b
    # Initialize with force overwrite
    ralph-init --force

\b
    # Initialize and import a PRD
    ralph-init --import requirements.md

\b
    # Preview what would be created
    ralph-init --dry-run

\b
Differences from ralph-setup:
    ralph-setup: Creates a NEW subdirectory with Ralph structure
    ralph-init:  Initializes Ralph IN the current directory (existing project)

\b
Created Files:
    PROMPT.md           Ralph development instructions
    @fix_plan.md        Prioritized task list
    @AGENT.md           Build and run instructions

\b
Created Directories:
    specs/stdlib/       Project specifications
    src/                Source code (if not exists)
    examples/           Usage examples
    logs/               Ralph execution logs
    docs/generated/     Auto-generated documentation
"""


def _validate_import(ctx, param, value):
    if value is not None and (value == "" or value.startswith("-")):
        raise click.BadParameter("--import requires a file argument", ctx=ctx, param=param)
    return value


@click.command(
    "init", cls=RalphCommand, context_settings=CONTEXT_SETTINGS, epilog=INIT_EPILOG,
)
@click.option("-f", "--force", is_flag=True, help="Overwrite existing Ralph files")
@click.option(
    "-i", "--import", "import_source", metavar="<file>", callback=_validate_import,
    help="Import and convert a PRD/spec file in-place",
)
@click.option("--no-git", is_flag=True, help="Skip git initialization even if no .git exists")
@click.option("--dry-run", is_flag=True, help="Show what would be created without making changes")
def init_cmd(force, import_source, no_git, dry_run):
    """Initialize Ralph in an existing project.

    Initialize Ralph files in the current directory without creating a
    subdirectory. Designed for adding Ralph to existing projects.
    """
    config = RunConfig(
        template_root=default_template_root(),
        destination_root=os.getcwd(),
        force=force,
        dry_run=dry_run,
        no_git=no_git,
        import_source=import_source,
    )
    InitCommand(config, RalphLogger(dry_run=dry_run)).execute()
