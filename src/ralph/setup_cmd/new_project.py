"""Create a brand-new project directory with the Ralph layout."""

import os

from ralph.run_config import RunConfig, require_template_root
from ralph.scaffold.action_result import Outcome
from ralph.scaffold.directories import scaffold_directories
from ralph.scaffold.layout import NEW_PROJECT_DIRECTORIES
from ralph.scaffold.templates import materialize_templates
from ralph.scaffold.version_control import commit_all, ensure_repository

DEFAULT_PROJECT_NAME = "my-project"
INITIAL_COMMIT_MESSAGE = "Initial Ralph project setup"


def create_new_project(project_name, template_root, parent_dir, logger):
    """Create ``parent_dir/project_name`` and populate it from the templates.

    Existing files in the project directory are never overwritten, and an
    existing repository is neither re-initialized nor committed to.

    Returns:
        The path of the project directory.

    Raises:
        SystemExit: If the template root does not exist or the project
            path is an existing file.
    """
    logger.echo(f"🚀 Setting up Ralph project: {project_name}")

    require_template_root(template_root, logger)

    project_dir = os.path.join(parent_dir, project_name)
    if os.path.exists(project_dir) and not os.path.isdir(project_dir):
        logger.error(f"Cannot create project: {project_dir} exists and is not a directory")
        raise SystemExit(1)
    os.makedirs(project_dir, exist_ok=True)

    config = RunConfig(template_root=template_root, destination_root=project_dir)

    git_result = ensure_repository(config, logger)
    scaffold_directories(NEW_PROJECT_DIRECTORIES, config, logger)
    materialize_templates(config, logger)
    _write_readme(project_dir, project_name, logger)

    if git_result is not None and git_result.outcome is Outcome.CREATED:
        commit_all(project_dir, INITIAL_COMMIT_MESSAGE, logger)

    _show_next_steps(project_name, project_dir, logger)
    return project_dir


def _write_readme(project_dir, project_name, logger):
    readme = os.path.join(project_dir, "README.md")
    if os.path.isfile(readme):
        logger.info("README.md already exists, leaving it unchanged")
        return
    with open(readme, "w", encoding="utf-8") as f:
        f.write(f"# {project_name}\n")
    logger.success("Created file: README.md")


def _show_next_steps(project_name, project_dir, logger):
    logger.echo(f"✅ Project {project_name} created!")
    logger.echo("Next steps:")
    logger.echo("  1. Edit PROMPT.md with your project requirements")
    logger.echo("  2. Update specs/ with your project specifications")
    logger.echo("  3. Run: ralph --monitor")
    logger.echo()
    logger.echo(f"Ralph files are in: {os.path.abspath(project_dir)}")
