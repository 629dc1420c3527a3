"""Click command for creating a new Ralph project."""

import os

import click

from ralph.click_command import CONTEXT_SETTINGS, RalphCommand
from ralph.logger import RalphLogger
from ralph.run_config import default_template_root
from ralph.setup_cmd.new_project import DEFAULT_PROJECT_NAME, create_new_project


@click.command("setup", cls=RalphCommand, context_settings=CONTEXT_SETTINGS)
@click.argument("project_name", default=DEFAULT_PROJECT_NAME)
def setup_cmd(project_name):
    """Create a NEW project directory with the Ralph structure.

    PROJECT_NAME defaults to my-project.
    """
    create_new_project(project_name, default_template_root(), os.getcwd(), RalphLogger())
