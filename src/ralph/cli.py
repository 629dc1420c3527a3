"""Top-level Click group for the ralph CLI."""

import click

from ralph import __version__
from ralph.click_command import CONTEXT_SETTINGS, RalphGroup
from ralph.init_cmd.cli import init_cmd
from ralph.setup_cmd.cli import setup_cmd


@click.group(cls=RalphGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, prog_name="ralph")
def main():
    """Ralph - scaffold projects for autonomous development loops."""


main.add_command(init_cmd)
main.add_command(setup_cmd)


def ralph_init():
    """Entry point for the standalone ralph-init script."""
    init_cmd(prog_name="ralph-init")


def ralph_setup():
    """Entry point for the standalone ralph-setup script."""
    setup_cmd(prog_name="ralph-setup")
