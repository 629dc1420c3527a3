"""Leveled, colored console output for Ralph commands."""

from datetime import datetime

import click

LEVEL_COLORS = {
    "INFO": "blue",
    "WARN": "yellow",
    "ERROR": "red",
    "SUCCESS": "green",
    "DRY_RUN": "yellow",
}


class RalphLogger:
    """Writes ``[HH:MM:SS] [LEVEL] message`` lines through click.

    In dry-run mode every level except DRY_RUN and ERROR is prefixed with
    ``[DRY-RUN]`` instead of a timestamp. ERROR lines go to stderr.
    """

    def __init__(self, dry_run: bool = False, clock=datetime.now):
        self._dry_run = dry_run
        self._clock = clock

    def log(self, level: str, message: str):
        color = LEVEL_COLORS.get(level)
        err = level == "ERROR"
        if self._dry_run and level not in ("DRY_RUN", "ERROR"):
            click.secho("[DRY-RUN] ", fg="yellow", nl=False, err=err)
            click.secho(f"[{level}] {message}", fg=color, err=err)
        else:
            timestamp = self._clock().strftime("%H:%M:%S")
            click.secho(f"[{timestamp}] [{level}] {message}", fg=color, err=err)

    def info(self, message: str):
        self.log("INFO", message)

    def warn(self, message: str):
        self.log("WARN", message)

    def error(self, message: str):
        self.log("ERROR", message)

    def success(self, message: str):
        self.log("SUCCESS", message)

    def dry_run(self, message: str):
        self.log("DRY_RUN", message)

    def echo(self, text: str = ""):
        click.echo(text)
