"""Click command classes shared by the Ralph entry points."""

import click

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _exit_one(error):
    error.exit_code = 1
    return error


class RalphCommand(click.Command):
    """A click.Command tuned for the Ralph scripts.

    A help flag anywhere on the command line wins over every other
    argument, and usage errors exit with status 1 instead of 2.
    """

    def parse_args(self, ctx, args):
        if not ctx.resilient_parsing and any(a in ctx.help_option_names for a in args):
            click.echo(ctx.get_help(), color=ctx.color)
            ctx.exit()
        try:
            return super().parse_args(ctx, args)
        except click.BadOptionUsage as e:
            raise _exit_one(self._missing_value_error(ctx, e))
        except click.UsageError as e:
            raise _exit_one(e)

    def _missing_value_error(self, ctx, error):
        """Reword "requires an argument" using the option's metavar, e.g. <file>."""
        for param in self.get_params(ctx):
            if error.option_name in param.opts and isinstance(param.metavar, str):
                name = max(param.opts, key=len)
                kind = param.metavar.strip("<>")
                return click.BadOptionUsage(
                    error.option_name, f"{name} requires a {kind} argument", ctx=ctx,
                )
        return error


class RalphGroup(click.Group):
    """A click.Group whose usage errors exit with status 1, like RalphCommand."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            raise _exit_one(e)

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            raise _exit_one(e)
