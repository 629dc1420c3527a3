"""InitCommand encapsulates in-place Ralph initialization."""

import os
from collections import Counter

from ralph.import_bridge.bridge import run_import
from ralph.run_config import require_import_source, require_template_root
from ralph.scaffold.action_result import Outcome
from ralph.scaffold.directories import scaffold_directories
from ralph.scaffold.layout import IN_PLACE_DIRECTORIES
from ralph.scaffold.templates import materialize_templates
from ralph.scaffold.version_control import ensure_repository


class InitCommand:
    """Adds the Ralph layout to an existing project directory.

    Preconditions (template root, import source) are checked before
    anything is written, so a failed run leaves the directory untouched.
    """

    def __init__(self, config, logger, import_providers=None):
        self.config = config
        self.logger = logger
        self.import_providers = import_providers

    def execute(self):
        """Run every step and return the ActionResults of the scaffold."""
        self.logger.echo("🚀 Initializing Ralph in existing project...")
        self.logger.echo()
        if self.config.dry_run:
            self.logger.info("Running in dry-run mode - no changes will be made")
            self.logger.echo()

        require_template_root(self.config.template_root, self.logger)
        require_import_source(self.config.import_source, self.logger)

        results = []
        git_result = ensure_repository(self.config, self.logger)
        if git_result is not None:
            results.append(git_result)
        results += scaffold_directories(IN_PLACE_DIRECTORIES, self.config, self.logger)
        results += materialize_templates(self.config, self.logger)
        run_import(self.config, self.logger, providers=self.import_providers)

        self._show_summary(results)
        return results

    def _show_summary(self, results):
        log = self.logger
        log.echo()
        if self.config.dry_run:
            log.info("Dry run complete - no changes were made")
            log.echo()
            log.echo("To apply these changes, run without --dry-run:")
            log.echo("  ralph-init")
            return

        log.success("🎉 Ralph initialized in current directory!")
        counts = Counter(r.outcome for r in results)
        log.echo(
            f"  {counts[Outcome.CREATED]} created, "
            f"{counts[Outcome.OVERWROTE]} overwritten, "
            f"{counts[Outcome.SKIPPED_EXISTING]} already present"
            + (f", {counts[Outcome.FAILED]} failed" if counts[Outcome.FAILED] else "")
        )
        log.echo()
        log.echo("Next steps:")
        log.echo("  1. Edit PROMPT.md with your project requirements")
        log.echo("  2. Update @fix_plan.md with your task priorities")
        log.echo("  3. Add specifications to specs/")
        log.echo("  4. Run: ralph --monitor")
        log.echo()
        log.echo(f"Project initialized in: {os.path.abspath(self.config.destination_root)}")
