"""Import bridge: converts a user-supplied PRD into Ralph's template files."""

import os

from ralph.import_bridge.conversion_runner import ConversionRunner
from ralph.import_bridge.providers import (
    AttemptStatus,
    DedicatedImportProvider,
    InlineConversionProvider,
)


def default_providers(runner=None):
    runner = runner or ConversionRunner()
    return [DedicatedImportProvider(runner), InlineConversionProvider(runner)]


def run_import(config, logger, providers=None):
    """Import config.import_source into the destination root.

    Does nothing when no import source was given. A missing source file or
    no usable provider aborts the run; a provider that ran but failed only
    produces a warning.

    Returns:
        The ImportAttempt of the provider that handled the import, or None.
    """
    source = config.import_source
    if source is None:
        return None

    if not os.path.isfile(source):
        logger.error(f"Import file not found: {source}")
        raise SystemExit(1)

    if config.dry_run:
        logger.dry_run(f"Would import and convert PRD: {source}")
        return None

    logger.info(f"Importing PRD: {source}")
    source_path = os.path.abspath(source)

    attempt = None
    for provider in providers if providers is not None else default_providers():
        attempt = provider.attempt(source_path, config.destination_root, logger)
        if attempt.status is not AttemptStatus.UNAVAILABLE:
            return attempt

    logger.error(attempt.message if attempt else "No PRD import provider available")
    raise SystemExit(1)
