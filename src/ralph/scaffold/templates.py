"""Conflict-aware copying of Ralph templates into a project."""

import os
import shutil

from ralph.scaffold.action_result import ActionResult, Outcome
from ralph.scaffold.layout import SPECS_SEED, TEMPLATE_FILES


def materialize_template(template, config, logger) -> ActionResult:
    """Copy one template file, honouring the force and dry-run flags.

    An existing destination is left alone unless force is set. A missing
    source template only fails this one file.
    """
    source = config.template_path(template.source_relative_path)
    dest_name = template.destination_relative_path
    dest = config.destination_path(dest_name)

    if not os.path.isfile(source):
        logger.warn(f"Template not found: {source}")
        return ActionResult.failed(dest_name, "template not found")

    if os.path.isfile(dest):
        if not config.force:
            logger.warn(f"File already exists: {dest_name} (use --force to overwrite)")
            return ActionResult(Outcome.SKIPPED_EXISTING, dest_name)
        if config.dry_run:
            logger.dry_run(f"Would overwrite (--force): {dest_name}")
            return ActionResult(Outcome.WOULD_OVERWRITE, dest_name)
        return _copy(source, dest, dest_name, Outcome.OVERWROTE,
                     f"Overwrote file (--force): {dest_name}", logger)

    if config.dry_run:
        logger.dry_run(f"Would create file: {dest_name}")
        return ActionResult(Outcome.WOULD_CREATE, dest_name)
    return _copy(source, dest, dest_name, Outcome.CREATED,
                 f"Created file: {dest_name}", logger)


def _copy(source, dest, dest_name, outcome, message, logger):
    try:
        shutil.copyfile(source, dest)
    except OSError as e:
        logger.warn(f"Could not copy {source} to {dest_name}: {e}")
        return ActionResult.failed(dest_name, str(e))
    logger.success(message)
    return ActionResult(outcome, dest_name)


def seed_specs(config, logger) -> ActionResult | None:
    """Copy the bundled example specs into specs/ if it holds no files yet.

    Returns None when the template root ships no specs directory. Copy
    errors are ignored: the seed is a convenience, not a requirement.
    """
    source = config.template_path(SPECS_SEED.source_relative_path)
    if not os.path.isdir(source):
        return None

    dest_name = SPECS_SEED.destination_relative_path
    dest = config.destination_path(dest_name)

    if not (_holds_no_files(dest) or config.force):
        logger.info(f"{dest_name}/ directory not empty, skipping template copy")
        return ActionResult(Outcome.SKIPPED_EXISTING, dest_name)

    if config.dry_run:
        logger.dry_run(f"Would copy specs templates to {dest_name}/")
        return ActionResult(Outcome.WOULD_CREATE, dest_name)

    try:
        shutil.copytree(source, dest, dirs_exist_ok=True)
    except OSError:
        pass
    logger.info("Copied specs templates")
    return ActionResult(Outcome.CREATED, dest_name)


def _holds_no_files(directory):
    """True if ``directory`` is absent or contains only (empty) directories."""
    for _, _, files in os.walk(directory):
        if files:
            return False
    return True


def materialize_templates(config, logger):
    logger.info("Copying Ralph template files...")
    results = [materialize_template(t, config, logger) for t in TEMPLATE_FILES]
    specs_result = seed_specs(config, logger)
    if specs_result is not None:
        results.append(specs_result)
    return results
