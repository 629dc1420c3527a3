"""Import providers, tried in priority order by the import bridge.

Each provider either converts the source document or reports itself
unavailable, so the bridge can fall through to the next one.
"""

import os
from dataclasses import dataclass
from enum import Enum

from ralph.import_bridge.conversion_prompt import build_conversion_prompt
from ralph.import_bridge.conversion_runner import (
    CLAUDE_INSTALL_HINT,
    locate_generative_tool,
)

IMPORT_TOOL = "ralph-import"
IN_PLACE_FLAG = "--in-place"

CONVERSION_PROMPT_FILE = ".ralph_init_conversion_prompt.md"
CONVERSION_OUTPUT_FILE = ".ralph_init_conversion_output.json"


class AttemptStatus(Enum):
    COMPLETED = "completed"
    SOFT_FAILURE = "soft-failure"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class ImportAttempt:
    status: AttemptStatus
    message: str = ""

    @classmethod
    def unavailable(cls, message):
        return cls(AttemptStatus.UNAVAILABLE, message)


class DedicatedImportProvider:
    """Delegates to the standalone ``ralph-import`` tool when it can work in place."""

    name = IMPORT_TOOL

    def __init__(self, runner, tool=IMPORT_TOOL):
        self._runner = runner
        self._tool = tool

    def supports_in_place(self, cwd) -> bool:
        """Ask the tool whether it accepts --in-place by inspecting its help."""
        try:
            result = self._runner.capture([self._tool, "--help"], cwd=cwd)
        except OSError:
            return False
        return IN_PLACE_FLAG in result.output

    def attempt(self, source_file, cwd, logger) -> ImportAttempt:
        if not self.supports_in_place(cwd):
            return ImportAttempt.unavailable(f"{self._tool} does not support {IN_PLACE_FLAG}")

        result = self._runner.run([self._tool, IN_PLACE_FLAG, source_file], cwd=cwd)
        if result.returncode != 0:
            logger.warn(f"{self._tool} exited with status {result.returncode}, "
                        "please review the generated files")
            return ImportAttempt(AttemptStatus.SOFT_FAILURE, f"exit status {result.returncode}")
        logger.success("PRD import completed")
        return ImportAttempt(AttemptStatus.COMPLETED)


class InlineConversionProvider:
    """Converts the PRD by piping a generated instruction into Claude Code."""

    name = "inline conversion"

    def __init__(self, runner, locate_tool=locate_generative_tool):
        self._runner = runner
        self._locate_tool = locate_tool

    def attempt(self, source_file, cwd, logger) -> ImportAttempt:
        cmd = self._locate_tool()
        if cmd is None:
            return ImportAttempt.unavailable(
                f"Claude Code CLI not found. Install with: {CLAUDE_INSTALL_HINT}"
            )

        logger.info("Running PRD conversion in current directory...")
        prompt_path = os.path.join(cwd, CONVERSION_PROMPT_FILE)
        output_path = os.path.join(cwd, CONVERSION_OUTPUT_FILE)
        try:
            with open(prompt_path, "w", encoding="utf-8") as f:
                f.write(build_conversion_prompt(source_file))

            logger.info("Running Claude Code to convert PRD...")
            result = self._runner.run_with_files(cmd, prompt_path, output_path, cwd=cwd)
        finally:
            _remove_if_present(prompt_path)
            _remove_if_present(output_path)

        if result.returncode != 0:
            logger.warn("PRD conversion may have encountered issues, "
                        "please review the generated files")
            return ImportAttempt(AttemptStatus.SOFT_FAILURE, f"exit status {result.returncode}")
        logger.success("PRD conversion completed")
        return ImportAttempt(AttemptStatus.COMPLETED)


def _remove_if_present(path):
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
