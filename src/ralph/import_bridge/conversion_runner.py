"""ConversionRunner: runs external conversion tools to completion.

Both the dedicated ``ralph-import`` tool and the generative fallback are
plain blocking subprocesses; no timeout is applied.
"""

import shutil
import subprocess
from dataclasses import dataclass
from typing import List, Optional

CLAUDE_COMMAND = "claude"
NPX_CLAUDE_COMMAND = ["npx", "@anthropic-ai/claude-code"]
CLAUDE_INSTALL_HINT = "npm install -g @anthropic-ai/claude-code"


@dataclass
class ConversionResult:
    """Exit status and captured text of a conversion subprocess."""
    returncode: int
    output: str = ""


def locate_generative_tool(which=shutil.which) -> Optional[List[str]]:
    """Return the command that runs Claude Code, or None if neither is installed.

    Tries ``claude`` on the PATH first, then ``npx @anthropic-ai/claude-code``.
    """
    if which(CLAUDE_COMMAND):
        return [CLAUDE_COMMAND]
    if which(NPX_CLAUDE_COMMAND[0]):
        return list(NPX_CLAUDE_COMMAND)
    return None


class ConversionRunner:
    """Subprocess seam for the import providers."""

    def capture(self, cmd: List[str], cwd: str) -> ConversionResult:
        """Run cmd, returning combined stdout and stderr.

        Raises:
            FileNotFoundError: If the executable does not exist.
        """
        result = subprocess.run(
            cmd, cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
        return ConversionResult(returncode=result.returncode, output=result.stdout)

    def run(self, cmd: List[str], cwd: str) -> ConversionResult:
        """Run cmd attached to the terminal."""
        result = subprocess.run(cmd, cwd=cwd)
        return ConversionResult(returncode=result.returncode)

    def run_with_files(self, cmd: List[str], input_path: str, output_path: str,
                       cwd: str) -> ConversionResult:
        """Run cmd with input_path as stdin and stdout+stderr written to output_path."""
        with open(input_path, "rb") as stdin, open(output_path, "wb") as stdout:
            result = subprocess.run(
                cmd, cwd=cwd, stdin=stdin, stdout=stdout, stderr=subprocess.STDOUT,
            )
        return ConversionResult(returncode=result.returncode)
