"""Tests for the dedicated and inline import providers."""

import os

import pytest

from fake_conversion_runner import FakeConversionRunner
from recording_logger import RecordingLogger

from ralph.import_bridge.conversion_runner import locate_generative_tool
from ralph.import_bridge.providers import (
    CONVERSION_OUTPUT_FILE,
    CONVERSION_PROMPT_FILE,
    AttemptStatus,
    DedicatedImportProvider,
    InlineConversionProvider,
)

HELP_WITH_IN_PLACE = "Usage: ralph-import [--in-place] <file>\n"


@pytest.fixture
def prd(tmp_path):
    path = tmp_path / "prd.md"
    path.write_text("# PRD\n")
    return str(path)


@pytest.mark.unit
class TestDedicatedImportProvider:

    def test_unavailable_when_tool_missing(self, prd, tmp_path):
        runner = FakeConversionRunner(help_output=None)

        attempt = DedicatedImportProvider(runner).attempt(prd, str(tmp_path), RecordingLogger())

        assert attempt.status is AttemptStatus.UNAVAILABLE
        assert [c[0] for c in runner.calls] == ["capture"]

    def test_unavailable_without_in_place_support(self, prd, tmp_path):
        runner = FakeConversionRunner(help_output="Usage: ralph-import <file> [name]\n")

        attempt = DedicatedImportProvider(runner).attempt(prd, str(tmp_path), RecordingLogger())

        assert attempt.status is AttemptStatus.UNAVAILABLE

    def test_probes_help_then_runs_in_place(self, prd, tmp_path):
        runner = FakeConversionRunner(help_output=HELP_WITH_IN_PLACE)

        attempt = DedicatedImportProvider(runner).attempt(prd, str(tmp_path), RecordingLogger())

        assert attempt.status is AttemptStatus.COMPLETED
        assert runner.calls == [
            ("capture", ["ralph-import", "--help"], str(tmp_path)),
            ("run", ["ralph-import", "--in-place", prd], str(tmp_path)),
        ]

    def test_non_zero_exit_is_soft_failure(self, prd, tmp_path):
        runner = FakeConversionRunner(help_output=HELP_WITH_IN_PLACE, returncode=3)
        logger = RecordingLogger()

        attempt = DedicatedImportProvider(runner).attempt(prd, str(tmp_path), logger)

        assert attempt.status is AttemptStatus.SOFT_FAILURE
        assert logger.messages("WARN")


@pytest.mark.unit
class TestInlineConversionProvider:

    def test_unavailable_without_generative_tool(self, prd, tmp_path):
        provider = InlineConversionProvider(FakeConversionRunner(), locate_tool=lambda: None)

        attempt = provider.attempt(prd, str(tmp_path), RecordingLogger())

        assert attempt.status is AttemptStatus.UNAVAILABLE
        assert "npm install -g @anthropic-ai/claude-code" in attempt.message

    def test_feeds_prompt_with_source_to_tool(self, prd, tmp_path):
        runner = FakeConversionRunner()
        provider = InlineConversionProvider(runner, locate_tool=lambda: ["claude"])

        attempt = provider.attempt(prd, str(tmp_path), RecordingLogger())

        assert attempt.status is AttemptStatus.COMPLETED
        assert runner.calls == [("run_with_files", ["claude"], str(tmp_path))]
        assert "## Source PRD File: prd.md" in runner.seen_input
        assert runner.seen_input.endswith("# PRD\n")

    def test_removes_transient_files_after_success(self, prd, tmp_path):
        provider = InlineConversionProvider(FakeConversionRunner(), locate_tool=lambda: ["claude"])

        provider.attempt(prd, str(tmp_path), RecordingLogger())

        assert not (tmp_path / CONVERSION_PROMPT_FILE).exists()
        assert not (tmp_path / CONVERSION_OUTPUT_FILE).exists()

    def test_non_zero_exit_warns_and_cleans_up(self, prd, tmp_path):
        runner = FakeConversionRunner(returncode=1)
        logger = RecordingLogger()
        provider = InlineConversionProvider(runner, locate_tool=lambda: ["claude"])

        attempt = provider.attempt(prd, str(tmp_path), logger)

        assert attempt.status is AttemptStatus.SOFT_FAILURE
        assert logger.messages("WARN") == [
            "PRD conversion may have encountered issues, please review the generated files"
        ]
        assert not (tmp_path / CONVERSION_PROMPT_FILE).exists()
        assert not (tmp_path / CONVERSION_OUTPUT_FILE).exists()

    def test_removes_transient_files_when_tool_raises(self, prd, tmp_path):
        runner = FakeConversionRunner()

        def interrupt():
            raise KeyboardInterrupt

        runner.on_run = interrupt
        provider = InlineConversionProvider(runner, locate_tool=lambda: ["claude"])

        with pytest.raises(KeyboardInterrupt):
            provider.attempt(prd, str(tmp_path), RecordingLogger())

        assert os.listdir(tmp_path) == ["prd.md"]


@pytest.mark.unit
class TestLocateGenerativeTool:

    def test_prefers_claude(self):
        assert locate_generative_tool(which=lambda name: f"/bin/{name}") == ["claude"]

    def test_falls_back_to_npx(self):
        which = {"npx": "/usr/bin/npx"}.get

        assert locate_generative_tool(which=which) == ["npx", "@anthropic-ai/claude-code"]

    def test_none_when_nothing_installed(self):
        assert locate_generative_tool(which=lambda name: None) is None
