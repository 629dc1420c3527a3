"""Shared fixtures: a populated template root and an empty project directory."""

import os
import sys

import pytest

# Ensure tests/ is on sys.path so test files can import the helpers and
# fakes that live beside this file.
sys.path.insert(0, os.path.dirname(__file__))

from scaffold_helpers import (  # noqa: E402
    AGENT_TEMPLATE,
    FIX_PLAN_TEMPLATE,
    PROMPT_TEMPLATE,
    SPEC_TEMPLATE,
)


@pytest.fixture
def template_root(tmp_path):
    """A $RALPH_HOME/templates directory holding every Ralph template."""
    root = tmp_path / "ralph-home" / "templates"
    root.mkdir(parents=True)
    (root / "PROMPT.md").write_text(PROMPT_TEMPLATE)
    (root / "fix_plan.md").write_text(FIX_PLAN_TEMPLATE)
    (root / "AGENT.md").write_text(AGENT_TEMPLATE)
    specs = root / "specs"
    specs.mkdir()
    (specs / "example.md").write_text(SPEC_TEMPLATE)
    return root


@pytest.fixture
def ralph_home(template_root, monkeypatch):
    """Point $RALPH_HOME at the directory containing template_root."""
    monkeypatch.setenv("RALPH_HOME", str(template_root.parent))
    return template_root.parent


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """An empty directory that is also the current working directory."""
    directory = tmp_path / "project"
    directory.mkdir()
    monkeypatch.chdir(directory)
    return directory


@pytest.fixture
def git_identity(monkeypatch):
    for var in ("GIT_AUTHOR_NAME", "GIT_COMMITTER_NAME"):
        monkeypatch.setenv(var, "Test")
    for var in ("GIT_AUTHOR_EMAIL", "GIT_COMMITTER_EMAIL"):
        monkeypatch.setenv(var, "test@test.com")
