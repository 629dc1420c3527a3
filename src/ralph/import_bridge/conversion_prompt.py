"""Build the instruction that asks a generative tool to convert a PRD."""

import os

from ralph.templates.template_renderer import render_template

EXTRACTION_GOALS = (
    "Project goals and objectives",
    "Core features and requirements",
    "Technical constraints and preferences",
    "Priority levels and phases",
    "Success criteria",
)

ARTIFACTS = (
    {
        "path": "PROMPT.md",
        "description": "Transform the PRD into Ralph development instructions "
                       "with project-specific context.",
    },
    {
        "path": "@fix_plan.md",
        "description": "Convert requirements into a prioritized task list "
                       "with clear, implementable tasks.",
    },
    {
        "path": "specs/requirements.md",
        "description": "Create detailed technical specifications preserving "
                       "all technical details from the original PRD.",
    },
)


def build_conversion_prompt(source_file: str) -> str:
    """Render the conversion instruction followed by the verbatim source."""
    with open(source_file, encoding="utf-8", errors="replace") as f:
        source_content = f.read()
    return render_template(
        "conversion_prompt.j2",
        package=__package__,
        extraction_goals=EXTRACTION_GOALS,
        artifacts=ARTIFACTS,
        source_name=os.path.basename(source_file),
        source_content=source_content,
    )
