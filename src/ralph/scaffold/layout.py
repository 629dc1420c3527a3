"""The fixed set of directories and templates Ralph scaffolds."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TemplateSpec:
    """A template file copied from the template root into the destination."""

    name: str
    source_relative_path: str
    destination_relative_path: str


PROMPT = TemplateSpec("prompt", "PROMPT.md", "PROMPT.md")
FIX_PLAN = TemplateSpec("fix plan", "fix_plan.md", "@fix_plan.md")
AGENT = TemplateSpec("agent", "AGENT.md", "@AGENT.md")

TEMPLATE_FILES = (PROMPT, FIX_PLAN, AGENT)

# Directory-valued entry: the contents of templates/specs/ seed specs/.
SPECS_SEED = TemplateSpec("specs templates", "specs", "specs")

IN_PLACE_DIRECTORIES = (
    "specs/stdlib",
    "src",
    "examples",
    "logs",
    "docs/generated",
)

NEW_PROJECT_DIRECTORIES = (
    "specs/stdlib",
    "logs",
    "docs/generated",
)
