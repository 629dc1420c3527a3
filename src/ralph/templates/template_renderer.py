"""Render the Jinja2 prompt templates bundled with Ralph."""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Render ``template_name`` from the ``templates`` subpackage of *package*.

    Callers pass ``package=__package__``. Undefined variables raise
    jinja2.UndefinedError instead of rendering as empty strings.

    Raises:
        FileNotFoundError: If the template does not exist.
    """
    template_file = importlib.resources.files(f"{package}.templates") / template_name
    if not template_file.is_file():
        raise FileNotFoundError(f"Template not found: {template_name}")
    env = jinja2.Environment(undefined=jinja2.StrictUndefined)
    return env.from_string(template_file.read_text(encoding="utf-8")).render(**kwargs)
