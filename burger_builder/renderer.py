"""
renderer.py

Responsibility: Render a `Burger` through a Jinja2 template.

Rules:
- Template context is exactly the burger's fields: bread, patty, cheese, lettuce.
- Undefined variables are errors (StrictUndefined), not silent blanks.
- The default template produces the same text as `Burger.describe()`.

This module intentionally does NOT know about order files or CLI parsing.
"""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

from jinja2 import Environment, StrictUndefined, TemplateError

from burger_builder.burger import Burger

DEFAULT_TEMPLATE = (
    "Burger with {{ bread }}, {{ patty }}"
    "{% if cheese %}, Cheese{% endif %}"
    "{% if lettuce %}, Lettuce{% endif %}"
)


class RenderError(RuntimeError):
    pass


def _environment() -> Environment:
    return Environment(
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def load_template(template_path: str | Path) -> str:
    path = Path(template_path)
    if not path.is_file():
        raise RenderError(f"Template file not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RenderError(f"Cannot read template file {path}: {e}") from e


def render_burger(burger: Burger, template: str | None = None) -> str:
    """
    Render `burger` with `template` (Jinja2 source), or with `DEFAULT_TEMPLATE`.
    """
    source = DEFAULT_TEMPLATE if template is None else template
    try:
        return _environment().from_string(source).render(**asdict(burger))
    except TemplateError as e:
        raise RenderError(f"Failed rendering burger template: {e}") from e
