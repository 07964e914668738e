"""
order_parser.py

Responsibility: Load a burger order file into a typed, partial `BurgerOrder`.

Accepted inputs:
- A markdown file (.md / .markdown) that begins with YAML frontmatter delimited by '---'.
- Any other file is read as a plain YAML document.

Either way the top level must be a mapping. The fields may sit at the top level or
under a `burger:` key. Fields that are missing stay unset, so the builder keeps its
own zero values for them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from burger_builder.burger import BurgerBuilder

logger = logging.getLogger(__name__)

_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0"})
_MARKDOWN_SUFFIXES = frozenset({".md", ".markdown"})


class OrderError(ValueError):
    pass


@dataclass(frozen=True)
class BurgerOrder:
    """A partial set of burger fields. `None` means "not specified"."""

    bread: str | None = None
    patty: str | None = None
    cheese: bool | None = None
    lettuce: bool | None = None

    def merged(self, other: BurgerOrder) -> BurgerOrder:
        """Return a copy where every field set on `other` replaces ours."""
        changes = {f.name: getattr(other, f.name) for f in fields(other) if getattr(other, f.name) is not None}
        return replace(self, **changes)

    def apply(self, builder: BurgerBuilder) -> BurgerBuilder:
        if self.bread is not None:
            builder.set_bread(self.bread)
        if self.patty is not None:
            builder.set_patty(self.patty)
        if self.cheese is not None:
            builder.set_cheese(self.cheese)
        if self.lettuce is not None:
            builder.set_lettuce(self.lettuce)
        return builder


DEMO_ORDER = BurgerOrder(bread="Whole Wheat", patty="Veg", cheese=True, lettuce=True)


def _split_yaml_frontmatter(text: str) -> tuple[str, str]:
    """
    Split markdown text into (frontmatter_text, remaining_markdown_text).
    """
    if not text.startswith("---\n"):
        raise OrderError("Markdown order must begin with YAML frontmatter ('---').")

    # Search from the newline that ends the opening delimiter so empty frontmatter closes too.
    end = text.find("\n---\n", 3)
    if end == -1 and text.endswith("\n---"):
        return text[4:-3], ""
    if end == -1:
        raise OrderError("YAML frontmatter starts with '---' but no closing '---' was found.")
    return text[4:end], text[end + len("\n---\n") :]


def _as_text(key: str, value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise OrderError(f"`{key}` must be a scalar value, got {type(value).__name__}.")
    return str(value)


def _as_flag(key: str, value: Any) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise OrderError(f"`{key}` must be a boolean (true/false, yes/no, on/off, 1/0), got {value!r}.")


def parse_order_text(text: str, *, markdown: bool = False) -> BurgerOrder:
    source = _split_yaml_frontmatter(text)[0] if markdown else text

    try:
        data = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise OrderError(f"Order is not valid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise OrderError("Order must be a mapping/object at the top level.")

    if "burger" in data:
        data = data["burger"]
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise OrderError("`burger` must be an object/mapping when provided.")

    return BurgerOrder(
        bread=_as_text("bread", data.get("bread")),
        patty=_as_text("patty", data.get("patty")),
        cheese=_as_flag("cheese", data.get("cheese")),
        lettuce=_as_flag("lettuce", data.get("lettuce")),
    )


def parse_order(order_path: str | Path) -> BurgerOrder:
    """
    Parse an order file into a `BurgerOrder`.

    Recognised keys: bread (str), patty (str), cheese (bool), lettuce (bool).
    Unknown keys are ignored.
    """
    path = Path(order_path)
    if not path.exists():
        raise OrderError(f"Order file does not exist: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise OrderError(f"Cannot read order file {path}: {e}") from e
    markdown = path.suffix.lower() in _MARKDOWN_SUFFIXES
    order = parse_order_text(text, markdown=markdown)
    logger.debug("Parsed order from %s: %s", path, order)
    return order
