"""
burger_builder package

A small illustration of the Builder pattern: a `Burger` value object is assembled
through a fluent `BurgerBuilder` and rendered to a one-line description.

Key responsibilities are split across modules:
- `burger.py`: the immutable `Burger` and its fluent `BurgerBuilder`
- `order_parser.py`: load partial burger orders from YAML / markdown frontmatter
- `renderer.py`: render a burger through a Jinja2 template
- `cli.py`: CLI entrypoint and orchestration (order -> builder -> print)
"""

from __future__ import annotations

from burger_builder.burger import Burger, BurgerBuilder

__all__ = ["Burger", "BurgerBuilder", "__version__"]

__version__ = "0.1.0"
