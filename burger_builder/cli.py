"""
cli.py

Responsibility: CLI entrypoint for burger-builder.

High-level flow:
1) Start from an order file (`--order`) or the demo order
2) Apply command-line overrides
3) Feed the order through a `BurgerBuilder` and build the `Burger`
4) Print one line: `Burger.describe()`, or a Jinja2 rendering when `--template` is given

This module should orchestrate behavior but keep concerns isolated:
- Burger construction: `burger.py`
- Order files: `order_parser.py`
- Templates: `renderer.py`
"""

from __future__ import annotations

import argparse
import logging
import sys

from burger_builder.burger import Burger, BurgerBuilder
from burger_builder.order_parser import DEMO_ORDER, BurgerOrder, parse_order
from burger_builder.renderer import load_template, render_burger

logger = logging.getLogger(__name__)


class CLIError(RuntimeError):
    pass


def _configure_logging(verbose: bool) -> None:
    # stdout carries the burger line only; diagnostics go to stderr.
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def _overrides(args: argparse.Namespace) -> BurgerOrder:
    return BurgerOrder(
        bread=args.bread,
        patty=args.patty,
        cheese=args.cheese,
        lettuce=args.lettuce,
    )


def build_burger(args: argparse.Namespace) -> Burger:
    if args.order_path:
        order = parse_order(args.order_path)
        logger.debug("Using order file %s", args.order_path)
    else:
        order = DEMO_ORDER
        logger.debug("No order file given; using the demo order")

    overrides = _overrides(args)
    if overrides != BurgerOrder():
        logger.debug("Applying command-line overrides: %s", overrides)
    order = order.merged(overrides)

    return order.apply(BurgerBuilder()).build()


def build_cmd(args: argparse.Namespace) -> int:
    burger = build_burger(args)

    if args.template_path:
        text = render_burger(burger, load_template(args.template_path))
    else:
        text = burger.describe()

    line = text.rstrip("\r\n")
    if "\n" in line or "\r" in line:
        raise CLIError("Rendered burger must be a single line (only trailing newlines are allowed)")
    print(line)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="burger-builder", description="Assemble a burger and print its description")
    p.add_argument("--order", dest="order_path", default=None, help="Order file (YAML, or markdown with YAML frontmatter)")
    p.add_argument("--template", dest="template_path", default=None, help="Jinja2 template file used to render the burger")

    p.add_argument("--bread", default=None, help="Bread (overrides the order)")
    p.add_argument("--patty", default=None, help="Patty (overrides the order)")
    p.add_argument("--cheese", dest="cheese", action="store_true", default=None, help="Add cheese")
    p.add_argument("--no-cheese", dest="cheese", action="store_false", default=None, help="Leave out cheese")
    p.add_argument("--lettuce", dest="lettuce", action="store_true", default=None, help="Add lettuce")
    p.add_argument("--no-lettuce", dest="lettuce", action="store_false", default=None, help="Leave out lettuce")

    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    p.set_defaults(func=build_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(bool(args.verbose))
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
