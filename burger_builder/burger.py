"""
burger.py

Responsibility: The `Burger` value object and the fluent `BurgerBuilder` that assembles it.

Rules:
- A `Burger` never changes after construction (frozen dataclass).
- The builder validates nothing: every setter stores its value and returns the builder.
- Unset fields keep their zero values ("" / False) and render as empty segments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Burger:
    """An assembled burger. Obtain one through `Burger.builder()`."""

    Builder: ClassVar[type[BurgerBuilder]]

    bread: str = ""
    patty: str = ""
    cheese: bool = False
    lettuce: bool = False

    @classmethod
    def builder(cls) -> BurgerBuilder:
        return BurgerBuilder()

    def describe(self) -> str:
        return (
            "Burger with "
            + self.bread
            + ", "
            + self.patty
            + (", Cheese" if self.cheese else "")
            + (", Lettuce" if self.lettuce else "")
        )

    def __str__(self) -> str:
        return self.describe()


class BurgerBuilder:
    def __init__(self) -> None:
        self._bread = ""
        self._patty = ""
        self._cheese = False
        self._lettuce = False

    def set_bread(self, bread: str) -> BurgerBuilder:
        self._bread = bread
        return self

    def set_patty(self, patty: str) -> BurgerBuilder:
        self._patty = patty
        return self

    def set_cheese(self, cheese: bool) -> BurgerBuilder:
        self._cheese = cheese
        return self

    def set_lettuce(self, lettuce: bool) -> BurgerBuilder:
        self._lettuce = lettuce
        return self

    def build(self) -> Burger:
        """
        Copy the current field values into a new `Burger`.

        Safe to call repeatedly; each call returns an independent, equal result.
        """
        return Burger(
            bread=self._bread,
            patty=self._patty,
            cheese=self._cheese,
            lettuce=self._lettuce,
        )


Burger.Builder = BurgerBuilder
