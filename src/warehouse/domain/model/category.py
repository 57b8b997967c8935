"""Closed set of product categories."""

from __future__ import annotations

from enum import Enum

from warehouse.domain.exceptions import ValidationError


class Category(Enum):

    ELECTRONICS = "ELECTRONICS"
    GROCERY = "GROCERY"
    CLOTHING = "CLOTHING"
    TOOLS = "TOOLS"
    TOYS = "TOYS"
    BOOKS = "BOOKS"
    FRUITS = "FRUITS"
    VEGETABLES = "VEGETABLES"
    DAIRY = "DAIRY"
    MEAT = "MEAT"
    BAKERY = "BAKERY"
    BEVERAGES = "BEVERAGES"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def parse(text: str | Category) -> Category:
        """Look up a category by name, ignoring case."""
        if isinstance(text, Category):
            return text
        key = (text or "").strip().upper()
        try:
            return Category[key]
        except KeyError as exc:
            raise ValidationError(f"Unknown category: {text!r}") from exc
