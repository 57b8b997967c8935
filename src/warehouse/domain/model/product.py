"""ProductRecord value object.

A record is immutable: changing a price means building a new record
that carries the same id. Identity lives entirely in the id, so two
records with the same id are equal no matter what else differs.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from decimal import Decimal, InvalidOperation

from warehouse.domain.exceptions import ValidationError
from warehouse.domain.model.category import Category


def to_price(amount: str | float | int | Decimal | None) -> Decimal:
    """Coerce a user-supplied amount to Decimal; ``None`` means zero."""
    if amount is None:
        return Decimal("0")
    if isinstance(amount, Decimal):
        value = amount
    else:
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid price: {amount!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid price: {amount!r}")
    return value


def to_product_id(value: str | uuid.UUID) -> uuid.UUID:
    """Parse a product id given as text."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value).strip())
    except ValueError as exc:
        raise ValidationError(f"Invalid product id: {value!r}") from exc


@dataclass(frozen=True)
class ProductRecord:
    """A single product held by a warehouse."""

    name: str = field(compare=False)
    category: Category = field(compare=False)
    price: Decimal = field(default=Decimal("0"), compare=False)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name can't be null or empty")
        if not isinstance(self.category, Category):
            raise ValidationError("Product category can't be null")
        if not isinstance(self.price, Decimal):
            raise ValidationError(
                f"Product price must be a Decimal, got {type(self.price).__name__}"
            )
        if not isinstance(self.id, uuid.UUID):
            raise ValidationError(
                f"Product id must be a UUID, got {type(self.id).__name__}"
            )

    def with_price(self, new_price: Decimal) -> ProductRecord:
        return replace(self, price=new_price)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        product_id: uuid.UUID | None,
        name: str,
        category: Category | None,
        price: str | float | int | Decimal | None = None,
    ) -> ProductRecord:
        """Build a record, generating the id and defaulting the price as needed."""
        if category is None:
            raise ValidationError("Product category can't be null")
        return ProductRecord(
            name=name,
            category=category,
            price=to_price(price),
            id=product_id if product_id is not None else uuid.uuid4(),
        )
