from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable, Mapping, Union

from recipe_editor.domain.models import EditableProduct, Product, Quantity
from recipe_editor.services.numeric import parse_non_negative

logger = logging.getLogger(__name__)

DEFAULT_QUANTITY = 100


class ProductListEditor:
    """
    Products used by the recipe, in display order.

    Entries are positional: the same product may appear more than once.
    Mutations never touch the current tuple, they replace it.
    """

    def __init__(
        self,
        products: Iterable[EditableProduct] = (),
        default_quantity: Quantity = DEFAULT_QUANTITY,
    ):
        self._products: tuple[EditableProduct, ...] = tuple(products)
        self.default_quantity = default_quantity

    @property
    def products(self) -> tuple[EditableProduct, ...]:
        return self._products

    def __len__(self) -> int:
        return len(self._products)

    def reset(self, products: Iterable[EditableProduct] = ()) -> None:
        self._products = tuple(products)

    def add(self, product_id: str, name: str) -> EditableProduct:
        entry = EditableProduct(product_id=product_id, name=name, quantity=self.default_quantity)
        self._products = self._products + (entry,)
        return entry

    def on_add_product(self, product: Union[Product, Mapping[str, Any]]) -> EditableProduct:
        """Callback for the product lookup: accepts a Product or a raw ``{_id, name}`` hit."""
        if isinstance(product, Product):
            return self.add(product.id, product.name)
        return self.add(str(product["_id"]), str(product["name"]))

    def update_quantity(self, index: int, quantity: Any) -> None:
        if not 0 <= index < len(self._products):
            logger.debug("products.update_ignored index=%s size=%d", index, len(self._products))
            return
        parsed = parse_non_negative(quantity)
        if parsed is None:
            logger.debug("products.quantity_rejected index=%d value=%r", index, quantity)
            return
        updated = replace(self._products[index], quantity=parsed)
        self._products = self._products[:index] + (updated,) + self._products[index + 1:]

    def remove_at(self, index: int) -> None:
        if not 0 <= index < len(self._products):
            return
        self._products = self._products[:index] + self._products[index + 1:]
