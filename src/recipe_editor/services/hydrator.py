from __future__ import annotations

import logging
from typing import Any

from recipe_editor.domain.models import EditableProduct, EditableState, Quantity, Recipe
from recipe_editor.services.numeric import parse_non_negative

logger = logging.getLogger(__name__)


def _clean_quantity(value: Any, field_name: str, record_id: str) -> Quantity:
    parsed = parse_non_negative(value)
    if parsed is None:
        logger.warning("hydrator.invalid_number recipe=%s field=%s value=%r", record_id, field_name, value)
        return 0
    return parsed


def to_editable_products(recipe: Recipe) -> tuple[EditableProduct, ...]:
    return tuple(
        EditableProduct(
            product_id=item.product.id,
            name=item.product.name,
            quantity=_clean_quantity(item.quantity, "quantity", recipe.id),
        )
        for item in recipe.products
    )


def to_editable_state(recipe: Recipe) -> EditableState:
    """
    Project a fetched recipe into the session's local working copy.
    Numbers from the store go through the same non-negative guard as user input.
    """
    return EditableState(
        title=recipe.title,
        description=recipe.description,
        course=recipe.course,
        # the step editor always shows at least one input
        steps=tuple(recipe.steps) or ("",),
        products=to_editable_products(recipe),
        preparation_time=_clean_quantity(recipe.preparation_time, "preparationTime", recipe.id),
        cooking_time=_clean_quantity(recipe.cooking_time, "cookingTime", recipe.id),
    )
