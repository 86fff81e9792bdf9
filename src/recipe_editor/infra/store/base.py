# src/recipe_editor/infra/store/base.py
"""
Abstract base class for the remote recipe store.
This interface allows the edit session to run against any backend.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from recipe_editor.domain.models import Product, Recipe

if TYPE_CHECKING:
    from recipe_editor.services.payload import RecipeUpdatePayload


class RecipeStore(ABC):
    """
    Abstract interface for remote recipe operations.

    Implementations:
    - HttpRecipeStore: the Recipes REST API over httpx
    """

    @abstractmethod
    async def fetch(self, record_id: str) -> Recipe:
        """
        Fetch a recipe by its identifier.

        Args:
            record_id: The recipe ID

        Returns:
            The recipe with its products resolved

        Raises:
            StoreError: If the recipe could not be loaded
        """
        pass

    @abstractmethod
    async def update(self, record_id: str, payload: "RecipeUpdatePayload") -> dict[str, Any]:
        """
        Replace the editable fields of a recipe.

        Args:
            record_id: The recipe ID
            payload: Encoded fields plus an optional photo

        Returns:
            The store's acknowledgment body

        Raises:
            StoreError: If the update was rejected
        """
        pass

    async def search_products(self, query: str) -> list[Product]:
        """
        Search the product catalog by name.

        Args:
            query: Free-text search

        Returns:
            Matching products, best match first
        """
        return []
