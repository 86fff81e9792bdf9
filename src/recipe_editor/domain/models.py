# src/recipe_editor/domain/models.py
"""
Domain models for the recipe edit session.
These are pure data structures with no infrastructure dependencies.
"""
from __future__ import annotations

import mimetypes
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union

Quantity = Union[int, float]


class Course(str, Enum):
    """Meal slot a recipe belongs to."""
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class SessionStatus(str, Enum):
    """Submission state of an edit session."""
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Product:
    """A product as known by the remote catalog."""
    id: str
    name: str


@dataclass
class RecipeProduct:
    """A product reference with the amount used by a recipe (grams or ml)."""
    product: Product
    quantity: Quantity


@dataclass
class Recipe:
    """
    A recipe as returned by the remote store.
    Never mutated by the edit session.
    """
    id: str
    title: str
    description: str = ""
    course: Course = Course.BREAKFAST
    steps: list[str] = field(default_factory=list)
    products: list[RecipeProduct] = field(default_factory=list)
    preparation_time: Quantity = 0  # minutes
    cooking_time: Quantity = 0      # minutes
    photo: Optional[str] = None     # URL of the stored photo


@dataclass(frozen=True)
class EditableProduct:
    """
    Local working copy of a recipe product.
    The name is copied at hydration time so rows render without a lookup.
    """
    product_id: str
    name: str
    quantity: Quantity


@dataclass(frozen=True)
class PhotoAttachment:
    """A pending photo upload held by the attachment slot."""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "PhotoAttachment":
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(
            filename=path.name,
            content=path.read_bytes(),
            content_type=content_type or "application/octet-stream",
        )


@dataclass
class EditableState:
    """Snapshot of every fragment of the edit session."""
    title: str = ""
    description: str = ""
    course: Course = Course.BREAKFAST
    steps: tuple[str, ...] = ("",)
    products: tuple[EditableProduct, ...] = ()
    preparation_time: Quantity = 0
    cooking_time: Quantity = 0
    photo: Optional[PhotoAttachment] = None
