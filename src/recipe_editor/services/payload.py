from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from recipe_editor.domain.models import Course, EditableState, PhotoAttachment, Quantity

logger = logging.getLogger(__name__)

FileTuple = tuple[Optional[str], Any, Optional[str]]


def _compact_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


@dataclass
class RecipeUpdatePayload:
    """Everything sent to the store's update call."""
    title: str
    description: str
    course: Course
    steps: list[str] = field(default_factory=list)
    products: list[dict[str, Any]] = field(default_factory=list)
    preparation_time: Quantity = 0
    cooking_time: Quantity = 0
    photo: Optional[PhotoAttachment] = None

    def form_fields(self) -> dict[str, str]:
        return {
            "title": self.title,
            "description": self.description,
            "course": self.course.value,
            "steps": _compact_json(self.steps),
            "products": _compact_json(self.products),
            "preparationTime": str(self.preparation_time),
            "cookingTime": str(self.cooking_time),
        }

    def files(self) -> dict[str, FileTuple]:
        if self.photo is None:
            return {}
        return {
            "photo": (self.photo.filename, self.photo.content, self.photo.content_type),
        }

    def multipart_parts(self) -> list[tuple[str, FileTuple]]:
        """
        Every field as a multipart part.
        Text fields go without a filename so the body is always form-data,
        even when no photo is attached.
        """
        parts: list[tuple[str, FileTuple]] = [
            (name, (None, value, None)) for name, value in self.form_fields().items()
        ]
        parts.extend(self.files().items())
        return parts


def build_payload(state: EditableState) -> RecipeUpdatePayload:
    """Assemble the update payload, dropping the display-only product names."""
    payload = RecipeUpdatePayload(
        title=state.title,
        description=state.description,
        course=state.course,
        steps=list(state.steps),
        products=[
            {"product": item.product_id, "quantity": item.quantity}
            for item in state.products
        ],
        preparation_time=state.preparation_time,
        cooking_time=state.cooking_time,
        photo=state.photo,
    )

    for name, value in payload.form_fields().items():
        logger.debug("payload.field %s=%s", name, value)
    if payload.photo is not None:
        logger.debug(
            "payload.field photo=%s (%d bytes, %s)",
            payload.photo.filename,
            len(payload.photo.content),
            payload.photo.content_type,
        )
    return payload
