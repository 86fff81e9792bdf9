from __future__ import annotations

import logging
from typing import Any, Optional

from recipe_editor.domain.models import Course, PhotoAttachment, Quantity
from recipe_editor.services.numeric import parse_non_negative

logger = logging.getLogger(__name__)


class ScalarFieldStore:
    """Last-write-wins holder for the recipe's plain fields."""

    def __init__(self) -> None:
        self.reset()

    def reset(
        self,
        title: str = "",
        description: str = "",
        course: Course = Course.BREAKFAST,
        preparation_time: Quantity = 0,
        cooking_time: Quantity = 0,
    ) -> None:
        self.title = title
        self.description = description
        self.course = course
        self.preparation_time = preparation_time
        self.cooking_time = cooking_time

    def set_title(self, value: str) -> None:
        self.title = value

    def set_description(self, value: str) -> None:
        self.description = value

    def set_course(self, value: Any) -> None:
        try:
            self.course = Course(value)
        except ValueError:
            logger.debug("fields.course_rejected value=%r", value)

    def set_preparation_time(self, value: Any) -> None:
        parsed = parse_non_negative(value)
        if parsed is None:
            logger.debug("fields.preparation_time_rejected value=%r", value)
            return
        self.preparation_time = parsed

    def set_cooking_time(self, value: Any) -> None:
        parsed = parse_non_negative(value)
        if parsed is None:
            logger.debug("fields.cooking_time_rejected value=%r", value)
            return
        self.cooking_time = parsed


class AttachmentSlot:
    """
    At most one pending photo.
    Empty means the stored photo is kept as is.
    """

    def __init__(self) -> None:
        self._pending: Optional[PhotoAttachment] = None

    @property
    def pending(self) -> Optional[PhotoAttachment]:
        return self._pending

    def set(self, photo: Optional[PhotoAttachment]) -> None:
        self._pending = photo

    def clear(self) -> None:
        self._pending = None
