from __future__ import annotations

import logging
from typing import Iterable

logger = logging.getLogger(__name__)


class StepListEditor:
    """
    Ordered cooking instructions.

    The list never gets shorter than one entry and only the trailing step can
    be removed. Every edit swaps in a new tuple.
    """

    def __init__(self, steps: Iterable[str] = ("",)):
        self._steps: tuple[str, ...] = tuple(steps) or ("",)

    @property
    def steps(self) -> tuple[str, ...]:
        return self._steps

    @property
    def can_remove(self) -> bool:
        return len(self._steps) > 1

    def __len__(self) -> int:
        return len(self._steps)

    def reset(self, steps: Iterable[str] = ("",)) -> None:
        self._steps = tuple(steps) or ("",)

    def append(self) -> None:
        self._steps = self._steps + ("",)

    def update(self, index: int, text: str) -> None:
        if not 0 <= index < len(self._steps):
            logger.debug("steps.update_ignored index=%s size=%d", index, len(self._steps))
            return
        self._steps = self._steps[:index] + (text,) + self._steps[index + 1:]

    def remove_last(self) -> None:
        if not self.can_remove:
            return
        self._steps = self._steps[:-1]
