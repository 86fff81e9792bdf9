# src/recipe_editor/services/edit_session.py
"""
Edit session for a single recipe.
Loads the recipe, holds the local working copy and submits it back.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from recipe_editor.config import Settings, get_settings
from recipe_editor.domain.errors import (
    HydrationError,
    SessionClosedError,
    StoreError,
    SubmissionError,
    SubmissionInProgressError,
)
from recipe_editor.domain.models import EditableProduct, EditableState, Product, SessionStatus
from recipe_editor.infra.store.base import RecipeStore
from recipe_editor.services.fields import AttachmentSlot, ScalarFieldStore
from recipe_editor.services.hydrator import to_editable_state
from recipe_editor.services.notifier import NavigateCallback, SessionResultNotifier, StatusCallback
from recipe_editor.services.payload import build_payload
from recipe_editor.services.products import ProductListEditor
from recipe_editor.services.steps import StepListEditor

logger = logging.getLogger(__name__)


class RecipeEditSession:
    """
    Owns all mutable state while one recipe is being edited.

    Responsibilities:
    - Hydrate the fragment editors from the store (once per record id)
    - Expose the fragment editors to the UI
    - Submit the composite back and report the outcome
    - Drop late results once the session is closed or switched

    Usage:
        async with RecipeEditSession(recipe_id, store, on_navigate=go) as session:
            session.steps.append()
            await session.submit()
    """

    def __init__(
        self,
        record_id: str,
        store: RecipeStore,
        *,
        on_navigate: Optional[NavigateCallback] = None,
        on_status: Optional[StatusCallback] = None,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or get_settings()
        self._store = store
        self._on_navigate = on_navigate
        self._on_status = on_status
        self.record_id = record_id

        self.fields = ScalarFieldStore()
        self.steps = StepListEditor()
        self.products = ProductListEditor(default_quantity=self._settings.DEFAULT_PRODUCT_QUANTITY)
        self.photo = AttachmentSlot()
        self.notifier = self._new_notifier()

        self.hydrated = False
        self.hydration_error: Optional[HydrationError] = None
        self.closed = False
        self._generation = 0
        self._hydrating_generation: Optional[int] = None

    async def __aenter__(self) -> "RecipeEditSession":
        await self.hydrate()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def status(self) -> SessionStatus:
        return self.notifier.status

    def snapshot(self) -> EditableState:
        return EditableState(
            title=self.fields.title,
            description=self.fields.description,
            course=self.fields.course,
            steps=self.steps.steps,
            products=self.products.products,
            preparation_time=self.fields.preparation_time,
            cooking_time=self.fields.cooking_time,
            photo=self.photo.pending,
        )

    def on_add_product(self, product: Union[Product, Mapping[str, Any]]) -> EditableProduct:
        return self.products.on_add_product(product)

    async def hydrate(self) -> bool:
        """
        Load the recipe into the fragment editors.

        Returns:
            True if the state was populated. On failure the error is logged,
            kept on ``hydration_error`` and the form stays blank.
            Runs once per record id: later calls leave the edits alone.
        """
        self._ensure_open()
        if self.hydrated:
            return True
        generation = self._generation
        if self._hydrating_generation == generation:
            logger.debug("edit_session.hydration_pending recipe=%s", self.record_id)
            return False
        self._hydrating_generation = generation
        try:
            return await self._hydrate()
        finally:
            if self._hydrating_generation == generation:
                self._hydrating_generation = None

    async def _hydrate(self) -> bool:
        generation = self._generation
        record_id = self.record_id

        try:
            recipe = await self._store.fetch(record_id)
        except StoreError as exc:
            if self._is_stale(generation):
                logger.info("edit_session.hydration_discarded recipe=%s", record_id)
                return False
            self.hydration_error = HydrationError(record_id, exc)
            logger.error("edit_session.hydration_failed recipe=%s error=%s", record_id, exc)
            return False

        if self._is_stale(generation):
            logger.info("edit_session.hydration_discarded recipe=%s", record_id)
            return False

        self._apply(to_editable_state(recipe))
        self.hydrated = True
        self.hydration_error = None
        logger.info(
            "edit_session.hydrated recipe=%s steps=%d products=%d",
            record_id,
            len(self.steps),
            len(self.products),
        )
        return True

    async def switch_record(self, record_id: str) -> bool:
        """Point the session at another recipe and hydrate it from scratch."""
        self._ensure_open()
        self._generation += 1
        self.notifier.cancel()
        self.notifier = self._new_notifier()
        self.record_id = record_id
        self.hydrated = False
        self.hydration_error = None
        self._apply(EditableState())
        return await self.hydrate()

    async def submit(self) -> bool:
        """
        Send the working copy to the store.

        Returns:
            True on success, False if the store rejected the update (edits are kept)

        Raises:
            SubmissionInProgressError: If a previous submission is still pending
            SessionClosedError: If the session was closed or already saved
        """
        self._ensure_open()
        if self.notifier.is_busy:
            raise SubmissionInProgressError(self.record_id)
        if not self.notifier.can_submit:
            raise SessionClosedError(self.record_id)

        generation = self._generation
        record_id = self.record_id
        payload = build_payload(self.snapshot())
        notifier = self.notifier
        notifier.begin()

        try:
            ack = await self._store.update(record_id, payload)
        except StoreError as exc:
            if self._is_stale(generation):
                logger.info("edit_session.submission_discarded recipe=%s", record_id)
                return False
            error = SubmissionError(record_id, exc)
            logger.error("edit_session.submission_failed recipe=%s error=%s", record_id, exc)
            notifier.fail(error)
            return False
        except BaseException:
            if not self._is_stale(generation):
                notifier.reset()
            raise

        if self._is_stale(generation):
            logger.info("edit_session.submission_discarded recipe=%s", record_id)
            return False

        logger.info("edit_session.updated recipe=%s ack=%s", record_id, ack)
        notifier.succeed()
        return True

    def dismiss(self) -> None:
        self.notifier.dismiss()

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._generation += 1
        self.notifier.cancel()
        logger.debug("edit_session.closed recipe=%s", self.record_id)

    def _new_notifier(self) -> SessionResultNotifier:
        return SessionResultNotifier(
            on_navigate=self._on_navigate,
            ack_seconds=self._settings.SUCCESS_ACK_SECONDS,
            listing_route=self._settings.LISTING_ROUTE,
            on_status=self._on_status,
        )

    def _apply(self, state: EditableState) -> None:
        self.fields.reset(
            title=state.title,
            description=state.description,
            course=state.course,
            preparation_time=state.preparation_time,
            cooking_time=state.cooking_time,
        )
        self.steps.reset(state.steps)
        self.products.reset(state.products)
        self.photo.set(state.photo)

    def _is_stale(self, generation: int) -> bool:
        return self.closed or generation != self._generation

    def _ensure_open(self) -> None:
        if self.closed:
            raise SessionClosedError(self.record_id)
