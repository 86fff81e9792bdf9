# src/recipe_editor/infra/store/http_store.py
"""
Recipes REST API client.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from recipe_editor.config import Settings, get_settings
from recipe_editor.domain.errors import (
    InvalidRecordError,
    RecordNotFoundError,
    StoreRequestError,
    StoreTimeoutError,
)
from recipe_editor.domain.models import Product, Recipe
from recipe_editor.infra.store.base import RecipeStore
from recipe_editor.schemas.recipe import ProductResponse, RecipeResponse
from recipe_editor.services.payload import RecipeUpdatePayload

logger = logging.getLogger(__name__)

_PRODUCT_LIST = TypeAdapter(list[ProductResponse])


class HttpRecipeStore(RecipeStore):
    """
    Recipe store backed by the Recipes API.

    Endpoints:
    - GET  {base}/recipes/{id}
    - PUT  {base}/recipes/{id}          (multipart/form-data)
    - GET  {base}/products/search?q=...
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.base_url = (base_url or settings.RECIPE_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.RECIPE_API_TIMEOUT_SECONDS
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)

    async def __aenter__(self) -> "HttpRecipeStore":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch(self, record_id: str) -> Recipe:
        url = f"{self.base_url}/recipes/{record_id}"
        response = await self._send("GET", url, record_id=record_id)
        try:
            recipe = RecipeResponse.model_validate(response.json()).to_domain()
        except (ValueError, ValidationError) as error:
            raise InvalidRecordError(f"Malformed recipe {record_id}: {error}") from error
        logger.info("store.fetched recipe=%s products=%d", record_id, len(recipe.products))
        return recipe

    async def update(self, record_id: str, payload: RecipeUpdatePayload) -> dict[str, Any]:
        url = f"{self.base_url}/recipes/{record_id}"
        response = await self._send(
            "PUT",
            url,
            record_id=record_id,
            files=payload.multipart_parts(),
        )
        logger.info("store.updated recipe=%s status=%s", record_id, response.status_code)
        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError:
            return {"raw": response.text}
        return body if isinstance(body, dict) else {"data": body}

    async def search_products(self, query: str) -> list[Product]:
        url = f"{self.base_url}/products/search"
        response = await self._send("GET", url, params={"q": query})
        try:
            items = _PRODUCT_LIST.validate_python(response.json())
        except (ValueError, ValidationError) as error:
            raise InvalidRecordError(f"Malformed product search result: {error}") from error
        return [item.to_domain() for item in items]

    async def _send(
        self,
        method: str,
        url: str,
        record_id: Optional[str] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as error:
            raise StoreTimeoutError(url, self.timeout) from error
        except httpx.HTTPStatusError as error:
            status_code = error.response.status_code
            if status_code == 404 and record_id is not None:
                raise RecordNotFoundError(record_id) from error
            raise StoreRequestError(
                f"HTTP {status_code} from {method} {url}", status_code=status_code
            ) from error
        except httpx.RequestError as error:
            raise StoreRequestError(f"Request to {url} failed: {error}") from error
