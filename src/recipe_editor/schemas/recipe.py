from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from recipe_editor.domain.models import Course, Product, Recipe, RecipeProduct


class ProductResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., alias="_id")
    name: str

    def to_domain(self) -> Product:
        return Product(id=self.id, name=self.name)


class RecipeProductResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    product: ProductResponse
    quantity: Union[int, float] = 0


class RecipeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(..., alias="_id")
    title: str = ""
    description: Optional[str] = None
    course: Course = Course.BREAKFAST
    steps: list[str] = Field(default_factory=list)
    products: list[RecipeProductResponse] = Field(default_factory=list)
    preparationTime: Union[int, float] = 0
    cookingTime: Union[int, float] = 0
    photo: Optional[str] = None

    def to_domain(self) -> Recipe:
        return Recipe(
            id=self.id,
            title=self.title,
            description=self.description or "",
            course=self.course,
            steps=list(self.steps),
            products=[
                RecipeProduct(product=item.product.to_domain(), quantity=item.quantity)
                for item in self.products
            ],
            preparation_time=self.preparationTime,
            cooking_time=self.cookingTime,
            photo=self.photo,
        )
