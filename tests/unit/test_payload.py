from __future__ import annotations

import json

from recipe_editor.domain.models import (
    Course,
    EditableProduct,
    EditableState,
    PhotoAttachment,
    Product,
    Recipe,
    RecipeProduct,
)
from recipe_editor.services.hydrator import to_editable_state
from recipe_editor.services.payload import build_payload


def create_test_recipe() -> Recipe:
    return Recipe(
        id="r1",
        title="Bread",
        description="Plain loaf",
        course=Course.LUNCH,
        steps=["a", "b"],
        products=[RecipeProduct(product=Product(id="p1", name="Flour"), quantity=200)],
        preparation_time=20,
        cooking_time=45,
        photo="https://cdn.example.com/bread.jpg",
    )


class TestHydrator:
    def test_projects_products_into_flat_entries(self) -> None:
        state = to_editable_state(create_test_recipe())

        assert state.products == (EditableProduct(product_id="p1", name="Flour", quantity=200),)

    def test_copies_scalar_fields(self) -> None:
        state = to_editable_state(create_test_recipe())

        assert state.title == "Bread"
        assert state.description == "Plain loaf"
        assert state.course is Course.LUNCH
        assert state.steps == ("a", "b")
        assert state.preparation_time == 20
        assert state.cooking_time == 45
        assert state.photo is None

    def test_empty_steps_become_single_blank_step(self) -> None:
        recipe = create_test_recipe()
        recipe.steps = []

        assert to_editable_state(recipe).steps == ("",)

    def test_negative_and_nan_numbers_become_zero(self) -> None:
        recipe = create_test_recipe()
        recipe.products = [
            RecipeProduct(product=Product(id="p1", name="Flour"), quantity=-5),
            RecipeProduct(product=Product(id="p2", name="Salt"), quantity=float("nan")),
            RecipeProduct(product=Product(id="p3", name="Milk"), quantity=12.5),
        ]
        recipe.preparation_time = -3
        recipe.cooking_time = float("nan")

        state = to_editable_state(recipe)

        assert [p.quantity for p in state.products] == [0, 0, 12.5]
        assert state.preparation_time == 0
        assert state.cooking_time == 0

    def test_does_not_share_lists_with_recipe(self) -> None:
        recipe = create_test_recipe()
        state = to_editable_state(recipe)

        recipe.steps.append("c")

        assert state.steps == ("a", "b")


class TestBuildPayload:
    def test_round_trip_without_edits(self) -> None:
        payload = build_payload(to_editable_state(create_test_recipe()))

        assert payload.steps == ["a", "b"]
        assert payload.products == [{"product": "p1", "quantity": 200}]

    def test_drops_product_names(self) -> None:
        state = EditableState(
            products=(
                EditableProduct("p1", "Flour", 200),
                EditableProduct("p2", "Sugar", 12.5),
            ),
        )

        payload = build_payload(state)

        assert payload.products == [
            {"product": "p1", "quantity": 200},
            {"product": "p2", "quantity": 12.5},
        ]
        assert all("name" not in item for item in payload.products)

    def test_form_fields(self) -> None:
        payload = build_payload(to_editable_state(create_test_recipe()))

        fields = payload.form_fields()

        assert fields == {
            "title": "Bread",
            "description": "Plain loaf",
            "course": "lunch",
            "steps": '["a","b"]',
            "products": '[{"product":"p1","quantity":200}]',
            "preparationTime": "20",
            "cookingTime": "45",
        }

    def test_steps_json_keeps_unicode(self) -> None:
        payload = build_payload(EditableState(steps=("Misture o açúcar",)))

        assert json.loads(payload.form_fields()["steps"]) == ["Misture o açúcar"]

    def test_no_photo_means_no_file_part(self) -> None:
        payload = build_payload(EditableState())

        assert payload.files() == {}
        assert [name for name, _ in payload.multipart_parts()] == [
            "title",
            "description",
            "course",
            "steps",
            "products",
            "preparationTime",
            "cookingTime",
        ]

    def test_photo_is_sent_as_file_part(self) -> None:
        photo = PhotoAttachment("cake.jpg", b"jpeg-bytes", "image/jpeg")

        payload = build_payload(EditableState(photo=photo))

        assert payload.files() == {"photo": ("cake.jpg", b"jpeg-bytes", "image/jpeg")}
        assert payload.multipart_parts()[-1] == ("photo", ("cake.jpg", b"jpeg-bytes", "image/jpeg"))

    def test_text_parts_have_no_filename(self) -> None:
        payload = build_payload(EditableState(title="Soup"))

        parts = dict(payload.multipart_parts())

        assert parts["title"] == (None, "Soup", None)
