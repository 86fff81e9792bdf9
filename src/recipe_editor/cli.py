from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from dotenv import find_dotenv, load_dotenv

from recipe_editor.config import Settings
from recipe_editor.domain.models import Course, PhotoAttachment
from recipe_editor.infra.store.base import RecipeStore
from recipe_editor.infra.store.http_store import HttpRecipeStore
from recipe_editor.services.edit_session import RecipeEditSession
from recipe_editor.services.payload import build_payload

logger = logging.getLogger("recipe-edit")


def _indexed(value: str) -> tuple[int, str]:
    index, sep, rest = value.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected INDEX=VALUE, got {value!r}")
    try:
        return int(index), rest
    except ValueError:
        raise argparse.ArgumentTypeError(f"index must be an integer: {index!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="recipe-edit", description="Edit a stored recipe")
    parser.add_argument("record_id")
    parser.add_argument("--title")
    parser.add_argument("--description")
    parser.add_argument("--course", choices=[course.value for course in Course])
    parser.add_argument("--step", type=_indexed, action="append", default=[], metavar="INDEX=TEXT")
    parser.add_argument("--add-step", action="append", default=[], metavar="TEXT")
    parser.add_argument("--remove-last-step", action="store_true")
    parser.add_argument(
        "--add-product",
        action="append",
        default=[],
        metavar="QUERY",
        help="Search the catalog and add the best match",
    )
    parser.add_argument("--quantity", type=_indexed, action="append", default=[], metavar="INDEX=VALUE")
    parser.add_argument("--remove-product", type=int, action="append", default=[], metavar="INDEX")
    parser.add_argument("--preparation-time")
    parser.add_argument("--cooking-time")
    parser.add_argument("--photo", metavar="PATH")
    parser.add_argument("--dry-run", action="store_true", help="Print the payload instead of submitting")
    return parser


async def apply_edits(session: RecipeEditSession, store: RecipeStore, args: argparse.Namespace) -> None:
    if args.title is not None:
        session.fields.set_title(args.title)
    if args.description is not None:
        session.fields.set_description(args.description)
    if args.course is not None:
        session.fields.set_course(args.course)

    for index, text in args.step:
        session.steps.update(index, text)
    for text in args.add_step:
        session.steps.append()
        session.steps.update(len(session.steps) - 1, text)
    if args.remove_last_step:
        session.steps.remove_last()

    for query in args.add_product:
        matches = await store.search_products(query)
        if not matches:
            logger.warning("No product matches %r", query)
            continue
        session.on_add_product(matches[0])
    for index, value in args.quantity:
        session.products.update_quantity(index, value)
    # highest index first so earlier removals don't shift later ones
    for index in sorted(set(args.remove_product), reverse=True):
        session.products.remove_at(index)

    if args.preparation_time is not None:
        session.fields.set_preparation_time(args.preparation_time)
    if args.cooking_time is not None:
        session.fields.set_cooking_time(args.cooking_time)
    if args.photo:
        session.photo.set(PhotoAttachment.from_path(args.photo))


async def run(args: argparse.Namespace, settings: Settings) -> int:
    async with HttpRecipeStore(settings=settings) as store:
        async with RecipeEditSession(args.record_id, store, settings=settings) as session:
            if session.hydration_error is not None:
                print(f"error: {session.hydration_error}", file=sys.stderr)
                return 1

            await apply_edits(session, store, args)

            if args.dry_run:
                payload = build_payload(session.snapshot())
                for name, value in payload.form_fields().items():
                    print(f"{name}: {value}")
                if payload.photo is not None:
                    print(f"photo: {payload.photo.filename}")
                return 0

            if not await session.submit():
                print(f"error: {session.notifier.last_error}", file=sys.stderr)
                return 1

            print(session.notifier.message)
            session.dismiss()
            return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(dotenv_path=env_path)
    settings = Settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    return asyncio.run(run(args, settings))


if __name__ == "__main__":
    sys.exit(main())
