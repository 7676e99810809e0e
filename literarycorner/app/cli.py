from __future__ import annotations

from typing import Any, List

import click
from flask import Blueprint, current_app

from literarycorner.app.data import read_json_array

cli_bp = Blueprint("cli", __name__, cli_group=None)

BOOK_FIELDS = ["id", "title", "author", "shortDescription", "price", "cover", "tags"]
POST_FIELDS = ["id", "title", "author", "date", "excerpt", "content", "image", "tags"]


def check_books(data: List[Any]) -> List[str]:
    problems: List[str] = []
    seen = set()
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            problems.append(f"book #{idx}: not an object")
            continue
        label = f"book {item.get('id', '#' + str(idx))}"
        for name in BOOK_FIELDS:
            if name not in item:
                problems.append(f"{label}: missing field '{name}'")
        key = str(item.get("id"))
        if key in seen:
            problems.append(f"{label}: duplicate id")
        seen.add(key)
        price = item.get("price")
        if not isinstance(price, (int, float)) or isinstance(price, bool) or price < 0:
            problems.append(f"{label}: price must be a non-negative number")
        if "tags" in item and not isinstance(item["tags"], list):
            problems.append(f"{label}: tags must be a list")
        for review in item.get("reviews") or []:
            rating = review.get("rating") if isinstance(review, dict) else None
            if not isinstance(rating, int) or not 1 <= rating <= 5:
                problems.append(f"{label}: review rating must be an integer 1-5")
    return problems


def check_posts(data: List[Any]) -> List[str]:
    problems: List[str] = []
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            problems.append(f"post #{idx}: not an object")
            continue
        label = f"post {item.get('id', '#' + str(idx))}"
        for name in POST_FIELDS:
            if name not in item:
                problems.append(f"{label}: missing field '{name}'")
    return problems


@cli_bp.cli.command("check-data")
def check_data() -> None:
    """Validate the static book and blog JSON files.

    Exits with status 1 when any problem is found.
    """
    problems: List[str] = []
    for path, check, kind in (
        (current_app.config["BOOKS_DATA_PATH"], check_books, "books"),
        (current_app.config["BLOG_DATA_PATH"], check_posts, "blog posts"),
    ):
        try:
            data = read_json_array(path)
        except (OSError, ValueError) as e:
            problems.append(f"{path}: {e}")
            continue
        click.echo(f"{path}: {len(data)} {kind}")
        problems.extend(check(data))

    for p in problems:
        click.echo(f"  - {p}", err=True)
    if problems:
        raise SystemExit(1)
    click.echo("Data OK.")
