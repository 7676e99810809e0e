from __future__ import annotations

from flask import Blueprint, current_app, request

from literarycorner.app.common.errors import abort_json
from literarycorner.app.data import find_by_id, load_books
from literarycorner.modules.catalog.engine import Criteria, distinct_tags, visible_books

bp = Blueprint("catalog", __name__)


@bp.get("/books")
def list_books():
    """GET /api/books - Books matching the catalog criteria.

    Query params:
      - search (or q): substring of title, author or short description
      - tag: exact tag
      - sort: title | author | price-asc | price-desc
    """
    books = load_books(current_app.config["BOOKS_DATA_PATH"])
    criteria = Criteria.from_args(request.args)
    items = visible_books(books, criteria)

    return {
        "items": [b.to_dict() for b in items],
        "tags": distinct_tags(books),
        "criteria": criteria.to_dict(),
        "count": len(items),
        "total": len(books),
    }, 200


@bp.get("/books/<book_id>")
def get_book(book_id: str):
    """GET /api/books/<id> - Book details with reviews."""
    book = find_by_id(load_books(current_app.config["BOOKS_DATA_PATH"]), book_id)
    if not book:
        abort_json(404, "not_found", "Book not found")
    return book.to_dict(with_reviews=True), 200


@bp.get("/tags")
def list_tags():
    books = load_books(current_app.config["BOOKS_DATA_PATH"])
    return {"tags": distinct_tags(books)}, 200
