import json
import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from literarycorner.app.config import Config
from literarycorner.app.factory import create_app
from literarycorner.app.models import Book

BOOKS = [
    {
        "id": "b1",
        "title": "Pride and Prejudice",
        "author": "Jane Austen",
        "shortDescription": "A witty romance in Regency England.",
        "description": "Elizabeth Bennet and Mr. Darcy.",
        "price": 12.99,
        "cover": "https://example.com/pp.jpg",
        "tags": ["Classic", "Romance"],
        "featured": True,
        "reviews": [
            {"reviewer": "Emma", "rating": 5, "comment": "Lovely", "date": "2024-02-14"},
            {"reviewer": "Tom", "rating": 4, "comment": "Good", "date": "2024-05-03"},
        ],
    },
    {
        "id": "b2",
        "title": "Dune",
        "author": "Frank Herbert",
        "shortDescription": "Spice and prophecy on a desert planet.",
        "price": 18.0,
        "cover": "https://example.com/dune.jpg",
        "tags": ["Science Fiction", "Fiction"],
        "featured": True,
    },
    {
        "id": "b3",
        "title": "Emma",
        "author": "Jane Austen",
        "shortDescription": "A matchmaker meddles in Highbury.",
        "price": 9.5,
        "cover": "https://example.com/emma.jpg",
        "tags": ["Classic"],
    },
    {
        "id": "b4",
        "title": "Frankenstein",
        "author": "Mary Shelley",
        "shortDescription": "A scientist's creation turns on him.",
        "price": 8.99,
        "cover": "https://example.com/frank.jpg",
        "tags": ["Classic", "Science Fiction"],
    },
]

POSTS = [
    {
        "id": "p1",
        "title": "Why Classics Matter",
        "author": "Eleanor Grant",
        "date": "2024-03-15",
        "excerpt": "Old books, new readers.",
        "content": "Opening paragraph.\n\n**Where to Start:**\n\nPick something short.",
        "image": "https://example.com/p1.jpg",
        "tags": ["Classics"],
    },
]


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


@pytest.fixture()
def make_app(tmp_path):
    """Build an app whose data files live in tmp_path."""

    def _make(books=BOOKS, posts=POSTS, **overrides):
        books_path = tmp_path / "books.json"
        posts_path = tmp_path / "blog-posts.json"
        if books is not None:
            write_json(books_path, books)
        if posts is not None:
            write_json(posts_path, posts)

        attrs = {
            "TESTING": True,
            "SECRET_KEY": "test-secret",
            "BOOKS_DATA_PATH": str(books_path),
            "BLOG_DATA_PATH": str(posts_path),
        }
        attrs.update(overrides)
        TestConfig = type("TestConfig", (Config,), attrs)
        return create_app(TestConfig)

    return _make


@pytest.fixture()
def app(make_app):
    return make_app()


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def books():
    return [Book.from_dict(b) for b in BOOKS]
