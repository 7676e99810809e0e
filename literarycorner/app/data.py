"""Static JSON data source for books and blog posts.

Every call reads the file again; pages load their own copy per request and
nothing is cached between requests. A missing or broken file is logged and
treated as an empty collection.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, TypeVar, Union

from literarycorner.app.models import BlogPost, Book

logger = logging.getLogger(__name__)

T = TypeVar("T", Book, BlogPost)

PathLike = Union[str, Path]


def read_json_array(path: PathLike) -> List[Any]:
    """Return the top-level JSON array in `path`.

    Raises OSError / ValueError; callers decide how to degrade.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    return data


def _load(path: PathLike, factory: Callable[[dict], T], kind: str) -> List[T]:
    try:
        raw = read_json_array(path)
    except (OSError, ValueError):
        logger.exception("Error loading %s from %s", kind, path)
        return []

    records: List[T] = []
    for idx, item in enumerate(raw):
        if not isinstance(item, dict):
            logger.warning("Skipping %s #%d in %s: not an object", kind, idx, path)
            continue
        record = factory(item)
        if not record.id:
            logger.warning("Skipping %s #%d in %s: missing id", kind, idx, path)
            continue
        records.append(record)
    return records


def load_books(path: PathLike) -> List[Book]:
    return _load(path, Book.from_dict, "books")


def load_blog_posts(path: PathLike) -> List[BlogPost]:
    return _load(path, BlogPost.from_dict, "blog posts")


def find_by_id(records: Sequence[T], record_id: str) -> Optional[T]:
    return next((r for r in records if r.id == record_id), None)
