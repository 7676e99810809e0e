from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from literarycorner.app.models import Book


class SortKey(str, Enum):
    TITLE = "title"
    AUTHOR = "author"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "SortKey":
        value = (raw or "").strip().lower()
        value = _SORT_ALIASES.get(value, value)
        try:
            return cls(value)
        except ValueError:
            return cls.TITLE

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]


_SORT_ALIASES = {
    "price-low": "price-asc",
    "price_asc": "price-asc",
    "price-high": "price-desc",
    "price_desc": "price-desc",
}

_SORT_LABELS = {
    SortKey.TITLE: "Title (A-Z)",
    SortKey.AUTHOR: "Author (A-Z)",
    SortKey.PRICE_ASC: "Price (Low to High)",
    SortKey.PRICE_DESC: "Price (High to Low)",
}


@dataclass(frozen=True)
class Criteria:
    query: str = ""
    tag: Optional[str] = None
    sort: SortKey = SortKey.TITLE

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> "Criteria":
        """Build criteria from request query args (`search` or `q`, `tag`, `sort`)."""
        query = args.get("search") or args.get("q") or ""
        tag = args.get("tag") or None
        return cls(query=query.strip(), tag=tag, sort=SortKey.parse(args.get("sort")))

    @property
    def is_filtered(self) -> bool:
        return bool(self.query.strip() or self.tag)

    def with_tag(self, tag: Optional[str]) -> "Criteria":
        return Criteria(query=self.query, tag=tag, sort=self.sort)

    def toggle_tag(self, tag: str) -> "Criteria":
        return self.with_tag(None if self.tag == tag else tag)

    def to_args(self) -> dict:
        """Inverse of from_args; defaults are left out of the query string."""
        args = {}
        if self.query:
            args["search"] = self.query
        if self.tag:
            args["tag"] = self.tag
        if self.sort is not SortKey.TITLE:
            args["sort"] = self.sort.value
        return args

    def to_dict(self) -> dict:
        return {"search": self.query, "tag": self.tag, "sort": self.sort.value}


def collation_key(value: str) -> Tuple[str, str]:
    # Accent- and case-insensitive first, exact text as the tie-breaker.
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return (base.casefold(), value)


def filter_by_query(books: Iterable[Book], query: str) -> List[Book]:
    needle = (query or "").strip().casefold()
    if not needle:
        return list(books)
    return [
        b
        for b in books
        if needle in b.title.casefold()
        or needle in b.author.casefold()
        or needle in b.short_description.casefold()
    ]


def filter_by_tag(books: Iterable[Book], tag: Optional[str]) -> List[Book]:
    if not tag:
        return list(books)
    return [b for b in books if tag in b.tags]


def sort_books(books: Iterable[Book], sort: SortKey) -> List[Book]:
    # sorted() is stable, so equal keys keep their loaded order.
    if sort is SortKey.AUTHOR:
        return sorted(books, key=lambda b: collation_key(b.author))
    if sort is SortKey.PRICE_ASC:
        return sorted(books, key=lambda b: b.price)
    if sort is SortKey.PRICE_DESC:
        return sorted(books, key=lambda b: b.price, reverse=True)
    return sorted(books, key=lambda b: collation_key(b.title))


def visible_books(all_books: Sequence[Book], criteria: Criteria) -> List[Book]:
    result = filter_by_query(all_books, criteria.query)
    result = filter_by_tag(result, criteria.tag)
    return sort_books(result, criteria.sort)


def distinct_tags(books: Iterable[Book]) -> List[str]:
    return sorted({tag for b in books for tag in b.tags})


def featured_books(books: Iterable[Book], limit: int = 3) -> List[Book]:
    return [b for b in books if b.featured][: max(0, limit)]
