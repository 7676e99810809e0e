from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from literarycorner.modules.blog.content import Block


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _tags(value: Any) -> Tuple[str, ...]:
    # Missing or malformed tag lists are treated as empty.
    if not isinstance(value, list):
        return ()
    return tuple(str(t) for t in value if isinstance(t, str) and t)


def _price(value: Any) -> Decimal:
    try:
        price = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")
    if not price.is_finite() or price < 0:
        return Decimal("0")
    return price.quantize(Decimal("0.01"))


def _optional_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _parse_date(raw: str) -> Optional[date]:
    try:
        return datetime.fromisoformat(raw[:10]).date()
    except ValueError:
        return None


def format_date(raw: str) -> str:
    """Long US form ("January 5, 2024"); the raw string when unparseable."""
    parsed = _parse_date(raw)
    if parsed is None:
        return raw
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"


@dataclass(frozen=True)
class Review:
    reviewer: str
    rating: int  # 1..5
    comment: str = ""
    date: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Review":
        rating = _optional_int(data.get("rating")) or 1
        return cls(
            reviewer=_text(data.get("reviewer")) or "Anonymous",
            rating=max(1, min(rating, 5)),
            comment=_text(data.get("comment")),
            date=_text(data.get("date")),
        )

    @property
    def formatted_date(self) -> str:
        return format_date(self.date)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reviewer": self.reviewer,
            "rating": self.rating,
            "comment": self.comment,
            "date": self.date,
        }


@dataclass(frozen=True)
class Book:
    id: str
    title: str
    author: str
    short_description: str = ""
    description: str = ""
    price: Decimal = Decimal("0")
    cover: str = ""
    tags: Tuple[str, ...] = ()
    reviews: Tuple[Review, ...] = ()
    featured: bool = False

    # Detail-page extras
    isbn: str = ""
    publisher: str = ""
    pages: Optional[int] = None
    year: Optional[int] = None
    language: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Book":
        raw_reviews = data.get("reviews")
        reviews = tuple(
            Review.from_dict(r) for r in (raw_reviews if isinstance(raw_reviews, list) else []) if isinstance(r, dict)
        )
        short = data.get("shortDescription", data.get("short_description"))
        return cls(
            id=_text(data.get("id")),
            title=_text(data.get("title")),
            author=_text(data.get("author")),
            short_description=_text(short),
            description=_text(data.get("description")) or _text(short),
            price=_price(data.get("price")),
            cover=_text(data.get("cover")),
            tags=_tags(data.get("tags")),
            reviews=reviews,
            featured=data.get("featured") is True,
            isbn=_text(data.get("isbn")),
            publisher=_text(data.get("publisher")),
            pages=_optional_int(data.get("pages")),
            year=_optional_int(data.get("year")),
            language=_text(data.get("language")),
        )

    @property
    def review_count(self) -> int:
        return len(self.reviews)

    @property
    def average_rating(self) -> float:
        if not self.reviews:
            return 0.0
        return sum(r.rating for r in self.reviews) / len(self.reviews)

    @property
    def rounded_rating(self) -> int:
        # Half-up, like the star widget on the detail page.
        return int(self.average_rating + 0.5)

    @property
    def meta_description(self) -> str:
        return self.description[:160]

    def to_dict(self, with_reviews: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "short_description": self.short_description,
            "price": float(self.price),
            "cover": self.cover,
            "tags": list(self.tags),
            "featured": self.featured,
        }
        if with_reviews:
            payload.update(
                {
                    "description": self.description,
                    "isbn": self.isbn or None,
                    "publisher": self.publisher or None,
                    "pages": self.pages,
                    "year": self.year,
                    "language": self.language or None,
                    "reviews_summary": {
                        "avg_rating": round(self.average_rating, 2),
                        "count": self.review_count,
                    },
                    "reviews": [r.to_dict() for r in self.reviews],
                }
            )
        return payload


@dataclass(frozen=True)
class BlogPost:
    id: str
    title: str
    author: str = ""
    date: str = ""
    excerpt: str = ""
    content: str = ""
    image: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BlogPost":
        return cls(
            id=_text(data.get("id")),
            title=_text(data.get("title")),
            author=_text(data.get("author")),
            date=_text(data.get("date")),
            excerpt=_text(data.get("excerpt")),
            content=str(data.get("content") or ""),
            image=_text(data.get("image")),
            tags=_tags(data.get("tags")),
        )

    @property
    def formatted_date(self) -> str:
        return format_date(self.date)

    @property
    def blocks(self) -> List["Block"]:
        from literarycorner.modules.blog.content import parse_blocks

        return parse_blocks(self.content)

    def to_dict(self, with_content: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "date": self.date,
            "excerpt": self.excerpt,
            "image": self.image,
            "tags": list(self.tags),
        }
        if with_content:
            payload["content"] = self.content
            payload["blocks"] = [b.to_dict() for b in self.blocks]
        return payload
