from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .constants import BOOK_STATUS

# ─────────────────────────────────────────────────────────────────────────────
# Status Values
# ─────────────────────────────────────────────────────────────────────────────

# Must list the values of constants.BOOK_STATUS
BookStatusLabel = Literal["Steht an", "Lesend", "Gelesen"]


class InvalidBookStatusError(ValueError):
    def __init__(self, value: object) -> None:
        self.value = value
        expected = ", ".join(repr(label) for label in BOOK_STATUS.values())
        super().__init__(f"Unknown book status {value!r}; expected one of {expected}")


class StatusFormat(str, Enum):
    SYMBOL = "symbol"
    LABEL = "label"


class StatusPolicy(str, Enum):
    STRICT = "strict"
    LENIENT = "lenient"


class BookStatus(str, Enum):
    PLANNED = "PLANNED"
    READING = "READING"
    READ = "READ"

    @property
    def label(self) -> str:
        return BOOK_STATUS[self.value]

    def render(self, fmt: StatusFormat = StatusFormat.LABEL) -> str:
        return self.label if fmt is StatusFormat.LABEL else self.value

    @classmethod
    def parse(cls, value: object) -> BookStatus:
        """
        Resolve a status from a member or its display text.

        Symbols such as "READ" are not status text; look them up with
        BookStatus["READ"]. Matching is exact: no case folding and no
        whitespace trimming.

        Raises:
            InvalidBookStatusError: if value is not one of the display texts.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.label == value:
                    return member
        raise InvalidBookStatusError(value)


def is_valid_status(value: object) -> bool:
    try:
        BookStatus.parse(value)
    except InvalidBookStatusError:
        return False
    return True


# ─────────────────────────────────────────────────────────────────────────────
# Book Models
# ─────────────────────────────────────────────────────────────────────────────


class BookBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    # Booleans and numeric strings are not numbers here
    id: int = Field(frozen=True, strict=True)
    title: str
    author: str
    release_year: int = Field(strict=True)
    rating: float = Field(strict=True)

    def same_record(self, other: BookBase) -> bool:
        """Two values describe the same record when their ids match."""
        return self.id == other.id


class Book(BookBase):
    """A book whose status is one of the known reading states."""

    status: BookStatus

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title={self.title!r}, status={self.status.value})"

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: Any) -> BookStatus:
        return BookStatus.parse(value)

    @property
    def status_label(self) -> str:
        return self.status.label


class BookRecord(BookBase):
    """A book whose status is free text, with optional ISBN and cover URL."""

    status: str
    isbn: str | None = None
    cover_url: str | None = None

    def __repr__(self) -> str:
        return f"BookRecord(id={self.id}, title={self.title!r}, status={self.status!r})"

    @property
    def known_status(self) -> BookStatus | None:
        try:
            return BookStatus.parse(self.status)
        except InvalidBookStatusError:
            return None

    def to_book(self) -> Book:
        """
        Narrow to a Book.

        ISBN and cover URL have no place in the narrower shape and are dropped.

        Raises:
            InvalidBookStatusError: if the status text is not a known status.
        """
        return Book(
            id=self.id,
            title=self.title,
            author=self.author,
            release_year=self.release_year,
            rating=self.rating,
            status=BookStatus.parse(self.status),
        )

    @classmethod
    def from_book(
        cls,
        book: Book,
        *,
        isbn: str | None = None,
        cover_url: str | None = None,
        status_format: StatusFormat = StatusFormat.LABEL,
    ) -> BookRecord:
        return cls(
            id=book.id,
            title=book.title,
            author=book.author,
            release_year=book.release_year,
            rating=book.rating,
            status=book.status.render(status_format),
            isbn=isbn,
            cover_url=cover_url,
        )
