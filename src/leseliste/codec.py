from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import orjson
from pydantic import ValidationError

from .config import get_settings
from .logging_config import get_logger
from .models import Book, BookBase, BookRecord, StatusFormat, StatusPolicy

logger = get_logger(__name__)


class BookDecodeError(ValueError):
    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


def _model_for(policy: StatusPolicy) -> type[Book] | type[BookRecord]:
    return Book if policy is StatusPolicy.STRICT else BookRecord


def _known_keys(model: type[BookBase]) -> set[str]:
    keys = set(model.model_fields)
    keys.update(field.alias for field in model.model_fields.values() if field.alias)
    return keys


def validate_book(
    data: Mapping[str, Any], policy: StatusPolicy | None = None
) -> Book | BookRecord:
    """
    Check a mapping against the book schema selected by policy.

    Strict validation returns a Book and rejects unknown status text;
    lenient validation returns a BookRecord with the status kept verbatim.

    Raises:
        BookDecodeError: if data does not conform.
    """
    policy = policy or get_settings().STATUS_POLICY
    model = _model_for(policy)

    ignored = sorted(set(data) - _known_keys(model))
    if ignored:
        logger.debug("Ignoring fields outside the book schema", fields=ignored)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False)
        logger.warning(
            "Rejected book payload",
            policy=policy.value,
            book_id=data.get("id"),
            error_count=len(errors),
        )
        raise BookDecodeError(
            f"Book does not conform to the {policy.value} schema", errors
        ) from e


def _loads(raw: bytes | str) -> Any:
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError as e:
        raise BookDecodeError(f"Invalid JSON: {e}") from e


def decode_book(
    raw: bytes | str, policy: StatusPolicy | None = None
) -> Book | BookRecord:
    data = _loads(raw)
    if not isinstance(data, dict):
        raise BookDecodeError(f"Expected a JSON object, got {type(data).__name__}")
    return validate_book(data, policy)


def decode_books(
    raw: bytes | str, policy: StatusPolicy | None = None
) -> list[Book | BookRecord]:
    data = _loads(raw)
    if not isinstance(data, list):
        raise BookDecodeError(f"Expected a JSON array, got {type(data).__name__}")

    books = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise BookDecodeError(
                f"Expected a JSON object at index {index}, got {type(item).__name__}"
            )
        try:
            books.append(validate_book(item, policy))
        except BookDecodeError as e:
            raise BookDecodeError(f"Book at index {index}: {e}", e.errors) from e
    return books


def _to_dict(book: BookBase, status_format: StatusFormat) -> dict[str, Any]:
    # Absent optionals are omitted; empty strings survive
    data = book.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(book, Book):
        data["status"] = book.status.render(status_format)
    return data


def encode_book(
    book: BookBase, status_format: StatusFormat | None = None
) -> bytes:
    status_format = status_format or get_settings().STATUS_FORMAT
    return orjson.dumps(_to_dict(book, status_format))


def encode_books(
    books: Iterable[BookBase], status_format: StatusFormat | None = None
) -> bytes:
    status_format = status_format or get_settings().STATUS_FORMAT
    return orjson.dumps([_to_dict(book, status_format) for book in books])
