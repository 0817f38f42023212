from .codec import (
    BookDecodeError,
    decode_book,
    decode_books,
    encode_book,
    encode_books,
    validate_book,
)
from .constants import BOOK_STATUS
from .models import (
    Book,
    BookBase,
    BookRecord,
    BookStatus,
    BookStatusLabel,
    InvalidBookStatusError,
    StatusFormat,
    StatusPolicy,
    is_valid_status,
)

__all__ = [
    "BOOK_STATUS",
    "Book",
    "BookBase",
    "BookDecodeError",
    "BookRecord",
    "BookStatus",
    "BookStatusLabel",
    "InvalidBookStatusError",
    "StatusFormat",
    "StatusPolicy",
    "decode_book",
    "decode_books",
    "encode_book",
    "encode_books",
    "is_valid_status",
    "validate_book",
]
