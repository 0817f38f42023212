from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

ENV_PREFIX: Final[str] = "LL_"

# Symbolic status key -> display text shown to readers
BOOK_STATUS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "PLANNED": "Steht an",
        "READING": "Lesend",
        "READ": "Gelesen",
    }
)
