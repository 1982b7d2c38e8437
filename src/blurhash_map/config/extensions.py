"""Image extension validation against the fixed allow-list."""

from __future__ import annotations

from collections.abc import Iterable

from blurhash_map.constants.extensions import ALLOWED_IMAGE_TYPES, EXTENSION_LIST_SEPARATOR
from blurhash_map.exceptions import InvalidConfiguration

ERR_LIST_CANNOT_BE_EMPTY: str = "extension list cannot be empty"


def normalize_extension(extension: str) -> str:
    """Lowercase an extension and strip surrounding whitespace and a leading dot."""
    return extension.strip().lower().lstrip(".")


def validate_image_extensions(
    extensions: Iterable[str],
    allowed: tuple[str, ...] = ALLOWED_IMAGE_TYPES,
) -> tuple[str, ...]:
    """Validate configured extensions and return them normalized and de-duplicated.

    Raises :class:`InvalidConfiguration` naming every extension outside
    ``allowed``, or when the list is empty.
    """
    normalized: list[str] = []
    for extension in extensions:
        value = normalize_extension(extension)
        if value not in normalized:
            normalized.append(value)

    offending = [value for value in normalized if value not in allowed]
    if offending:
        raise InvalidConfiguration(
            f"only {', '.join(allowed)} are allowed. Remove these extensions: {', '.join(offending)}",
            tuple(f"unsupported image extension: {value!r}" for value in offending),
        )
    if not normalized:
        raise InvalidConfiguration(ERR_LIST_CANNOT_BE_EMPTY)
    return tuple(normalized)


def parse_extension_list(raw: str) -> tuple[str, ...]:
    """Parse a comma separated extension string such as ``"jpg,png"``."""
    tokens = [token for token in raw.split(EXTENSION_LIST_SEPARATOR) if token.strip()]
    return validate_image_extensions(tokens)
