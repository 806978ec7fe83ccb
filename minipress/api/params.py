"""Path parameter parsing shared by the API routers."""

import uuid

from minipress.exceptions import InvalidInputError


def parse_id(value: str, entity: str) -> uuid.UUID:
    """Parse a UUID path segment (dashed or 32-char hex form)."""
    try:
        return uuid.UUID(value)
    except ValueError as e:
        raise InvalidInputError(f"Invalid {entity} ID") from e
