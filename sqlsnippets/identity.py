"""Deterministic identifiers derived from names."""

import hashlib
import uuid


def derive_id(value: str) -> str:
    """Map a string to a stable UUID-v4-shaped identifier.

    The first 16 bytes of the SHA-256 digest become the UUID payload, with the
    version nibble and variant bits forced to the v4 layout.

    "existing-snippet.sql" → "bfe4c780-f078-4b85-aa31-d46b66d960a4"
    """
    digest = hashlib.sha256(value.encode("utf-8")).digest()
    return str(uuid.UUID(bytes=digest[:16], version=4))
