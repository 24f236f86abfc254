"""PDB identifier normalization and shape checking."""

import re

from pdb_explorer.core.errors import InvalidIdentifierFormat

PDB_ID_PATTERN = re.compile(r"[A-Z0-9]{4}")


def normalize_pdb_id(raw: str | None) -> str:
    """Trim whitespace and uppercase a raw identifier."""
    return (raw or "").strip().upper()


def is_valid_pdb_id(raw: str | None) -> bool:
    return PDB_ID_PATTERN.fullmatch(normalize_pdb_id(raw)) is not None


def validate_pdb_id(raw: str | None) -> str:
    """Normalize a raw identifier and check its shape.

    Args:
        raw: User input, e.g. ``" 4hhb "``.

    Returns:
        str: The normalized identifier, e.g. ``"4HHB"``.

    Raises:
        InvalidIdentifierFormat: If the normalized value is not exactly
            4 characters from ``[A-Z0-9]``.
    """
    normalized = normalize_pdb_id(raw)
    if PDB_ID_PATTERN.fullmatch(normalized) is None:
        raise InvalidIdentifierFormat(normalized)
    return normalized
