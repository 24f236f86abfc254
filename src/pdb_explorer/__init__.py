"""Look up RCSB PDB entries with their polymer entities and FASTA listings."""

from pdb_explorer.core import (
    Entry,
    EntryNotFound,
    FastaSource,
    InvalidIdentifierFormat,
    NetworkUnreachable,
    PDBClient,
    PDBLookupError,
    PolymerEntity,
    RemoteServiceError,
    RetrievalResult,
)

__version__ = "1.0.0"

__all__ = [
    "PDBClient",
    "Entry",
    "PolymerEntity",
    "RetrievalResult",
    "FastaSource",
    "PDBLookupError",
    "InvalidIdentifierFormat",
    "EntryNotFound",
    "RemoteServiceError",
    "NetworkUnreachable",
]
