"""Core PDB lookup functionality."""

from pdb_explorer.core.analysis import SequenceAnalyzer
from pdb_explorer.core.errors import (
    EntryNotFound,
    InvalidIdentifierFormat,
    NetworkUnreachable,
    PDBLookupError,
    RemoteServiceError,
)
from pdb_explorer.core.models import Entry, FastaSource, PolymerEntity, RetrievalResult
from pdb_explorer.core.pdb import PDBClient

__all__ = [
    "PDBClient",
    "SequenceAnalyzer",
    # Models
    "Entry",
    "PolymerEntity",
    "RetrievalResult",
    "FastaSource",
    # Errors
    "PDBLookupError",
    "InvalidIdentifierFormat",
    "EntryNotFound",
    "RemoteServiceError",
    "NetworkUnreachable",
]
