"""HTTP API package for PDB entry lookups."""

from pdb_explorer.server.app import ExplorerServer, main
from pdb_explorer.server.models import (
    EntitySummary,
    ErrorResponse,
    HealthResponse,
    LookupResponse,
)

__all__ = [
    # Server
    "ExplorerServer",
    "main",
    # Models
    "EntitySummary",
    "ErrorResponse",
    "HealthResponse",
    "LookupResponse",
]
