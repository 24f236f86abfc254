"""Pydantic models for HTTP API responses."""

from typing import Any

from pydantic import BaseModel

from pdb_explorer.core.models import Entry, FastaSource


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str


class ErrorResponse(BaseModel):
    """Error body returned for failed lookups."""

    error: str
    message: str
    pdb_id: str | None = None


class EntitySummary(BaseModel):
    """A polymer entity together with its sequence summary."""

    entity_id: str
    description: str | None = None
    organism: str | None = None
    chains: list[str]
    sequence: str | None = None
    length: int
    molecular_weight_kda: float | None = None
    composition: dict[str, Any] = {}


class LookupResponse(BaseModel):
    """Response for a successful entry lookup."""

    pdb_id: str
    entry: Entry
    entities: list[EntitySummary]
    fasta: str
    fasta_source: FastaSource
