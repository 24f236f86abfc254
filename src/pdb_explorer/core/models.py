"""Pydantic models for PDB entries, polymer entities and lookup results."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

ENTITY_ID_SEPARATORS = (".", "_")


def _split_entity_id(entity_id: str) -> tuple[str, str] | None:
    """Split a composite entity id such as ``4HHB.1`` or ``4HHB_1``."""
    for separator in ENTITY_ID_SEPARATORS:
        parts = entity_id.split(separator)
        if len(parts) > 1 and parts[1]:
            return parts[0], parts[1]
    return None


class FastaSource(str, Enum):
    """Where a sequence listing came from."""

    REMOTE = "remote"
    SYNTHESIZED = "synthesized"


class Entry(BaseModel):
    """Top-level PDB entry metadata."""

    model_config = ConfigDict(frozen=True)

    pdb_id: str
    title: str | None = None
    methods: list[str] = []
    resolutions: list[float] = []
    polymer_entity_count: int = 0
    deposited_model_count: int | None = None
    polymer_entity_ids: list[str] = []

    @property
    def primary_method(self) -> str | None:
        return self.methods[0] if self.methods else None

    @property
    def primary_resolution(self) -> float | None:
        return self.resolutions[0] if self.resolutions else None

    @classmethod
    def from_rcsb(cls, data: dict[str, Any], pdb_id: str) -> "Entry":
        """Build an Entry from an RCSB ``/entry/{id}`` payload.

        Args:
            data: Decoded JSON payload.
            pdb_id: Normalized identifier that was requested, used when the
                payload carries no ``rcsb_id``.

        Returns:
            Entry: Parsed entry. Missing sections default to empty values.
        """
        entry_info = data.get("rcsb_entry_info") or {}
        containers = data.get("rcsb_entry_container_identifiers") or {}
        entity_ids = [str(eid) for eid in containers.get("polymer_entity_ids") or []]

        return cls(
            pdb_id=str(data.get("rcsb_id") or pdb_id).upper(),
            title=(data.get("struct") or {}).get("title"),
            methods=[
                exptl["method"]
                for exptl in data.get("exptl") or []
                if isinstance(exptl, dict) and exptl.get("method")
            ],
            resolutions=entry_info.get("resolution_combined") or [],
            polymer_entity_count=entry_info.get("polymer_entity_count") or len(entity_ids),
            deposited_model_count=entry_info.get("deposited_model_count"),
            polymer_entity_ids=entity_ids,
        )


class PolymerEntity(BaseModel):
    """One distinct polymer component of an entry."""

    model_config = ConfigDict(frozen=True)

    entity_id: str
    description: str | None = None
    organisms: list[str] = []
    chains: list[str] = []
    sequence: str | None = None
    canonical_sequence: str | None = None

    @property
    def entity_suffix(self) -> str:
        """Sub-index after the separator, or the full id when there is none."""
        parts = _split_entity_id(self.entity_id)
        return parts[1] if parts else self.entity_id

    @property
    def entry_id(self) -> str | None:
        """Entry identifier prefix of the composite id, if it has one."""
        parts = _split_entity_id(self.entity_id)
        return parts[0].upper() if parts else None

    @property
    def primary_organism(self) -> str | None:
        # Only the first source organism is ever displayed
        if not self.organisms:
            return None
        return self.organisms[0] or None

    @classmethod
    def from_rcsb(
        cls, data: dict[str, Any], pdb_id: str, entity_id: str
    ) -> "PolymerEntity":
        """Build a PolymerEntity from an RCSB ``/polymer_entity`` payload."""
        polymer = data.get("rcsb_polymer_entity") or {}
        containers = data.get("rcsb_polymer_entity_container_identifiers") or {}
        entity_poly = data.get("entity_poly") or {}

        return cls(
            entity_id=str(data.get("rcsb_id") or f"{pdb_id}_{entity_id}"),
            description=polymer.get("pdbx_description"),
            organisms=[
                (organism or {}).get("scientific_name") or ""
                for organism in data.get("rcsb_entity_source_organism") or []
            ],
            chains=[str(chain) for chain in containers.get("auth_asym_ids") or []],
            sequence=entity_poly.get("pdbx_seq_one_letter_code"),
            canonical_sequence=entity_poly.get("pdbx_seq_one_letter_code_can"),
        )


class RetrievalResult(BaseModel):
    """Everything one lookup produced."""

    model_config = ConfigDict(frozen=True)

    entry: Entry
    entities: list[PolymerEntity] = []
    fasta: str = ""
    fasta_source: FastaSource = FastaSource.SYNTHESIZED
