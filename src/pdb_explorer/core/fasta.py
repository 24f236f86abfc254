"""Local FASTA synthesis from polymer entity records."""

from collections.abc import Iterable

from pdb_explorer.core.models import PolymerEntity

UNKNOWN_DESCRIPTION = "Unknown Protein"
UNKNOWN_ORGANISM = "Unknown Organism"
CHAIN_SEPARATOR = ", "
RECORD_SEPARATOR = "\n\n"


def format_fasta_header(pdb_id: str, entity: PolymerEntity) -> str:
    """Build ``>{ID}_{suffix}|Chain {chains}|{description}|{organism}``."""
    chains = CHAIN_SEPARATOR.join(entity.chains)
    description = entity.description or UNKNOWN_DESCRIPTION
    organism = entity.primary_organism or UNKNOWN_ORGANISM
    return f">{pdb_id}_{entity.entity_suffix}|Chain {chains}|{description}|{organism}"


def format_fasta_record(pdb_id: str, entity: PolymerEntity) -> str:
    return f"{format_fasta_header(pdb_id, entity)}\n{entity.sequence or ''}"


def synthesize_fasta(pdb_id: str, entities: Iterable[PolymerEntity]) -> str:
    """Synthesize a FASTA listing with one record per entity.

    Records keep the order of ``entities`` and are separated by a blank line.
    An empty collection yields an empty string.
    """
    return RECORD_SEPARATOR.join(format_fasta_record(pdb_id, entity) for entity in entities)
