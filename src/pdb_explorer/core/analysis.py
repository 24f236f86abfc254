from typing import Any

from Bio.Seq import Seq
from Bio.SeqUtils import molecular_weight

from pdb_explorer.core.models import PolymerEntity

CANONICAL_AMINO_ACIDS = "ACDEFGHIKLMNPQRSTVWY"


class SequenceAnalyzer:
    """Analyzer for polymer entity sequence properties."""

    def summarize(self, sequence: str | None) -> dict[str, Any]:
        """Summarize a one-letter polymer sequence.

        Args:
            sequence: One-letter sequence, possibly wrapped over several lines.

        Returns:
            dict: {
                length: int,
                molecular_weight_kda: float | None,
                composition: dict
            }
            ``molecular_weight_kda`` is None when the sequence holds anything
            other than the 20 canonical amino acids.
        """
        clean_seq = "".join((sequence or "").split()).upper()

        result: dict[str, Any] = {
            "length": len(clean_seq),
            "molecular_weight_kda": None,
            "composition": {aa: clean_seq.count(aa) for aa in sorted(set(clean_seq))},
        }

        if clean_seq and all(res in CANONICAL_AMINO_ACIDS for res in clean_seq):
            result["molecular_weight_kda"] = round(
                molecular_weight(Seq(clean_seq), seq_type="protein") / 1000, 2
            )

        return result

    def summarize_entity(self, entity: PolymerEntity) -> dict[str, Any]:
        """Summarize an entity, preferring its canonical sequence."""
        return self.summarize(entity.canonical_sequence or entity.sequence)
