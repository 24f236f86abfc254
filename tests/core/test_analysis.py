import pytest

from pdb_explorer.core.analysis import SequenceAnalyzer
from pdb_explorer.core.models import PolymerEntity


class TestSequenceAnalyzer:
    """Test suite for SequenceAnalyzer."""

    @pytest.fixture
    def analyzer(self) -> SequenceAnalyzer:
        return SequenceAnalyzer()

    @pytest.mark.unit
    def test_summarize_canonical_sequence(self, analyzer: SequenceAnalyzer) -> None:
        sequence = "VLSPADKTNVKAAWGKVGAHAGEYGAEALERMFLSFPTTKTYFPHF"

        result = analyzer.summarize(sequence)

        assert result["length"] == len(sequence)
        assert result["molecular_weight_kda"] > 0
        for aa in set(sequence):
            assert result["composition"][aa] == sequence.count(aa)

    @pytest.mark.unit
    def test_summarize_wrapped_lowercase_sequence(
        self, analyzer: SequenceAnalyzer
    ) -> None:
        result = analyzer.summarize("mvls\nmvls ")

        assert result["length"] == 8
        assert result["composition"] == {"L": 2, "M": 2, "S": 2, "V": 2}

    @pytest.mark.unit
    @pytest.mark.parametrize("sequence", ["MVLSX", "MV(MSE)LS", "ACGU"])
    def test_summarize_non_canonical_sequence(
        self, analyzer: SequenceAnalyzer, sequence: str
    ) -> None:
        """Non-canonical residues keep the length but drop the mass."""
        result = analyzer.summarize(sequence)

        assert result["length"] == len(sequence)
        assert result["molecular_weight_kda"] is None

    @pytest.mark.unit
    @pytest.mark.parametrize("sequence", ["", None])
    def test_summarize_empty_sequence(
        self, analyzer: SequenceAnalyzer, sequence: str | None
    ) -> None:
        result = analyzer.summarize(sequence)

        assert result == {"length": 0, "molecular_weight_kda": None, "composition": {}}

    @pytest.mark.unit
    def test_summarize_entity_prefers_canonical_sequence(
        self, analyzer: SequenceAnalyzer
    ) -> None:
        entity = PolymerEntity(
            entity_id="1ABC_1",
            sequence="M(MSE)K",
            canonical_sequence="MMK",
        )

        result = analyzer.summarize_entity(entity)

        assert result["length"] == 3
        assert result["molecular_weight_kda"] is not None
