"""Shared sample data fixtures for testing."""

import pytest

from pdb_explorer.core.models import Entry, PolymerEntity


@pytest.fixture
def hemoglobin_pdb_id() -> str:
    """Human deoxyhaemoglobin PDB ID."""
    return "4HHB"


@pytest.fixture
def sample_remote_fasta() -> str:
    """FASTA listing as served by the RCSB FASTA endpoint."""
    return """>4HHB_1|Chains A, C|Hemoglobin subunit alpha|Homo sapiens (9606)
VLSPADKTNVKAAWGKVGAHAGEYGAEALERMFLSFPTTKTYFPHF
>4HHB_2|Chains B, D|Hemoglobin subunit beta|Homo sapiens (9606)
VHLTPEEKSAVTALWGKVNVDEVGGEALGRLLVVYPWTQRFFESFGDLSTPDAVMGNPKVKAHGKKVLGAFSDGLAHLDNLKGTFATLSELHCDKLHVDPENFRLLGNVLVCVLAHHFGKEFTPPVQAAYQKVVAGVANALAHKYH
"""


@pytest.fixture
def sample_entry() -> Entry:
    return Entry(
        pdb_id="4HHB",
        title="THE CRYSTAL STRUCTURE OF HUMAN DEOXYHAEMOGLOBIN AT 1.74 ANGSTROMS RESOLUTION",
        methods=["X-RAY DIFFRACTION"],
        resolutions=[1.74],
        polymer_entity_count=2,
        deposited_model_count=1,
        polymer_entity_ids=["1", "2"],
    )


@pytest.fixture
def hemoglobin_entity() -> PolymerEntity:
    return PolymerEntity(
        entity_id="4HHB.1",
        description="Hemoglobin",
        organisms=["Homo sapiens"],
        chains=["A", "B"],
        sequence="MVLS",
    )


@pytest.fixture
def bare_entity() -> PolymerEntity:
    """Entity without description or source organism."""
    return PolymerEntity(entity_id="4HHB.1", chains=["A", "B"], sequence="MVLS")
