"""Global pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
import respx

from pdb_explorer.core.analysis import SequenceAnalyzer
from tests.fixtures.env_helpers import empty_env, mock_env_vars
from tests.fixtures.http_helpers import common_http_errors, http_mock_helpers

# Import shared fixtures (avoid duplicating existing ones)
from tests.fixtures.mock_clients import mock_pdb_client, pdb_client
from tests.fixtures.sample_data import (
    bare_entity,
    hemoglobin_entity,
    hemoglobin_pdb_id,
    sample_entry,
    sample_remote_fasta,
)


@pytest.fixture
def respx_mock() -> Generator[Any, None, None]:
    """Provide respx mock for testing HTTP requests."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def sequence_analyzer() -> SequenceAnalyzer:
    """Sequence analyzer instance."""
    return SequenceAnalyzer()


@pytest.fixture
def mock_rcsb(respx_mock: Any, http_mock_helpers: Any) -> Any:
    """Register the 4HHB entry, its two entities and a failing FASTA endpoint.

    Routes are named (entry, entity_1, entity_2, fasta) so tests can
    override them through ``mock_rcsb.routes[name]``.
    """
    helpers = http_mock_helpers
    respx_mock.get(helpers.entry_url("4HHB"), name="entry").respond(
        json=helpers.create_entry_response("4HHB", ["1", "2"])
    )
    respx_mock.get(helpers.entity_url("4HHB", "1"), name="entity_1").respond(
        json=helpers.create_entity_response("4HHB", "1")
    )
    respx_mock.get(helpers.entity_url("4HHB", "2"), name="entity_2").respond(
        json=helpers.create_entity_response(
            "4HHB",
            "2",
            description="Hemoglobin subunit beta",
            chains=["B", "D"],
            sequence="VHLTPEEKSAVTALWGKV",
        )
    )
    respx_mock.get(helpers.fasta_url("4HHB"), name="fasta").respond(503)
    return respx_mock
