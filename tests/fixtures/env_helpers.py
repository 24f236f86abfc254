"""Environment and configuration helpers for testing."""

import os
from collections.abc import Generator
from unittest.mock import patch

import pytest

from pdb_explorer import config


@pytest.fixture
def mock_env_vars() -> Generator[None, None, None]:
    """Mock environment variables overriding the RCSB endpoints."""
    with patch.dict(
        os.environ,
        {
            "RCSB_DATA_API_BASE": "https://mirror.example.org/rest/v1/core",
            "RCSB_FASTA_BASE": "https://mirror.example.org/fasta/entry",
            "PDB_REQUEST_TIMEOUT": "2.5",
            "SERVER_HOST": "0.0.0.0",
            "SERVER_PORT": "9000",
            "LOG_LEVEL": "DEBUG",
        },
    ):
        config.refresh()
        yield
    config.refresh()


@pytest.fixture
def empty_env() -> Generator[None, None, None]:
    """Empty environment variables."""
    with patch.dict(os.environ, {}, clear=True):
        config.refresh()
        yield
    config.refresh()
