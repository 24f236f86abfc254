import os
from pathlib import Path
from unittest.mock import patch

import pytest

from pdb_explorer import config
from pdb_explorer.utils.env import load_env


class TestConfig:
    """Test suite for environment-driven configuration."""

    @pytest.mark.unit
    def test_defaults(self, empty_env: None) -> None:
        assert config.RCSB_DATA_API_BASE == "https://data.rcsb.org/rest/v1/core"
        assert config.RCSB_FASTA_BASE == "https://www.rcsb.org/fasta/entry"
        assert config.REQUEST_TIMEOUT == 10.0
        assert config.DEFAULT_HOST == "127.0.0.1"
        assert config.DEFAULT_PORT == 8080
        assert config.LOG_LEVEL == "WARNING"

    @pytest.mark.unit
    def test_environment_overrides(self, mock_env_vars: None) -> None:
        assert config.RCSB_DATA_API_BASE == "https://mirror.example.org/rest/v1/core"
        assert config.RCSB_FASTA_BASE == "https://mirror.example.org/fasta/entry"
        assert config.REQUEST_TIMEOUT == 2.5
        assert config.DEFAULT_HOST == "0.0.0.0"
        assert config.DEFAULT_PORT == 9000
        assert config.LOG_LEVEL == "DEBUG"

    @pytest.mark.unit
    def test_client_picks_up_overrides(self, mock_env_vars: None) -> None:
        from pdb_explorer.core.pdb import PDBClient

        client = PDBClient()

        assert client.entry_url("4HHB") == (
            "https://mirror.example.org/rest/v1/core/entry/4HHB"
        )
        assert client.timeout == 2.5


class TestLoadEnv:
    """Test suite for .env loading."""

    @pytest.mark.unit
    def test_load_explicit_file(self, tmp_path: Path, empty_env: None) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("RCSB_FASTA_BASE=https://fasta.example.org/entry\n")

        assert load_env(env_file) is True
        assert os.environ["RCSB_FASTA_BASE"] == "https://fasta.example.org/entry"

        config.refresh()
        assert config.RCSB_FASTA_BASE == "https://fasta.example.org/entry"

    @pytest.mark.unit
    def test_load_file_from_environment_variable(
        self, tmp_path: Path, empty_env: None
    ) -> None:
        env_file = tmp_path / "explorer.env"
        env_file.write_text("SERVER_PORT=9100\n")

        with patch.dict(os.environ, {"PDB_EXPLORER_ENV_FILE": str(env_file)}):
            assert load_env() is True
            assert os.environ["SERVER_PORT"] == "9100"

    @pytest.mark.unit
    def test_existing_variables_win(self, tmp_path: Path, empty_env: None) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=DEBUG\n")

        with patch.dict(os.environ, {"LOG_LEVEL": "ERROR"}):
            load_env(env_file)
            assert os.environ["LOG_LEVEL"] == "ERROR"

    @pytest.mark.unit
    def test_missing_explicit_file(self, tmp_path: Path, empty_env: None) -> None:
        assert load_env(tmp_path / "missing.env") is False
