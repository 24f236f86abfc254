"""
Configuration for the PDB Explorer application.

Values are read from the environment so the RCSB endpoints, request timeout,
server binding and log level can be overridden without code changes. Entry
points call ``refresh()`` after loading a ``.env`` file.
"""

import os

from pdb_explorer.utils import constants

RCSB_DATA_API_BASE = constants.RCSB_DATA_API_BASE
RCSB_FASTA_BASE = constants.RCSB_FASTA_BASE
REQUEST_TIMEOUT = constants.DEFAULT_TIMEOUT

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080

LOG_LEVEL = "WARNING"


def refresh() -> None:
    """Re-read configuration from the process environment."""
    global RCSB_DATA_API_BASE, RCSB_FASTA_BASE, REQUEST_TIMEOUT
    global DEFAULT_HOST, DEFAULT_PORT, LOG_LEVEL

    RCSB_DATA_API_BASE = os.getenv("RCSB_DATA_API_BASE", constants.RCSB_DATA_API_BASE)
    RCSB_FASTA_BASE = os.getenv("RCSB_FASTA_BASE", constants.RCSB_FASTA_BASE)
    REQUEST_TIMEOUT = float(
        os.getenv("PDB_REQUEST_TIMEOUT", str(constants.DEFAULT_TIMEOUT))
    )

    DEFAULT_HOST = os.getenv("SERVER_HOST", "127.0.0.1")
    DEFAULT_PORT = int(os.getenv("SERVER_PORT", "8080"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")


refresh()
