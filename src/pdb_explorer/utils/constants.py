"""Constants for API endpoints and configuration."""

# API endpoints
RCSB_DATA_API_BASE = "https://data.rcsb.org/rest/v1/core"
RCSB_FASTA_BASE = "https://www.rcsb.org/fasta/entry"

# HTTP configuration
USER_AGENT = "PDB-Explorer/1.0"
DEFAULT_TIMEOUT = 10.0
JSON_FORMAT = "application/json"
TEXT_FORMAT = "text/plain"

# Interactive defaults
DEFAULT_PDB_ID = "4HHB"
