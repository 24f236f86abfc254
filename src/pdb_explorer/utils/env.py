"""Environment variable loading utilities."""

import os
from pathlib import Path

from dotenv import load_dotenv


def load_env(env_file: str | Path | None = None) -> bool:
    """Load environment variables from a .env file.

    The file named by ``env_file`` wins, then ``PDB_EXPLORER_ENV_FILE``, then
    the standard dotenv search from the working directory. Variables already
    set in the process environment are never overridden.

    Returns:
        True if a .env file was found and loaded
    """
    os.environ.setdefault("PYTHONIOENCODING", "utf-8")

    explicit = env_file or os.getenv("PDB_EXPLORER_ENV_FILE")
    if explicit:
        path = Path(explicit)
        if not path.exists():
            return False
        return load_dotenv(path)

    return load_dotenv()
