"""Presentation state for PDB lookups.

The core client is stateless; everything a front-end needs to remember between
lookups (current query, loading flag, error, last result) lives here.
"""

import logging
from enum import Enum

from pdb_explorer.core.errors import NetworkUnreachable, PDBLookupError
from pdb_explorer.core.models import RetrievalResult
from pdb_explorer.core.pdb import PDBClient

NETWORK_ERROR_MESSAGE = (
    "Network Connection Failed. The RCSB PDB API may be blocked by a firewall, "
    "a proxy or an ad-blocker. Check your connection and try again."
)
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while fetching PDB data."


class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    SUCCESS = "success"


def describe_error(error: BaseException) -> str:
    """Turn a lookup error into the message shown to the user."""
    if isinstance(error, NetworkUnreachable):
        return NETWORK_ERROR_MESSAGE
    if isinstance(error, PDBLookupError):
        return error.message
    return str(error) or UNEXPECTED_ERROR_MESSAGE


class ExplorerState:
    """Holds exactly one of loading, error or success at a time."""

    def __init__(self) -> None:
        self.query: str = ""
        self.status = ViewStatus.IDLE
        self.result: RetrievalResult | None = None
        self.error: Exception | None = None
        self.error_message: str | None = None
        self._generation = 0

    @property
    def is_loading(self) -> bool:
        return self.status == ViewStatus.LOADING

    def begin(self, query: str) -> int:
        """Start a lookup, clearing any previous result or error.

        Returns:
            int: Token identifying this lookup. Completions carrying an older
            token are discarded.
        """
        self._generation += 1
        self.query = query
        self.status = ViewStatus.LOADING
        self.result = None
        self.error = None
        self.error_message = None
        return self._generation

    def is_current(self, token: int) -> bool:
        return token == self._generation

    def succeed(self, token: int, result: RetrievalResult) -> bool:
        if not self.is_current(token):
            return False
        self.status = ViewStatus.SUCCESS
        self.result = result
        self.error = None
        self.error_message = None
        return True

    def fail(self, token: int, error: Exception) -> bool:
        if not self.is_current(token):
            return False
        self.status = ViewStatus.ERROR
        self.result = None
        self.error = error
        self.error_message = describe_error(error)
        return True


class ExplorerSession:
    """Drives an ExplorerState with lookups from a PDBClient."""

    def __init__(self, client: PDBClient | None = None):
        self.client = client or PDBClient()
        self.state = ExplorerState()
        self.logger = logging.getLogger(__name__)

    async def search(self, raw_identifier: str) -> ExplorerState:
        """Run a lookup and record its outcome.

        Lookup errors end up in ``state``; they are not raised.
        """
        token = self.state.begin(raw_identifier)
        try:
            result = await self.client.lookup(raw_identifier)
        except PDBLookupError as e:
            self.state.fail(token, e)
        except Exception as e:
            self.logger.exception(f"Unexpected error looking up {raw_identifier!r}")
            self.state.fail(token, e)
        else:
            self.state.succeed(token, result)
        return self.state

    async def retry(self) -> ExplorerState:
        """Repeat the last search."""
        return await self.search(self.state.query)
