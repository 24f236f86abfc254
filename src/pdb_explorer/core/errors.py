"""Error taxonomy for PDB entry lookups."""


class PDBLookupError(Exception):
    """Base class for every error a lookup can surface."""

    kind = "lookup_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidIdentifierFormat(PDBLookupError):
    """The identifier is not 4 alphanumeric characters after normalization."""

    kind = "invalid_identifier"

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f'"{identifier}" is not a valid PDB ID format. '
            "Expected 4 alphanumeric characters."
        )


class EntryNotFound(PDBLookupError):
    """RCSB confirmed there is no entry with this identifier."""

    kind = "entry_not_found"

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f'PDB ID "{identifier}" was not found in the RCSB database.')


class RemoteServiceError(PDBLookupError):
    """RCSB answered with an unexpected status or an unreadable body."""

    kind = "remote_service_error"

    def __init__(self, status_code: int, url: str, detail: str | None = None):
        self.status_code = status_code
        self.url = url
        self.detail = detail
        message = f"Server responded with status {status_code}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NetworkUnreachable(PDBLookupError):
    """No HTTP response was obtained at all (DNS, connect, timeout...)."""

    kind = "network_unreachable"

    def __init__(self, url: str, reason: str | None = None):
        self.url = url
        self.reason = reason
        super().__init__(
            "Network error: Unable to reach RCSB PDB servers. "
            "This may be caused by a firewall, a proxy or an ad-blocker."
        )
