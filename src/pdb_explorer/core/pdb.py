import asyncio
import logging
from collections.abc import Sequence

from pydantic import ValidationError

from pdb_explorer import config
from pdb_explorer.core.errors import EntryNotFound, RemoteServiceError
from pdb_explorer.core.fasta import synthesize_fasta
from pdb_explorer.core.identifier import validate_pdb_id
from pdb_explorer.core.models import (
    Entry,
    FastaSource,
    PolymerEntity,
    RetrievalResult,
)
from pdb_explorer.utils.http_client import fetch, make_fasta_request


class PDBClient:
    """Client for RCSB PDB entry lookups."""

    def __init__(
        self,
        data_api_base: str | None = None,
        fasta_base: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize PDB client.

        Args:
            data_api_base: RCSB Data API base URL. Defaults to configuration.
            fasta_base: RCSB FASTA endpoint base URL. Defaults to configuration.
            timeout: Per-request timeout in seconds. Defaults to configuration.
        """
        self.data_api_base = (data_api_base or config.RCSB_DATA_API_BASE).rstrip("/")
        self.fasta_base = (fasta_base or config.RCSB_FASTA_BASE).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.logger = logging.getLogger(__name__)

    def entry_url(self, pdb_id: str) -> str:
        return f"{self.data_api_base}/entry/{pdb_id}"

    def polymer_entity_url(self, pdb_id: str, entity_id: str) -> str:
        return f"{self.data_api_base}/polymer_entity/{pdb_id}/{entity_id}"

    def fasta_url(self, pdb_id: str) -> str:
        return f"{self.fasta_base}/{pdb_id}"

    async def fetch_entry(self, pdb_id: str) -> Entry:
        """Get top-level entry metadata from RCSB.

        Args:
            pdb_id: A validated, uppercase 4-character PDB ID (e.g., '4HHB').

        Returns:
            Entry: Title, methods, resolutions and polymer entity ids.

        Raises:
            EntryNotFound: RCSB answered 404.
            RemoteServiceError: Any other non-2xx status or a malformed body.
            NetworkUnreachable: No response was obtained.
        """
        url = self.entry_url(pdb_id)
        try:
            data = await fetch(url, timeout=self.timeout)
        except RemoteServiceError as e:
            if e.status_code == 404:
                raise EntryNotFound(pdb_id) from e
            raise

        if not isinstance(data, dict):
            raise RemoteServiceError(200, url, "entry payload is not a JSON object")

        try:
            return Entry.from_rcsb(data, pdb_id)
        except (ValidationError, AttributeError, TypeError) as e:
            # Sections of the wrong JSON type
            raise RemoteServiceError(200, url, "unexpected entry payload") from e

    async def fetch_polymer_entity(self, pdb_id: str, entity_id: str) -> PolymerEntity:
        """Get one polymer entity. Raises the same errors as ``fetch_entry``
        except that a 404 stays a ``RemoteServiceError``."""
        url = self.polymer_entity_url(pdb_id, entity_id)
        data = await fetch(url, timeout=self.timeout)
        if not isinstance(data, dict):
            raise RemoteServiceError(200, url, "entity payload is not a JSON object")
        return PolymerEntity.from_rcsb(data, pdb_id, entity_id)

    async def fetch_polymer_entities(
        self, pdb_id: str, entity_ids: Sequence[str]
    ) -> list[PolymerEntity]:
        """Fetch every polymer entity of an entry concurrently.

        Individual failures are logged and dropped, so one missing entity
        never hides the others. Entities whose id names a different entry are
        dropped as well.

        Args:
            pdb_id: A validated PDB ID.
            entity_ids: Entity ids declared by the entry (e.g., ['1', '2']).

        Returns:
            list[PolymerEntity]: Successfully fetched entities, in the order of
            ``entity_ids``.
        """
        results = await asyncio.gather(
            *(self.fetch_polymer_entity(pdb_id, eid) for eid in entity_ids),
            return_exceptions=True,
        )

        entities = []
        for entity_id, result in zip(entity_ids, results, strict=True):
            if isinstance(result, Exception):
                self.logger.warning(
                    f"Skipping polymer entity {pdb_id}/{entity_id}: {result}"
                )
                continue
            if isinstance(result, BaseException):
                raise result
            if result.entry_id is not None and result.entry_id != pdb_id:
                self.logger.warning(
                    f"Skipping polymer entity {result.entity_id}: "
                    f"does not belong to {pdb_id}"
                )
                continue
            entities.append(result)

        return entities

    async def fetch_fasta(self, pdb_id: str) -> str | None:
        """Get the pre-built FASTA listing, or None if the endpoint failed."""
        return await make_fasta_request(self.fasta_url(pdb_id), timeout=self.timeout)

    def _assemble_fasta(
        self,
        pdb_id: str,
        entities: Sequence[PolymerEntity],
        remote_fasta: str | None,
    ) -> tuple[str, FastaSource]:
        if remote_fasta is not None:
            return remote_fasta, FastaSource.REMOTE

        self.logger.warning(
            f"FASTA endpoint failed for {pdb_id}; "
            f"synthesizing listing from {len(entities)} entities"
        )
        return synthesize_fasta(pdb_id, entities), FastaSource.SYNTHESIZED

    async def resolve_fasta(
        self, pdb_id: str, entities: Sequence[PolymerEntity]
    ) -> tuple[str, FastaSource]:
        """Resolve the sequence listing for an entry.

        Args:
            pdb_id: A validated PDB ID.
            entities: Entities already fetched for the entry, used only when
                the FASTA endpoint fails.

        Returns:
            tuple: The listing, verbatim from RCSB or synthesized locally, and
            where it came from. Never raises.
        """
        remote_fasta = await self.fetch_fasta(pdb_id)
        return self._assemble_fasta(pdb_id, entities, remote_fasta)

    async def lookup(self, raw_identifier: str) -> RetrievalResult:
        """Look up an entry with its polymer entities and sequence listing.

        Args:
            raw_identifier: User input; trimmed and uppercased before use.

        Returns:
            RetrievalResult: A new result for this lookup.

        Raises:
            InvalidIdentifierFormat: Before any request is made.
            EntryNotFound, RemoteServiceError, NetworkUnreachable: From the
                entry request; entity and FASTA failures are contained.
        """
        pdb_id = validate_pdb_id(raw_identifier)

        entry = await self.fetch_entry(pdb_id)

        # The FASTA request does not depend on the entities, only the fallback does
        entities, remote_fasta = await asyncio.gather(
            self.fetch_polymer_entities(pdb_id, entry.polymer_entity_ids),
            self.fetch_fasta(pdb_id),
        )
        fasta, fasta_source = self._assemble_fasta(pdb_id, entities, remote_fasta)

        return RetrievalResult(
            entry=entry,
            entities=entities,
            fasta=fasta,
            fasta_source=fasta_source,
        )
