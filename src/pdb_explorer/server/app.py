"""HTTP API serving PDB entry lookups as JSON and FASTA text."""

import argparse
import logging

import uvicorn
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route

from pdb_explorer import __version__, config
from pdb_explorer.core.analysis import SequenceAnalyzer
from pdb_explorer.core.errors import (
    EntryNotFound,
    InvalidIdentifierFormat,
    NetworkUnreachable,
    PDBLookupError,
    RemoteServiceError,
)
from pdb_explorer.core.models import RetrievalResult
from pdb_explorer.core.pdb import PDBClient
from pdb_explorer.server.models import (
    EntitySummary,
    ErrorResponse,
    HealthResponse,
    LookupResponse,
)
from pdb_explorer.utils.env import load_env
from pdb_explorer.utils.logging_config import configure_logging
from pdb_explorer.view_state import describe_error

ERROR_STATUS_CODES: dict[type[PDBLookupError], int] = {
    InvalidIdentifierFormat: 400,
    EntryNotFound: 404,
    RemoteServiceError: 502,
    NetworkUnreachable: 503,
}


class ExplorerServer:
    """Stateless HTTP front-end over PDBClient.lookup."""

    def __init__(
        self,
        client: PDBClient | None = None,
        analyzer: SequenceAnalyzer | None = None,
    ):
        self.client = client or PDBClient()
        self.analyzer = analyzer or SequenceAnalyzer()
        self.logger = logging.getLogger(__name__)

    def error_response(self, error: PDBLookupError, pdb_id: str) -> JSONResponse:
        status_code = next(
            (
                ERROR_STATUS_CODES[cls]
                for cls in type(error).__mro__
                if cls in ERROR_STATUS_CODES
            ),
            500,
        )
        body = ErrorResponse(
            error=error.kind, message=describe_error(error), pdb_id=pdb_id
        )
        return JSONResponse(body.model_dump(), status_code=status_code)

    def build_lookup_response(self, result: RetrievalResult) -> LookupResponse:
        entities = []
        for entity in result.entities:
            summary = self.analyzer.summarize_entity(entity)
            entities.append(
                EntitySummary(
                    entity_id=entity.entity_id,
                    description=entity.description,
                    organism=entity.primary_organism,
                    chains=entity.chains,
                    sequence=entity.sequence,
                    **summary,
                )
            )

        return LookupResponse(
            pdb_id=result.entry.pdb_id,
            entry=result.entry,
            entities=entities,
            fasta=result.fasta,
            fasta_source=result.fasta_source,
        )

    async def lookup_endpoint(self, request: Request) -> JSONResponse:
        """Look up an entry with its entities and FASTA listing."""
        pdb_id = request.path_params["pdb_id"]
        try:
            result = await self.client.lookup(pdb_id)
        except PDBLookupError as e:
            self.logger.info(f"Lookup of {pdb_id!r} failed: {e}")
            return self.error_response(e, pdb_id)

        response = self.build_lookup_response(result)
        return JSONResponse(response.model_dump(mode="json"))

    async def fasta_endpoint(
        self, request: Request
    ) -> PlainTextResponse | JSONResponse:
        """Return only the FASTA listing as plain text."""
        pdb_id = request.path_params["pdb_id"]
        try:
            result = await self.client.lookup(pdb_id)
        except PDBLookupError as e:
            self.logger.info(f"FASTA lookup of {pdb_id!r} failed: {e}")
            return self.error_response(e, pdb_id)

        return PlainTextResponse(
            result.fasta,
            headers={"X-Fasta-Source": result.fasta_source.value},
        )

    async def health_check(self, request: Request) -> JSONResponse:
        response = HealthResponse(
            status="healthy",
            service="pdb-explorer",
            version=__version__,
        )
        return JSONResponse(response.model_dump())

    def create_app(self) -> Starlette:
        """Create the Starlette application with routes and middleware."""
        routes = [
            Route("/api/entries/{pdb_id}", self.lookup_endpoint, methods=["GET"]),
            Route(
                "/api/entries/{pdb_id}/fasta", self.fasta_endpoint, methods=["GET"]
            ),
            Route("/health", self.health_check, methods=["GET"]),
        ]

        app = Starlette(routes=routes)

        app.add_middleware(
            CORSMiddleware,
            allow_origins=[
                "http://localhost:3000",
                "http://127.0.0.1:3000",
            ],
            allow_methods=["GET"],
            allow_headers=["*"],
            expose_headers=["X-Fasta-Source"],
        )

        return app


def main() -> None:
    """Main entry point for the HTTP API."""
    load_env()
    config.refresh()

    parser = argparse.ArgumentParser(
        description="PDB Explorer Server - HTTP API for RCSB PDB entry lookups"
    )
    parser.add_argument("--host", default=config.DEFAULT_HOST, help="Host to bind to")
    parser.add_argument(
        "--port", type=int, default=config.DEFAULT_PORT, help="Port to listen on"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args()
    configure_logging(config.LOG_LEVEL, verbose=args.verbose)

    server = ExplorerServer()
    app = server.create_app()

    print(f"PDB Explorer Server starting on http://{args.host}:{args.port}")
    print("Endpoints:")
    print("   GET /api/entries/{pdb_id} - Entry, polymer entities and FASTA")
    print("   GET /api/entries/{pdb_id}/fasta - FASTA listing as plain text")
    print("   GET /health - Health check")

    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
