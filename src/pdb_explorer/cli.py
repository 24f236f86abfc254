"""Terminal interface for looking up PDB entries."""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from pdb_explorer import config
from pdb_explorer.core.analysis import SequenceAnalyzer
from pdb_explorer.core.pdb import PDBClient
from pdb_explorer.render import render_state
from pdb_explorer.utils.constants import DEFAULT_PDB_ID
from pdb_explorer.utils.env import load_env
from pdb_explorer.utils.logging_config import configure_logging
from pdb_explorer.view_state import ExplorerSession, ExplorerState, ViewStatus


def format_state(state: ExplorerState, fasta_only: bool, as_json: bool) -> str:
    """Format a finished lookup for output."""
    if as_json:
        if state.result is not None:
            return state.result.model_dump_json(indent=2)
        payload = {
            "query": state.query,
            "error": getattr(state.error, "kind", "unexpected_error"),
            "message": state.error_message,
        }
        return json.dumps(payload, indent=2)

    if fasta_only and state.result is not None:
        return state.result.fasta

    return render_state(state, SequenceAnalyzer())


async def lookup_all(
    session: ExplorerSession,
    pdb_ids: list[str],
    fasta_only: bool = False,
    as_json: bool = False,
    output: Path | None = None,
) -> int:
    """Look up each identifier in turn and print the outcome.

    Returns:
        Process exit status: 1 if any lookup failed, else 0
    """
    exit_code = 0
    listings = []

    for pdb_id in pdb_ids:
        state = await session.search(pdb_id)
        print(format_state(state, fasta_only, as_json))
        if state.status == ViewStatus.SUCCESS and state.result is not None:
            listings.append(state.result.fasta)
        else:
            exit_code = 1

    if output is not None and listings:
        output.write_text("\n\n".join(listings) + "\n", encoding="utf-8")
        print(f"💾 FASTA written to {output}", file=sys.stderr)

    return exit_code


async def interactive_loop(
    session: ExplorerSession, fasta_only: bool = False, as_json: bool = False
) -> None:
    """Prompt for PDB IDs until the user exits."""
    print("PDB Explorer - enter a PDB ID (or 'exit' to quit)\n")

    query = DEFAULT_PDB_ID
    while True:
        if query.lower() == "r":
            if not session.state.query:
                print("Nothing to retry yet.")
            else:
                print(f"🔁 Retrying {session.state.query.strip().upper()}...")
                await session.retry()
                print(format_state(session.state, fasta_only, as_json))
        elif query:
            print(f"🔎 Looking up {query.strip().upper()}...")
            await session.search(query)
            print(format_state(session.state, fasta_only, as_json))

        try:
            query = input("\nPDB ID> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if query.lower() in ["exit", "quit"]:
            break


async def async_main(args: argparse.Namespace) -> int:
    """Async entry point for the terminal interface."""
    client = PDBClient(timeout=args.timeout)
    session = ExplorerSession(client)

    if args.pdb_ids:
        return await lookup_all(
            session,
            args.pdb_ids,
            fasta_only=args.fasta_only,
            as_json=args.json,
            output=args.output,
        )

    await interactive_loop(session, fasta_only=args.fasta_only, as_json=args.json)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="PDB Explorer - look up RCSB PDB entries and their FASTA sequences"
    )
    parser.add_argument(
        "pdb_ids",
        nargs="*",
        metavar="PDB_ID",
        help="4-character PDB IDs to look up. Starts an interactive prompt if omitted.",
    )
    parser.add_argument(
        "--fasta-only", action="store_true", help="Print only the FASTA listing"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the FASTA listings of successful lookups to this file",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=config.REQUEST_TIMEOUT,
        help="Per-request timeout in seconds",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Synchronous entry point that runs the async main function."""
    load_env()
    config.refresh()
    args = build_parser().parse_args(argv)
    configure_logging(config.LOG_LEVEL, verbose=args.verbose)

    sys.exit(asyncio.run(async_main(args)))


if __name__ == "__main__":
    main()
