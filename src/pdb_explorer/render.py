"""Plain-text rendering of lookup results for the terminal."""

from pdb_explorer.core.analysis import SequenceAnalyzer
from pdb_explorer.core.models import FastaSource, PolymerEntity, RetrievalResult
from pdb_explorer.view_state import ExplorerState, ViewStatus

RULE = "━" * 60
UNKNOWN_METHOD = "Experimental"
UNKNOWN_RESOLUTION = "N/A"
UNSPECIFIED_ORGANISM = "Organism Unspecified"
RETRY_HINT = "Enter 'r' to retry or another PDB ID."


def format_resolution(resolution: float | None) -> str:
    return f"{resolution}Å" if resolution else UNKNOWN_RESOLUTION


def render_entity(entity: PolymerEntity, analyzer: SequenceAnalyzer) -> str:
    summary = analyzer.summarize_entity(entity)
    mass = summary["molecular_weight_kda"]
    size = f"{summary['length']} residues"
    if mass is not None:
        size += f", {mass} kDa"

    return "\n".join(
        [
            f"  {entity.description or entity.entity_id}",
            f"    Organism: {entity.primary_organism or UNSPECIFIED_ORGANISM}",
            f"    Chains:   {', '.join(entity.chains) or '-'}",
            f"    Size:     {size}",
        ]
    )


def render_fasta(result: RetrievalResult) -> str:
    lines = ["FASTA Sequence"]
    if result.fasta_source == FastaSource.SYNTHESIZED:
        lines[0] += " (generated from entity records)"
    lines.append(RULE)
    lines.append(result.fasta or "(no sequences)")
    return "\n".join(lines)


def render_result(
    result: RetrievalResult, analyzer: SequenceAnalyzer | None = None
) -> str:
    """Render an entry, its molecular components and its FASTA listing."""
    analyzer = analyzer or SequenceAnalyzer()
    entry = result.entry

    sections = [
        RULE,
        f"ID: {entry.pdb_id}",
        entry.title or "(untitled)",
        f"Method: {entry.primary_method or UNKNOWN_METHOD}",
        f"Unique polymers: {entry.polymer_entity_count}",
        f"Resolution: {format_resolution(entry.primary_resolution)}",
        RULE,
        "Molecular Components",
    ]
    if result.entities:
        sections.extend(render_entity(entity, analyzer) for entity in result.entities)
    else:
        sections.append("  (no polymer entities could be retrieved)")
    sections.append("")
    sections.append(render_fasta(result))

    return "\n".join(sections)


def render_error(state: ExplorerState) -> str:
    return f"❌ {state.error_message}\n{RETRY_HINT}"


def render_state(state: ExplorerState, analyzer: SequenceAnalyzer | None = None) -> str:
    """Render whichever of loading, error or success the state holds."""
    if state.status == ViewStatus.LOADING:
        return f"🔎 Looking up {state.query}..."
    if state.status == ViewStatus.ERROR:
        return render_error(state)
    if state.status == ViewStatus.SUCCESS and state.result is not None:
        return render_result(state.result, analyzer)
    return ""
