"""Assemble the final markdown document.

Layout, in order:

    # <title>
    <blank>
    ## Properties
    <property table>
    <blank>
    ## Hints                (only when there is at least one hint)
    <hint heading>
    <hint table>
    <blank>                 (after each hint section)
"""

from propdocs.metadata.schema import MetadataDocument
from propdocs.rendering.hints import HintSection, build_hint_sections
from propdocs.rendering.tables import Table, build_property_table, render_table


def assemble(title: str, property_table: Table, hint_sections: list[HintSection]) -> str:
    """Join the title, property table, and hint sections into one markdown string."""
    parts = [f"# {title}", "\n\n", "## Properties", "\n", render_table(property_table), "\n"]

    if hint_sections:
        parts.append("## Hints")
        parts.append("\n")
        for section in hint_sections:
            parts.append(section.heading)
            parts.append("\n")
            parts.append(render_table(section.table))
            parts.append("\n")

    return "".join(parts)


def render_document(document: MetadataDocument, title: str) -> str:
    """Build both table kinds from ``document`` and assemble them under ``title``."""
    return assemble(title, build_property_table(document), build_hint_sections(document))
