"""Hint sections: one heading plus a Value/Description table per HintSet.

Each heading carries the ``NAME-hint`` anchor targeted from the property
table's Default column, and links back to the property row (``#NAME``).
"""

from pydantic import BaseModel, ConfigDict

from propdocs.metadata.schema import HintSet, MetadataDocument
from propdocs.rendering.tables import Table, TableBuilder

HINT_COLUMNS = ("Value", "Description")


class HintSection(BaseModel):
    """A rendered-ready hint heading and its value table."""

    model_config = ConfigDict(frozen=True)

    heading: str
    table: Table


def hint_heading(name: str) -> str:
    return f'### <a id="{name}-hint" />[{name}](#{name})'


def build_hint_table(hint: HintSet) -> Table:
    builder = TableBuilder(*HINT_COLUMNS)
    for value_hint in hint.values:
        builder.add_cell(value_hint.value if value_hint.value is not None else "")
        builder.add_cell(value_hint.description if value_hint.description is not None else "")
        builder.next_row()
    return builder.build()


def build_hint_sections(document: MetadataDocument) -> list[HintSection]:
    """One section per HintSet in source order; empty when there are no hints."""
    return [HintSection(heading=hint_heading(hint.name), table=build_hint_table(hint)) for hint in document.hints]
