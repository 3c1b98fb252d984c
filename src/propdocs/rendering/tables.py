"""Markdown table model, builder, and the property table.

``Table`` is the validated structure handed to the renderer: every row has
exactly ``len(column_headers)`` cells.  ``TableBuilder`` is the mutable side
used while walking metadata, where a row may come up short and is padded
before validation.

The property table links each property to its hint section (if any) through
the ``NAME-hint`` anchor; see ``propdocs.rendering.hints`` for the other end.
"""

import logging

from pydantic import BaseModel, ConfigDict, model_validator

from propdocs.metadata.schema import MetadataDocument, PropertyItem

logger = logging.getLogger(__name__)

PROPERTY_COLUMNS = ("Name", "Description", "Type", "Default")

# Dash count floor for the separator row
MIN_COLUMN_WIDTH = 3


# ─── Table Structure ─────────────────────────────────────────────────────────


class Table(BaseModel):
    """A pipe table with a header row and zero or more body rows."""

    model_config = ConfigDict(frozen=True)

    column_headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()

    @model_validator(mode="after")
    def validate_row_widths(self) -> "Table":
        """Ensure every row has exactly len(column_headers) cells."""
        n_cols = len(self.column_headers)
        for i, row in enumerate(self.rows):
            if len(row) != n_cols:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {n_cols} (matching column_headers)")
        return self


class TableBuilder:
    """Accumulates cells row by row, then produces a Table."""

    def __init__(self, *column_headers: str):
        self._headers = list(column_headers)
        self._rows: list[list[str]] = []
        self._current: list[str] = []

    def add_cell(self, text: str) -> "TableBuilder":
        self._current.append(text)
        return self

    def next_row(self) -> "TableBuilder":
        self._rows.append(self._current)
        self._current = []
        return self

    def fill_missing_columns(self) -> None:
        """Pad short rows with empty cells up to the header width."""
        width = len(self._headers)
        for row in self._rows:
            row.extend([""] * (width - len(row)))

    def build(self) -> Table:
        if self._current:
            self.next_row()
        self.fill_missing_columns()
        return Table(column_headers=tuple(self._headers), rows=tuple(tuple(row) for row in self._rows))


# ─── Markdown Rendering ──────────────────────────────────────────────────────


def render_table(table: Table) -> str:
    """Render a Table as an aligned markdown pipe table, one line per row."""
    widths = [max(MIN_COLUMN_WIDTH, len(header)) for header in table.column_headers]
    for row in table.rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    def _line(cells) -> str:
        return "| " + " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)) + " |\n"

    lines = [_line(table.column_headers)]
    lines.append("|" + "|".join("-" * (width + 2) for width in widths) + "|\n")
    lines.extend(_line(row) for row in table.rows)
    return "".join(lines)


# ─── Cell Formatting ─────────────────────────────────────────────────────────


def anchored_cell(name: str) -> str:
    """Name cell: the name is both the anchor id and the visible text (unescaped)."""
    return f'<a id="{name}">{name}</a>'


def hint_link_cell(text: str, property_name: str) -> str:
    """Append a link to the property's hint section."""
    return f"{text} _([hints](#{property_name}-hint))_"


def description_text(item: PropertyItem) -> str:
    """Description, with a deprecation note appended only when a description exists."""
    if item.description is None:
        return ""
    if item.deprecation is None:
        return item.description
    if item.deprecation.replacement is None:
        return f"{item.description} _(deprecated)_"
    return f"{item.description} _(deprecated, use: {item.deprecation.replacement} instead)_"


def type_text(item: PropertyItem) -> str:
    return item.type if item.type is not None else ""


def default_text(item: PropertyItem) -> str:
    return item.default_value if item.default_value is not None else ""


# ─── Property Table ──────────────────────────────────────────────────────────


def build_property_table(document: MetadataDocument) -> Table:
    """One row per non-group item, in source order: Name, Description, Type, Default."""
    builder = TableBuilder(*PROPERTY_COLUMNS)
    hints = document.hint_lookup()

    for item in document.items:
        if item.is_group:
            logger.debug("Found a group item (skipping): %s", item.name)
            continue

        builder.add_cell(anchored_cell(item.name))
        builder.add_cell(description_text(item))
        builder.add_cell(type_text(item))
        if item.name in hints:
            builder.add_cell(hint_link_cell(default_text(item), item.name))
        else:
            builder.add_cell(default_text(item))
        builder.next_row()

    return builder.build()
