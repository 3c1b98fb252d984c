"""Pydantic models for Spring configuration metadata.

These mirror the shape of ``spring-configuration-metadata.json`` after it has
been read by the loader: an ordered list of items (groups and properties) and
an ordered list of value hints.  All models are frozen; the renderers only read
from them.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ItemKind(str, Enum):
    """Whether a metadata item is a real property or a namespace group."""

    PROPERTY = "PROPERTY"
    GROUP = "GROUP"


class Deprecation(BaseModel):
    """Deprecation notice attached to a property."""

    model_config = ConfigDict(frozen=True)

    replacement: str | None = None
    reason: str | None = None
    level: str | None = None


class PropertyItem(BaseModel):
    """One configuration key (or group) and its descriptive metadata."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str | None = None
    description: str | None = None
    default_value: str | None = None
    deprecation: Deprecation | None = None
    kind: ItemKind = ItemKind.PROPERTY
    source_type: str | None = None

    @property
    def is_group(self) -> bool:
        return self.kind is ItemKind.GROUP


class ValueHint(BaseModel):
    """A single allowed or example value for a property."""

    model_config = ConfigDict(frozen=True)

    value: str | None = None
    description: str | None = None


class HintSet(BaseModel):
    """Value hints for the property whose name equals ``name``."""

    model_config = ConfigDict(frozen=True)

    name: str
    values: tuple[ValueHint, ...] = ()


class MetadataDocument(BaseModel):
    """The parsed metadata file: items and hints, both in source order."""

    model_config = ConfigDict(frozen=True)

    items: tuple[PropertyItem, ...] = Field(default_factory=tuple)
    hints: tuple[HintSet, ...] = Field(default_factory=tuple)

    def hint_lookup(self) -> dict[str, HintSet]:
        """Map hint name -> HintSet.  A repeated name keeps the last HintSet seen."""
        return {hint.name: hint for hint in self.hints}

    def properties(self) -> list[PropertyItem]:
        """Return the non-group items in source order."""
        return [item for item in self.items if not item.is_group]
