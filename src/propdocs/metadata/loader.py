"""Load ``spring-configuration-metadata.json`` into a MetadataDocument.

The file has three optional top-level arrays: ``groups``, ``properties`` and
``hints``.  Groups are emitted first and properties second, each in file
order, which is the order the renderers rely on.  Default values and hint
values may be any JSON value; they are stringified here so the model only
ever carries text.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from propdocs.errors import MetadataUnavailableError
from propdocs.metadata.schema import Deprecation, HintSet, ItemKind, MetadataDocument, PropertyItem, ValueHint

logger = logging.getLogger(__name__)


# ─── Value Stringification ───────────────────────────────────────────────────


def stringify_value(value) -> str | None:
    """Render an arbitrary JSON value as display text (None stays None)."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return ",".join("" if v is None else stringify_value(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


# ─── Record Conversion ───────────────────────────────────────────────────────


def _to_item(raw: dict, kind: ItemKind) -> PropertyItem:
    """Convert one ``groups``/``properties`` entry into a PropertyItem."""
    deprecation = None
    raw_deprecation = raw.get("deprecation")
    if raw_deprecation is not None:
        deprecation = Deprecation(
            replacement=raw_deprecation.get("replacement"),
            reason=raw_deprecation.get("reason"),
            level=raw_deprecation.get("level"),
        )
    elif raw.get("deprecated") is True:
        # Older metadata flags deprecation without a nested object
        deprecation = Deprecation()

    return PropertyItem(
        name=raw["name"],
        type=raw.get("type"),
        description=raw.get("description"),
        default_value=stringify_value(raw.get("defaultValue")),
        deprecation=deprecation,
        kind=kind,
        source_type=raw.get("sourceType"),
    )


def _to_hint(raw: dict) -> HintSet:
    """Convert one ``hints`` entry into a HintSet."""
    values = tuple(
        ValueHint(value=stringify_value(v.get("value")), description=v.get("description"))
        for v in raw.get("values") or []
    )
    return HintSet(name=raw["name"], values=values)


def parse_metadata(data: dict) -> MetadataDocument:
    """Build a MetadataDocument from already-decoded metadata JSON."""
    items = [_to_item(raw, ItemKind.GROUP) for raw in data.get("groups") or []]
    items += [_to_item(raw, ItemKind.PROPERTY) for raw in data.get("properties") or []]
    hints = [_to_hint(raw) for raw in data.get("hints") or []]
    return MetadataDocument(items=tuple(items), hints=tuple(hints))


# ─── File Loader ─────────────────────────────────────────────────────────────


def load_metadata(path: Path) -> MetadataDocument:
    """Read and parse a metadata file.

    Raises MetadataUnavailableError (chained to the underlying cause) when the
    file is missing, unreadable, not JSON, or not shaped like Spring metadata.
    """
    path = Path(path).absolute()
    logger.info("Loading configuration metadata from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as fopen:
            data = json.load(fopen)
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        document = parse_metadata(data)
    except (OSError, ValueError, TypeError, KeyError, AttributeError, ValidationError) as exc:
        raise MetadataUnavailableError(path) from exc

    logger.info("Metadata loaded: %d items, %d hints", len(document.items), len(document.hints))
    return document
