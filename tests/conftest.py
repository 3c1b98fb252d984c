"""Shared test fixtures: a representative metadata document and its JSON form."""

import json

import pytest

from propdocs.metadata.schema import Deprecation, HintSet, ItemKind, MetadataDocument, PropertyItem, ValueHint

SAMPLE_METADATA_JSON = {
    "groups": [
        {"name": "server", "type": "com.example.ServerProperties", "sourceType": "com.example.ServerProperties"},
    ],
    "properties": [
        {
            "name": "server.port",
            "type": "java.lang.Integer",
            "description": "Server HTTP port.",
            "sourceType": "com.example.ServerProperties",
            "defaultValue": 8080,
        },
        {
            "name": "server.legacy-port",
            "type": "java.lang.Integer",
            "description": "Old port setting.",
            "deprecation": {"replacement": "server.port", "reason": "Renamed", "level": "warning"},
        },
        {
            "name": "log.level",
            "type": "java.lang.String",
            "description": "Root log level.",
            "defaultValue": "INFO",
        },
    ],
    "hints": [
        {
            "name": "log.level",
            "values": [
                {"value": "DEBUG", "description": "Verbose output."},
                {"value": "INFO"},
            ],
        },
    ],
}


@pytest.fixture
def sample_document() -> MetadataDocument:
    return MetadataDocument(
        items=(
            PropertyItem(name="server", kind=ItemKind.GROUP),
            PropertyItem(name="server.port", type="java.lang.Integer", description="Server HTTP port.", default_value="8080"),
            PropertyItem(
                name="server.legacy-port",
                type="java.lang.Integer",
                description="Old port setting.",
                deprecation=Deprecation(replacement="server.port"),
            ),
            PropertyItem(name="log.level", type="java.lang.String", description="Root log level.", default_value="INFO"),
        ),
        hints=(
            HintSet(
                name="log.level",
                values=(ValueHint(value="DEBUG", description="Verbose output."), ValueHint(value="INFO")),
            ),
        ),
    )


@pytest.fixture
def metadata_file(tmp_path):
    """Write SAMPLE_METADATA_JSON under a META-INF directory and return its path."""
    meta_inf = tmp_path / "classes" / "META-INF"
    meta_inf.mkdir(parents=True)
    path = meta_inf / "spring-configuration-metadata.json"
    path.write_text(json.dumps(SAMPLE_METADATA_JSON), encoding="utf-8")
    return path
