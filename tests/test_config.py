"""Unit tests for the generator config."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import os
from pathlib import Path

import pytest

from propdocs.config import (
    DEFAULT_METADATA_DIRECTORY,
    DEFAULT_METADATA_FILE_NAME,
    DEFAULT_OUTPUT_DIRECTORY,
    GeneratorConfig,
)

ENV_VARS = [
    "PROPDOCS_METADATA_DIRECTORY",
    "PROPDOCS_METADATA_FILE_NAME",
    "PROPDOCS_OUTPUT_DIRECTORY",
    "PROPDOCS_ARTIFACT_ID",
    "PROPDOCS_GENERATED_FILE_NAME",
    "PROPDOCS_HEADER",
    "PROPDOCS_FAIL_ON_MISSING_METADATA",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:

    def test_paths(self):
        cfg = GeneratorConfig()
        assert cfg.metadata_path == DEFAULT_METADATA_DIRECTORY / DEFAULT_METADATA_FILE_NAME
        assert cfg.output_path == DEFAULT_OUTPUT_DIRECTORY / "application-spring-properties.md"
        assert cfg.fail_on_missing_metadata is True

    def test_artifact_id_drives_name_and_header(self):
        cfg = GeneratorConfig(artifact_id="billing")
        assert cfg.generated_file_name == "billing-spring-properties.md"
        assert cfg.header == "billing Spring Properties"

    def test_explicit_values_win(self):
        cfg = GeneratorConfig(artifact_id="billing", generated_file_name="props.md", header="Billing")
        assert cfg.generated_file_name == "props.md"
        assert cfg.header == "Billing"

    def test_none_values_fall_back_to_defaults(self):
        cfg = GeneratorConfig(header=None, generated_file_name=None)
        assert cfg.header == "application Spring Properties"


class TestFromEnv:

    def test_reads_prefixed_variables(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PROPDOCS_ARTIFACT_ID", "orders")
        monkeypatch.setenv("PROPDOCS_OUTPUT_DIRECTORY", str(tmp_path))
        monkeypatch.setenv("PROPDOCS_FAIL_ON_MISSING_METADATA", "false")
        cfg = GeneratorConfig.from_env(dotenv_path=tmp_path / ".env")
        assert cfg.header == "orders Spring Properties"
        assert cfg.output_directory == Path(tmp_path)
        assert cfg.fail_on_missing_metadata is False

    def test_overrides_beat_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PROPDOCS_HEADER", "From Env")
        cfg = GeneratorConfig.from_env(dotenv_path=tmp_path / ".env", header="From Args", artifact_id=None)
        assert cfg.header == "From Args"

    def test_dotenv_file_is_loaded(self, tmp_path):
        dotenv = tmp_path / ".env"
        dotenv.write_text("PROPDOCS_METADATA_FILE_NAME=custom.json\n", encoding="utf-8")
        try:
            cfg = GeneratorConfig.from_env(dotenv_path=dotenv)
        finally:
            # load_dotenv writes straight into os.environ
            os.environ.pop("PROPDOCS_METADATA_FILE_NAME", None)
        assert cfg.metadata_file_name == "custom.json"
