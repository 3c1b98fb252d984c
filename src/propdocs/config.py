"""Generator settings: where metadata is read from and where markdown goes.

Defaults follow a Maven-style build layout (``target/classes/META-INF`` in,
``target`` out).  ``GeneratorConfig.from_env`` reads ``PROPDOCS_*`` variables,
loading a ``.env`` file from the working directory first.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, model_validator

ENV_PREFIX = "PROPDOCS_"

DEFAULT_METADATA_DIRECTORY = Path("target") / "classes" / "META-INF"
DEFAULT_METADATA_FILE_NAME = "spring-configuration-metadata.json"
DEFAULT_OUTPUT_DIRECTORY = Path("target")
DEFAULT_ARTIFACT_ID = "application"

_FALSE_STRINGS = {"0", "false", "no", "off"}


class GeneratorConfig(BaseModel):
    """Paths, title, and missing-metadata policy for one generation run."""

    model_config = ConfigDict(frozen=True)

    metadata_directory: Path = DEFAULT_METADATA_DIRECTORY
    metadata_file_name: str = DEFAULT_METADATA_FILE_NAME
    output_directory: Path = DEFAULT_OUTPUT_DIRECTORY
    artifact_id: str = DEFAULT_ARTIFACT_ID
    generated_file_name: str | None = None
    header: str | None = None
    fail_on_missing_metadata: bool = True

    @model_validator(mode="before")
    @classmethod
    def fill_artifact_defaults(cls, data):
        """Derive file name and header from artifact_id when they are not given."""
        if not isinstance(data, dict):
            return data
        data = {key: value for key, value in data.items() if value is not None}
        artifact_id = data.get("artifact_id", DEFAULT_ARTIFACT_ID)
        data.setdefault("generated_file_name", f"{artifact_id}-spring-properties.md")
        data.setdefault("header", f"{artifact_id} Spring Properties")
        return data

    @property
    def metadata_path(self) -> Path:
        return self.metadata_directory / self.metadata_file_name

    @property
    def output_path(self) -> Path:
        return self.output_directory / self.generated_file_name

    @classmethod
    def from_env(cls, dotenv_path: Path | None = None, **overrides) -> "GeneratorConfig":
        """Build a config from PROPDOCS_* environment variables; non-None overrides win."""
        load_dotenv(dotenv_path if dotenv_path is not None else Path.cwd() / ".env")

        values: dict = {}
        for field_name in cls.model_fields:
            raw = os.getenv(ENV_PREFIX + field_name.upper())
            if raw is None or raw == "":
                continue
            if field_name == "fail_on_missing_metadata":
                values[field_name] = raw.strip().lower() not in _FALSE_STRINGS
            else:
                values[field_name] = raw

        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
