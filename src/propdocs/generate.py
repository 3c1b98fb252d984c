"""Generate a markdown reference from Spring configuration metadata.

Loads ``spring-configuration-metadata.json``, renders the property and hint
tables, and writes the markdown next to the build output.  When the metadata
cannot be loaded the run either fails (default) or logs and skips, depending
on ``fail_on_missing_metadata``.

Usage:
    python -m propdocs.generate                                   # defaults / PROPDOCS_* env vars
    python -m propdocs.generate --artifact-id my-service          # "my-service Spring Properties"
    python -m propdocs.generate --metadata-directory build/META-INF --output-directory docs
    python -m propdocs.generate --skip-on-missing-metadata        # warn instead of failing
"""

import argparse
import logging
import sys
from pathlib import Path

from propdocs.config import GeneratorConfig
from propdocs.errors import MetadataUnavailableError
from propdocs.metadata.loader import load_metadata
from propdocs.rendering.document import render_document

logger = logging.getLogger(__name__)


# ─── Output ──────────────────────────────────────────────────────────────────


def write_document(path: Path, markdown: str) -> None:
    """Write the markdown as UTF-8, creating the parent directory if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as fopen:
        fopen.write(markdown)


# ─── Main Entry Point ────────────────────────────────────────────────────────


def generate(config: GeneratorConfig) -> Path | None:
    """Run load -> render -> write.  Returns the written path, or None when skipped.

    Raises MetadataUnavailableError when the metadata cannot be loaded and
    ``config.fail_on_missing_metadata`` is set.
    """
    try:
        document = load_metadata(config.metadata_path)
    except MetadataUnavailableError as exc:
        if config.fail_on_missing_metadata:
            raise
        logger.error("%s", exc)
        logger.warning("No configuration file loaded, skipping documentation generation!")
        return None

    markdown = render_document(document, config.header)

    output_path = config.output_path
    try:
        write_document(output_path, markdown)
    except OSError as exc:
        logger.error("Unable to generate documentation! %s", exc)
        return None

    logger.info("Wrote %d properties and %d hints to %s", len(document.properties()), len(document.hints), output_path)
    return output_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate markdown docs from Spring configuration metadata.")
    parser.add_argument("--metadata-directory", type=Path, help="Directory holding the metadata file")
    parser.add_argument("--metadata-file-name", help="Metadata file name (default: spring-configuration-metadata.json)")
    parser.add_argument("--output-directory", type=Path, help="Directory for the generated markdown")
    parser.add_argument("--artifact-id", help="Artifact id used for the default file name and header")
    parser.add_argument("--generated-file-name", help="Generated markdown file name")
    parser.add_argument("--header", help="Top-level heading of the generated document")
    parser.add_argument(
        "--skip-on-missing-metadata",
        action="store_true",
        help="Log and skip instead of failing when the metadata cannot be loaded",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    config = GeneratorConfig.from_env(
        metadata_directory=args.metadata_directory,
        metadata_file_name=args.metadata_file_name,
        output_directory=args.output_directory,
        artifact_id=args.artifact_id,
        generated_file_name=args.generated_file_name,
        header=args.header,
        fail_on_missing_metadata=False if args.skip_on_missing_metadata else None,
    )

    try:
        generate(config)
    except MetadataUnavailableError as exc:
        logger.error("%s (caused by: %s)", exc, exc.__cause__)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
