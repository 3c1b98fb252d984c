"""Markdown reference generator for Spring configuration metadata.

Subpackages:
  metadata   -- metadata model and JSON loader
  rendering  -- property/hint tables and document assembly

Modules:
  config    -- GeneratorConfig (paths, title, missing-metadata policy)
  errors    -- PropdocsError, MetadataUnavailableError
  generate  -- load -> render -> write, and the command-line entry point
"""
