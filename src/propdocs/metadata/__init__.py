"""Configuration metadata model and loader.

Submodules:
  schema  -- frozen pydantic models (PropertyItem, HintSet, MetadataDocument, ...)
  loader  -- spring-configuration-metadata.json -> MetadataDocument
"""
