"""Markdown rendering of configuration metadata.

Submodules:
  tables    -- Table model/builder, pipe-table rendering, property table
  hints     -- hint headings and Value/Description tables
  document  -- final document assembly
"""
