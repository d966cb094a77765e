"""File I/O related utilities.

This package groups small modules that deal with writing generated files,
rendering templates and formatting file-backed diagnostics.
"""

from .output_writer import ensure_directory, write_generated_file
from .source_location import SourceLocation, format_source, lookup_source
from .template_renderer import TemplateRenderer

__all__ = [
    "ensure_directory",
    "write_generated_file",
    "SourceLocation",
    "format_source",
    "lookup_source",
    "TemplateRenderer",
]
