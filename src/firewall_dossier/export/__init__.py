"""Export package - Sanitization and serialization of device configurations."""

from firewall_dossier.export.converters import (
    JSONConverter,
    MarkdownConverter,
    YAMLConverter,
    get_converter,
)
from firewall_dossier.export.sanitizer import ExportSanitizer

__all__ = [
    "ExportSanitizer",
    "JSONConverter",
    "MarkdownConverter",
    "YAMLConverter",
    "get_converter",
]
