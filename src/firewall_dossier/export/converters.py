"""Converters - Serialize sanitized device configurations.

Every converter calls ExportSanitizer first and serializes only the returned
copy; the raw configuration is never written out.
"""

import json
import os
from datetime import datetime, timezone
from typing import Any

import yaml
from jinja2 import Environment, FileSystemLoader

from firewall_dossier import __version__
from firewall_dossier.errors import NilDeviceError, UnsupportedFormatError
from firewall_dossier.export.sanitizer import ExportSanitizer
from firewall_dossier.model.device import DeviceConfiguration
from firewall_dossier.model.serialize import to_dict


class BaseConverter:
    """Shared sanitize-then-serialize flow."""

    format_name = ""
    file_extension = ""

    def __init__(self, sanitizer: ExportSanitizer | None = None) -> None:
        self.sanitizer = sanitizer or ExportSanitizer()

    def prepare(self, device: DeviceConfiguration | None) -> DeviceConfiguration:
        if device is None:
            raise NilDeviceError()
        return self.sanitizer.prepare(device)

    def convert(self, device: DeviceConfiguration | None) -> str:
        return self.render(self.prepare(device))

    def render(self, prepared: DeviceConfiguration) -> str:
        raise NotImplementedError


class JSONConverter(BaseConverter):
    format_name = "json"
    file_extension = ".json"

    def render(self, prepared: DeviceConfiguration) -> str:
        return json.dumps(to_dict(prepared), indent=2, ensure_ascii=False)


class YAMLConverter(BaseConverter):
    format_name = "yaml"
    file_extension = ".yaml"

    def render(self, prepared: DeviceConfiguration) -> str:
        return yaml.safe_dump(
            to_dict(prepared),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )


class MarkdownConverter(BaseConverter):
    """Renders the sanitized configuration as a Markdown report."""

    format_name = "markdown"
    file_extension = ".md"

    def __init__(self, sanitizer: ExportSanitizer | None = None, template_dir: str | None = None) -> None:
        super().__init__(sanitizer)
        if template_dir is None:
            template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")

        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.template = self.env.get_template("report.md.j2")

    def render(self, prepared: DeviceConfiguration) -> str:
        return self.template.render(**self._context(prepared))

    def _context(self, prepared: DeviceConfiguration) -> dict[str, Any]:
        analysis = prepared.analysis
        finding_sections = [
            ("Dead Rules", analysis.dead_rules),
            ("Unused Interfaces", analysis.unused_interfaces),
            ("Security Issues", analysis.security_issues),
            ("Performance Issues", analysis.performance_issues),
            ("Consistency Issues", analysis.consistency_issues),
        ]
        return {
            "device": prepared,
            "stats": prepared.statistics,
            "analysis": analysis,
            "finding_sections": finding_sections,
            "severity_counts": {s.value: n for s, n in analysis.count_by_severity().items()},
            "generated_at": datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
            "version": __version__,
        }


CONVERTERS: dict[str, type[BaseConverter]] = {
    "json": JSONConverter,
    "yaml": YAMLConverter,
    "yml": YAMLConverter,
    "markdown": MarkdownConverter,
    "md": MarkdownConverter,
}


def get_converter(fmt: str, sanitizer: ExportSanitizer | None = None) -> BaseConverter:
    """Return a converter instance for a format name."""
    try:
        converter_class = CONVERTERS[fmt.lower()]
    except KeyError:
        raise UnsupportedFormatError(fmt) from None
    return converter_class(sanitizer)
