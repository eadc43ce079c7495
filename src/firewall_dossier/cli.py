"""
Click-based CLI for firewall-dossier.

IMPORTANT: This module only ORCHESTRATES. It never reasons or makes decisions.
- Loads settings and device documents
- Invokes the export sanitizer / converters
- Formats output
"""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from firewall_dossier import __version__
from firewall_dossier.actions.report import ReportAction, has_blocking_findings
from firewall_dossier.config import DossierSettings, SettingsManager
from firewall_dossier.errors import DossierError
from firewall_dossier.export.converters import get_converter
from firewall_dossier.export.sanitizer import ExportSanitizer
from firewall_dossier.model.loader import load_device

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("firewall_dossier")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(error: DossierError) -> None:
    err_console.print(f"[bold red]Error:[/] {error}")
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__, prog_name="firewall-dossier")
@click.option("--config", "-c", type=click.Path(), help="Path to config directory")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """firewall-dossier: statistics, findings and redacted exports for firewall configurations."""
    ctx.ensure_object(dict)
    config_mgr = SettingsManager(Path(config) if config else None)
    ctx.obj["config_mgr"] = config_mgr
    try:
        settings = config_mgr.load()
    except DossierError as e:
        if ctx.invoked_subcommand != "config":
            _fail(e)
        # `config init --force` must still be able to replace a broken file.
        ctx.obj["settings_error"] = e
        settings = DossierSettings()
    _setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj["settings"] = settings


def _settings(ctx: click.Context) -> DossierSettings:
    if ctx.obj.get("settings_error"):
        _fail(ctx.obj["settings_error"])
    return ctx.obj.get("settings") or DossierSettings()


def _prepare(ctx: click.Context, input_path: str):
    settings = _settings(ctx)
    try:
        device = load_device(input_path)
    except DossierError as e:
        _fail(e)
    return ExportSanitizer(default_device_type=settings.default_device_type).prepare(device)


def _output_path(input_path: str, output: str | None, extension: str, several: bool) -> Path | None:
    """Where one converted input goes; None means stdout.

    With several inputs, ``output`` names a directory and each input keeps
    its file stem.
    """
    if not output:
        return None
    if several:
        return Path(output) / (Path(input_path).stem + extension)
    return Path(output)


@main.command()
@click.argument("input_paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format", "-f", "fmt",
    type=click.Choice(["json", "yaml", "markdown"], case_sensitive=False),
    default=None,
    help="Output format (defaults to the configured output_format)",
)
@click.option(
    "--output", "-o", type=click.Path(),
    help="Write to this file instead of stdout (a directory when converting several inputs)",
)
@click.option("--force", is_flag=True, help="Overwrite existing output files")
@click.pass_context
def convert(
    ctx: click.Context, input_paths: tuple[str, ...], fmt: str | None, output: str | None, force: bool
) -> None:
    """Export sanitized, enriched copies of one or more device configurations."""
    settings = _settings(ctx)
    fmt = fmt or settings.output_format
    try:
        converter = get_converter(
            fmt, ExportSanitizer(default_device_type=settings.default_device_type)
        )
    except DossierError as e:
        _fail(e)

    several = len(input_paths) > 1
    for input_path in input_paths:
        target = _output_path(input_path, output, converter.file_extension, several)
        if target is not None and target.exists() and not force:
            _fail(DossierError(f"{target} already exists. Use --force to overwrite"))

        try:
            rendered = converter.convert(load_device(input_path))
        except DossierError as e:
            _fail(e)

        if target is None:
            click.echo(rendered, nl=not rendered.endswith("\n"))
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(rendered, encoding="utf-8")
        logger.info("Wrote %s export of %s to %s", fmt, input_path, target)
        console.print(f"[green]Wrote[/] {target}")


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def audit(ctx: click.Context, input_path: str) -> None:
    """Print findings and scores. Exits 1 on critical or high findings."""
    prepared = _prepare(ctx, input_path)
    reporter = ReportAction(console=console)
    reporter.report_scores(prepared)
    reporter.report_findings(prepared.analysis)
    if has_blocking_findings(prepared.analysis):
        ctx.exit(1)


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def stats(ctx: click.Context, input_path: str) -> None:
    """Print configuration statistics."""
    prepared = _prepare(ctx, input_path)
    ReportAction(console=console).report_statistics(prepared)


@main.group()
def config() -> None:
    """Manage firewall-dossier settings."""
    pass


@config.command("init")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing settings file")
@click.pass_context
def config_init(ctx: click.Context, force: bool) -> None:
    """Write a settings file holding the default values."""
    config_mgr = ctx.obj["config_mgr"]
    if config_mgr.settings_file.exists() and not force:
        _fail(DossierError(
            f"settings file already exists at {config_mgr.settings_file}. Use --force to overwrite"
        ))
    config_mgr.save(DossierSettings())
    console.print(f"[bold green]✓ Wrote settings:[/] {config_mgr.settings_file}")


@config.command("show")
@click.option("--json", "as_json", is_flag=True, help="Print the settings as JSON")
@click.pass_context
def config_show(ctx: click.Context, as_json: bool) -> None:
    """Display the effective settings."""
    settings = _settings(ctx)
    if as_json:
        click.echo(settings.model_dump_json(indent=2))
        return

    config_mgr = ctx.obj["config_mgr"]
    source = config_mgr.settings_file if config_mgr.settings_file.exists() else "built-in defaults"
    console.print(f"[dim]Source:[/] {source}")
    for name, value in settings.model_dump().items():
        console.print(f"[bold green]{name}[/]: {value}")


if __name__ == "__main__":
    main()
