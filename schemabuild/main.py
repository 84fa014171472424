"""
schemabuild — CLI entrypoint.

Usage:
    schemabuild --help
    schemabuild generate
    schemabuild generate -D skip=true
    schemabuild config check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from schemabuild import __version__
from schemabuild.core.observability.logging_config import resolve_level, setup_logging_from_env

_define_option = click.option(
    "-D",
    "--define",
    "defines",
    multiple=True,
    metavar="NAME=VALUE",
    help="Override a generation parameter (e.g. -D skip=true).",
)


@click.group()
@click.version_option(version=__version__, prog_name="schemabuild")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to schemabuild.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """schemabuild — generate types from JSON Schema as a build step."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging_from_env(resolve_level(debug=debug, verbose=verbose, quiet=quiet))


@cli.command()
@_define_option
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--mock", is_flag=True, help="Use the mock engine (nothing is generated).")
@click.option("--no-save", is_flag=True, help="Don't record the run in .state/current.json.")
@click.pass_context
def generate(
    ctx: click.Context,
    defines: tuple[str, ...],
    as_json: bool,
    mock: bool,
    no_save: bool,
) -> None:
    """Generate types from the configured JSON Schema sources.

    Examples:

        schemabuild generate

        schemabuild generate -D annotationStyle=none -D generateBuilders=true

        schemabuild generate --mock
    """
    from schemabuild.core.use_cases.generate import run_generate

    result = run_generate(
        config_path=ctx.obj.get("config_path"),
        defines=defines,
        mock_mode=mock,
        save=not no_save,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        if result.cause:
            for line in result.cause.split("\n")[:10]:
                click.echo(f"   │ {line}")
        sys.exit(1)

    report = result.report
    assert report is not None
    assert result.project is not None

    if report.skipped:
        click.secho(f"⊘ {result.project.name}: generation skipped", fg="yellow")
        return

    config = report.config
    assert config is not None  # set whenever the run was not skipped

    mode_label = "[mock] " if mock else ""
    if not ctx.obj.get("quiet"):
        click.secho(f"\n⚡ {mode_label}generate — {result.project.name}", fg="cyan", bold=True)
        for source in config.sources:
            click.echo(f"   • {source}")
        click.echo(f"   → {config.output_directory}")
        if report.augmentation and not report.augmentation.augmented:
            click.secho(
                f"   ⚠️  Project classpath not added: {report.augmentation.reason}",
                fg="yellow",
            )
        elif ctx.obj.get("verbose"):
            for path in report.context.all_paths:
                click.echo(f"     │ {path}")
        click.echo()

    click.secho(f"   ✓ Generated in {report.duration_ms}ms", fg="green", bold=True)
    click.echo()


@cli.group()
def config() -> None:
    """Build configuration commands."""


@config.command("check")
@_define_option
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, defines: tuple[str, ...], as_json: bool) -> None:
    """Validate schemabuild.yml without generating anything."""
    from schemabuild.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"), defines=defines)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        if result.project is not None:
            click.echo(f"   Project: {result.project.name}")
        if result.config is not None:
            click.echo(f"   Sources: {len(result.config.sources)}")
            click.echo(f"   Annotation style: {result.config.annotation_style}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


if __name__ == "__main__":
    cli()
