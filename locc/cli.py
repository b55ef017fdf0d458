"""CLI entry point: locc.

Subcommands:
    locc init-config -o locc.json     # Generate a config file template
    locc count [PATHS...]             # Count lines and print reports
    locc languages                    # List supported languages
    locc detect FILES...              # Show the language detected for files
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click
import structlog

from locc.api import LineCounter
from locc.collector import FileCollector
from locc.config import LoccConfig, ReportFormat
from locc.core.logging import setup_logging
from locc.detector import LanguageDetector
from locc.exceptions import LoccError
from locc.languages.registry import default_registry
from locc.reports import render

log = structlog.get_logger("locc.cli")

# Config file template
_CONFIG_TEMPLATE = {
    "include": ["**/*"],
    "exclude": ["build/**", "dist/**"],
    "formats": ["console"],
    "count_doc_strings": True,
    "count_unrecognized": True,
    "max_file_size": 8 * 1024 * 1024,
    "extensions": {},
}

_FORMAT_CHOICES = [f.value for f in ReportFormat]


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """locc: count lines of code, comments and blanks."""
    setup_logging("DEBUG" if verbose else None)


@main.command("init-config")
@click.option("-o", "--output", default="locc.json", help="Output file path")
def init_config(output: str) -> None:
    """Generate a config file template."""
    Path(output).write_text(json.dumps(_CONFIG_TEMPLATE, indent=2) + "\n")
    click.echo(f"Config template written to {output}")
    click.echo("Edit the file, then run: locc count --config " + output)


def _resolve_config(config_file: str | None, overrides: dict) -> LoccConfig:
    """Load the config file (if any) and apply command-line overrides on top."""
    base = LoccConfig.load(config_file) if config_file else LoccConfig()
    data = base.model_dump()
    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return LoccConfig.model_validate(data)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def _common_root(roots: list[Path]) -> Path:
    """Deepest directory containing every root; report paths are relative to it."""
    dirs = [r.resolve() if r.is_dir() else r.resolve().parent for r in roots]
    return Path(os.path.commonpath(dirs))


@main.command("count")
@click.argument("paths", nargs=-1, type=click.Path(exists=True))
@click.option("-c", "--config", "config_file", type=click.Path(exists=True), help="JSON config file")
@click.option("-i", "--include", multiple=True, help="Include glob (repeatable)")
@click.option("-x", "--exclude", multiple=True, help="Exclude glob (repeatable)")
@click.option(
    "-f",
    "--format",
    "formats",
    multiple=True,
    type=click.Choice(_FORMAT_CHOICES, case_sensitive=False),
    help="Report format (repeatable)",
)
@click.option("-l", "--language", default=None, help="Force a language id for every file")
@click.option("--doc-strings/--no-doc-strings", default=None, help="Count doc strings as comments")
@click.option("--unrecognized/--no-unrecognized", default=None, help="Count files of unknown language")
@click.option("-j", "--workers", type=int, default=None, help="Worker threads")
@click.option("--max-file-size", type=int, default=None, help="Skip files larger than this (bytes)")
@click.option("--project-name", default=None, help="Project name shown in reports")
def count(
    paths: tuple[str, ...],
    config_file: str | None,
    include: tuple[str, ...],
    exclude: tuple[str, ...],
    formats: tuple[str, ...],
    language: str | None,
    doc_strings: bool | None,
    unrecognized: bool | None,
    workers: int | None,
    max_file_size: int | None,
    project_name: str | None,
) -> None:
    """Count lines under PATHS (default: current directory) and print reports."""
    try:
        config = _resolve_config(
            config_file,
            {
                "include": list(include) or None,
                "exclude": list(exclude) or None,
                "formats": list(formats) or None,
                "count_doc_strings": doc_strings,
                "count_unrecognized": unrecognized,
                "workers": workers,
                "max_file_size": max_file_size,
            },
        )
        counter = LineCounter(config)
        if language is not None:
            counter.registry.require(language)

        roots = [Path(p) for p in paths] or [Path(".")]
        collector = FileCollector(config.include, config.exclude)
        files: list[Path] = []
        for root in roots:
            files.extend(collector.collect(root))
        log.debug("counting", roots=[str(r) for r in roots], files=len(files))

        summary = counter.count_files(files, language=language, root=_common_root(roots))
    except LoccError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    name = project_name or roots[0].resolve().name
    for fmt in config.formats:
        click.echo(render(summary, fmt, project_name=name, registry=counter.registry), nl=False)


@main.command("languages")
def languages() -> None:
    """List supported languages."""
    for profile in default_registry().list_all():
        extensions = ", ".join(f".{e}" for e in profile.extensions)
        click.echo(f"  {profile.id:14s} {profile.name:20s} {extensions}")


@main.command("detect")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
def detect(files: tuple[str, ...]) -> None:
    """Show the language detected for each file."""
    detector = LanguageDetector()
    for file in files:
        with open(file, encoding="utf-8", errors="replace") as fh:
            first_line = fh.readline().rstrip("\n")
        click.echo(f"{file}: {detector.detect(file, first_line=first_line)}")


if __name__ == "__main__":
    main()
