"""eqmark CLI entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from eqmark.colors import BUILTIN_SCHEMES, DEFAULT_SCHEME, ColorScheme, get_scheme, load_scheme
from eqmark.errors import EqmarkError
from eqmark.parser.annotation_parser import AnnotationParser
from eqmark.parser.base import ParsedContent
from eqmark.renderer import FORMATS, export, file_extension


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def main(verbose: bool) -> None:
    """Annotate equations with colored terms and export them."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("export")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "-f",
    "format_name",
    type=click.Choice(list(FORMATS), case_sensitive=False),
    default="html",
    show_default=True,
    help="Output format",
)
@click.option(
    "--scheme",
    "-s",
    "scheme_name",
    type=click.Choice(list(BUILTIN_SCHEMES), case_sensitive=False),
    default=DEFAULT_SCHEME,
    show_default=True,
    help="Built-in color scheme",
)
@click.option(
    "--scheme-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON palette file; overrides --scheme",
)
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None, help="Output path")
@click.option("--strict", is_flag=True, help="Refuse to export when validation reports errors")
def export_command(
    input_path: Path,
    format_name: str,
    scheme_name: str,
    scheme_file: Path | None,
    output: Path | None,
    strict: bool,
) -> None:
    """Export an annotated markdown file to HTML, LaTeX, Beamer or Typst."""
    format_name = format_name.lower()
    content = AnnotationParser().parse_file(input_path)
    _echo_diagnostics(content)
    if strict and content.errors:
        raise click.ClickException(f"{input_path.name} has {len(content.errors)} validation error(s)")

    try:
        scheme = _select_scheme(scheme_name.lower(), scheme_file)
        document = export(format_name, content, scheme)
    except EqmarkError as exc:
        raise click.ClickException(str(exc)) from exc

    if output is None:
        output = _default_output(input_path, format_name)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document, encoding="utf-8")

    click.echo(f"Exported: {output}")


@main.command("validate")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
def validate_command(paths: tuple[Path, ...]) -> None:
    """Check annotated markdown files (or directories of them) for term mismatches."""
    files = _collect_markdown(paths)
    if not files:
        raise click.ClickException("No markdown files found")

    parser = AnnotationParser()
    failed = 0
    for path in files:
        content = parser.parse_file(path)
        click.echo(f"{path}: {content.title or '(no title)'}, {len(content.term_order)} terms")
        _echo_diagnostics(content)
        if content.errors:
            failed += 1

    if failed:
        raise click.ClickException(f"{failed} of {len(files)} file(s) failed validation")
    click.echo(f"All {len(files)} file(s) valid")


@main.command("schemes")
def schemes_command() -> None:
    """List the built-in color schemes."""
    for key, scheme in BUILTIN_SCHEMES.items():
        click.echo(f"{key}: {scheme.name} ({len(scheme)} colors)")


def _select_scheme(scheme_name: str, scheme_file: Path | None) -> ColorScheme:
    if scheme_file is not None:
        return load_scheme(scheme_file)
    return get_scheme(scheme_name)


def _default_output(input_path: Path, format_name: str) -> Path:
    suffix = "-beamer" if format_name == "beamer" else ""
    return input_path.with_name(f"{input_path.stem}{suffix}{file_extension(format_name)}")


def _echo_diagnostics(content: ParsedContent) -> None:
    for message in content.errors:
        click.echo(f"  error: {message}", err=True)
    for message in content.warnings:
        click.echo(f"  warning: {message}", err=True)


def _collect_markdown(paths: tuple[Path, ...]) -> list[Path]:
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(path.glob("*.md")))
        else:
            files.append(path)
    return files


if __name__ == "__main__":  # pragma: no cover
    main()
